"""Users API: the caller's profile and API keys."""

from __future__ import annotations

from typing import Any, Dict, Optional

from schlep_sdk.api._base import MaybeAwaitable, SubClient
from schlep_sdk.models import ApiKeyInfo, ListParams, PaginatedResponse, UserProfile
from schlep_sdk.utils import build_path, require


class UsersClient(SubClient):
    def get_profile(self) -> MaybeAwaitable[UserProfile]:
        """GET /users/profile"""
        return self._executor.execute("GET", "/users/profile", UserProfile)

    def update_profile(self, updates: Dict[str, Any]) -> MaybeAwaitable[UserProfile]:
        """PUT /users/profile"""
        return self._executor.execute("PUT", "/users/profile", UserProfile, json=updates)

    def list_api_keys(
        self,
        params: Optional[ListParams] = None,
        *,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
        offset: Optional[int] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        status: Optional[str] = None,
    ) -> MaybeAwaitable[PaginatedResponse[ApiKeyInfo]]:
        """GET /users/api-keys"""
        return self._list(
            "/users/api-keys", ApiKeyInfo, params,
            limit=limit, cursor=cursor, offset=offset,
            page=page, page_size=page_size, status=status,
        )

    def create_api_key(self, name: str) -> MaybeAwaitable[ApiKeyInfo]:
        """POST /users/api-keys"""
        return self._executor.execute(
            "POST", "/users/api-keys", ApiKeyInfo, json={"name": require("name", name)},
        )

    def revoke_api_key(self, key_id: str) -> MaybeAwaitable[None]:
        """DELETE /users/api-keys/{key_id}"""
        path = build_path("/users/api-keys/{key_id}", key_id=key_id)
        return self._executor.execute("DELETE", path, expect_body=False)
