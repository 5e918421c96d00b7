"""Storage API: upload, download, list and delete files."""

from __future__ import annotations

from typing import Optional

from schlep_sdk.api._base import MaybeAwaitable, SubClient, file_part
from schlep_sdk.models import FileMetadata, FileUploadResponse, ListParams, PaginatedResponse
from schlep_sdk.utils import build_path, require


class StorageClient(SubClient):
    """Client for the Storage API.

    Usage::

        uploaded = client.storage.upload_file(b"a,b\\n1,2\\n", "data.csv")
        content = client.storage.download_file(uploaded.file_id)
    """

    def upload_file(
        self,
        file: bytes,
        filename: str,
        content_type: Optional[str] = None,
    ) -> MaybeAwaitable[FileUploadResponse]:
        """POST /storage/upload (multipart)"""
        return self._executor.execute_multipart(
            "/storage/upload",
            FileUploadResponse,
            files={"file": file_part(file, require("filename", filename), content_type)},
        )

    def download_file(self, file_id: str) -> MaybeAwaitable[bytes]:
        """GET /storage/files/{file_id}/download, returned as raw bytes."""
        path = build_path("/storage/files/{file_id}/download", file_id=file_id)
        return self._executor.download(path)

    def list_files(
        self,
        params: Optional[ListParams] = None,
        *,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
        offset: Optional[int] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        status: Optional[str] = None,
    ) -> MaybeAwaitable[PaginatedResponse[FileMetadata]]:
        """GET /storage/files"""
        return self._list(
            "/storage/files", FileMetadata, params,
            limit=limit, cursor=cursor, offset=offset,
            page=page, page_size=page_size, status=status,
        )

    def delete_file(self, file_id: str) -> MaybeAwaitable[None]:
        """DELETE /storage/files/{file_id}"""
        path = build_path("/storage/files/{file_id}", file_id=file_id)
        return self._executor.execute("DELETE", path, expect_body=False)
