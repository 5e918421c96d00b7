"""API key handling for the Schlep-engine SDK."""

from __future__ import annotations

from typing import Dict


def build_auth_headers(api_key: str) -> Dict[str, str]:
    """Return the bearer Authorization header for api_key."""
    return {"Authorization": f"Bearer {api_key}"}
