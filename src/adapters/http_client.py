"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts, headers and authentication for every API call.
- Makes testing easy: respx intercepts the transport of any client built here.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_client(
    settings: AppSettings,
    *,
    extra_headers: dict[str, str] | None = None,
) -> httpx.Client:
    """Create an `httpx.Client` for the code host API.

    Why a builder:
    - Centralizes timeout/headers so every query behaves the same.
    - The bearer token comes from the settings handed in, never from the environment.
    """

    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
        "Content-Type": "application/json",
    }
    if settings.access_token:
        headers["Authorization"] = f"Bearer {settings.access_token}"
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
    )
