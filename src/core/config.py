"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking them into the CLI.
- Settings are built once at start-up and handed to adapters explicitly,
  so nothing reads the process environment mid-walk.
"""

from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_BASE_URL = "https://sourcegraph.com/.api"
DEFAULT_TARGET_FILE = ".gitpod.yml"
DEFAULT_PAGE_SIZE = 100


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typing + validation at the edge (env vars) without polluting the Core.
    - A single configuration contract for CLI and adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="REPO_WALKER_",
        extra="ignore",
        case_sensitive=False,
    )

    api_base_url: str = Field(
        default=DEFAULT_API_BASE_URL,
        min_length=8,
        description="Base URL of the code host API; requests go to `<base>/graphql`.",
    )
    access_token: str | None = Field(
        default=None,
        validation_alias=AliasChoices("REPO_WALKER_ACCESS_TOKEN", "SOURCEGRAPH_TOKEN", "access_token"),
        description="Bearer token sent in the Authorization header.",
    )
    target_file: str = Field(
        default=DEFAULT_TARGET_FILE,
        min_length=1,
        description="File name looked up at each repository root.",
    )
    page_size: int = Field(
        default=DEFAULT_PAGE_SIZE,
        ge=1,
        le=1000,
        description="How many organizations/repositories are requested per listing (first page only).",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout per request (seconds). Unset means no timeout.",
    )
    user_agent: str = Field(
        default="repo-walker/0.1",
        min_length=1,
        description="User-Agent for API requests.",
    )

    @property
    def graphql_url(self) -> str:
        return self.api_base_url.rstrip("/") + "/graphql"

    def with_overrides(self, **values: object) -> "AppSettings":
        """Return a copy with the non-None `values` applied (CLI flags)."""

        updates = {key: value for key, value in values.items() if value is not None}
        if not updates:
            return self
        return self.__class__(**{**self.model_dump(), **updates})
