"""Pydantic models for git resource configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gitresource.utils.paths import expand_path


class GitResourceSettings(BaseModel):
    """Settings shared by every download."""

    model_config = ConfigDict(validate_default=True)

    download_root: str = Field(
        default="~/.cache/gitresource/downloads",
        description="Directory used when a caller passes an empty destination",
    )
    api_url: str = Field(
        default="https://api.github.com", description="Root URL of the GitHub API"
    )
    timeout_seconds: float = Field(
        default=30.0, gt=0, description="HTTP request timeout in seconds"
    )
    user_agent: str = Field(
        default="gitresource/0.1", description="User-Agent header sent to the API"
    )
    log_level: Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Level used by enable_logging"
    )

    @field_validator("download_root")
    @classmethod
    def expand_download_root(cls, v: str) -> str:
        """Expand ~ and relative segments in the download root."""
        if not v.strip():
            raise ValueError("download_root must not be empty")
        return str(expand_path(v))

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Validate the API URL is http(s)."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"api_url must start with http:// or https://: {v}")
        return v.rstrip("/")
