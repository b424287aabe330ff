# transcript_ingestor/extraction/schema.py
"""
Shared contracts for the extraction subsystem.
Single responsibility: define config, fetch result and caption track types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from transcript_ingestor.errors import ConfigurationError


DEFAULT_WATCH_URL = "https://www.youtube.com/watch?v={video_id}"


@dataclass
class IngestorConfig:
    """Transport and source settings for one pipeline invocation."""
    verify_tls: bool = True
    timeout: Optional[float] = None  # seconds; None keeps the httpx default
    watch_url: str = DEFAULT_WATCH_URL  # must contain {video_id}

    def __post_init__(self) -> None:
        if "{video_id}" not in self.watch_url:
            raise ConfigurationError(f"watch_url must contain '{{video_id}}': {self.watch_url}")
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigurationError(f"timeout must be positive or None, got {self.timeout}")

    def page_url(self, video_id: str) -> str:
        return self.watch_url.replace("{video_id}", video_id)


@dataclass
class FetchResult:
    """Outcome of a single outbound fetch. success=False means no body at all."""
    success: bool
    body: str = ""
    status_code: Optional[int] = None
    error: Optional[str] = None  # user-facing failure detail
    cause: Optional[str] = None  # transport exception text


class CaptionTrack(BaseModel):
    """One entry of the caption track listing embedded in the watch page."""
    vss_id: Optional[str] = Field(default=None, alias="vssId")
    base_url: Optional[str] = Field(default=None, alias="baseUrl")
    language_code: Optional[str] = Field(default=None, alias="languageCode")
    kind: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    @field_validator("vss_id", mode="before")
    @classmethod
    def _numeric_vss_id_as_text(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value
