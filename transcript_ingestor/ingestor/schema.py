# transcript_ingestor/ingestor/schema.py
"""
Authoritative output contract for the transcript ingestor.

A pipeline run returns exactly one of:
- FetchFailure: the watch page itself could not be retrieved
- VideoDetails: title and transcript, always strings

Everything short of a failed page fetch is reported through the fixed
sentinel strings below, inside VideoDetails.
"""

from __future__ import annotations

from typing import Any, Dict, Union

from pydantic import BaseModel, ConfigDict, Field


FETCH_FAILED = "Unable to fetch video details."
VIDEO_NOT_FOUND = "Video not found"
NO_CAPTIONS = "No captions available."
NO_LANGUAGE_MATCH = "Captions not available for the selected language."
TRANSCRIPT_FETCH_FAILED = "Error fetching transcript."
MISSING_VIDEO_ID = "Missing video_id parameter"
INVALID_CONFIGURATION = "Invalid configuration."

NOT_FOUND_MARKER = "404 Not Found"


class FetchFailure(BaseModel):
    """Terminal result when the watch page could not be fetched."""
    error: str = FETCH_FAILED
    message: str

    model_config = ConfigDict(frozen=True)


class VideoDetails(BaseModel):
    """Title and transcript of a video; sentinels stand in for missing data."""
    video_title: str = Field(alias="videoTitle")
    transcript: str

    model_config = ConfigDict(frozen=True, populate_by_name=True)


PipelineResult = Union[FetchFailure, VideoDetails]


def to_payload(result: PipelineResult) -> Dict[str, Any]:
    """Wire shape of a result: camelCase keys, nothing else."""
    return result.model_dump(by_alias=True)


def missing_video_id_payload() -> Dict[str, Any]:
    return {"error": MISSING_VIDEO_ID}


def configuration_error_payload(detail: str) -> Dict[str, Any]:
    return {"error": INVALID_CONFIGURATION, "message": detail}
