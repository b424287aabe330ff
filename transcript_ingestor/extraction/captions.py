# transcript_ingestor/extraction/captions.py
"""
Caption track discovery and language selection.
Single responsibility: turn watch-page markup into an ordered track list,
then pick one track for a language.
"""

from __future__ import annotations

import json
import logging
import re
from typing import List, Optional

from pydantic import ValidationError

from transcript_ingestor.extraction.schema import CaptionTrack
from transcript_ingestor.logging_core.logger import log_event


STAGE_NAME = "locate_tracks"

# First listing only; stops at the first closing bracket.
CAPTION_TRACKS_REGEX = re.compile(r'"captionTracks":(\[.*?\])')


def locate_tracks(
    page: str,
    logger: logging.LoggerAdapter | logging.Logger | None = None,
) -> Optional[List[CaptionTrack]]:
    """
    Return the embedded caption tracks in source order.

    None means no usable listing: the marker is missing, or the captured
    text does not decode to a JSON array. Never raises.
    Pass the run logger to get decode problems tagged with the run_id.
    """
    logger = logger or logging.getLogger(__name__)

    match = CAPTION_TRACKS_REGEX.search(page)
    if not match:
        return None

    try:
        raw_tracks = json.loads(match.group(1))
    except (ValueError, RecursionError) as exc:
        log_event(
            logger,
            logging.DEBUG,
            "captionTracks listing could not be decoded",
            stage_name=STAGE_NAME,
            event_type="decode_error",
            metadata={"error": exc.__class__.__name__, "detail": str(exc)[:200]},
        )
        return None

    if not isinstance(raw_tracks, list):
        return None

    tracks: List[CaptionTrack] = []
    for index, item in enumerate(raw_tracks):
        if not isinstance(item, dict):
            continue
        try:
            tracks.append(CaptionTrack.model_validate(item))
        except ValidationError as exc:
            log_event(
                logger,
                logging.DEBUG,
                "Skipping malformed caption track",
                stage_name=STAGE_NAME,
                event_type="skip",
                metadata={"index": index, "errors": exc.error_count()},
            )

    return tracks


def select_track(tracks: List[CaptionTrack], lang: str) -> Optional[CaptionTrack]:
    """
    Return the first track whose vssId mentions the language.

    Both manual (".en") and auto-generated ("a.en") identifiers match.
    A first match without a baseUrl yields None; later tracks are not tried.
    An empty baseUrl still counts as present.
    """
    manual, generated = f".{lang}", f"a.{lang}"

    for track in tracks:
        vss_id = track.vss_id or ""
        if manual in vss_id or generated in vss_id:
            return track if track.base_url is not None else None

    return None
