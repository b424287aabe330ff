# transcript_ingestor/ingestor/runner.py
"""
Orchestration runner for the transcript ingestor.

Responsibilities:
- Fetch the watch page and short-circuit on failure or "not found"
- Extract the title and caption track listing
- Select, fetch and format one caption track
- Log every step with the run_id and timing

Only a failed page fetch is a hard failure. Every later problem is reported
as a sentinel string in the transcript field.
"""

from __future__ import annotations

import logging
import uuid
from typing import Optional

from transcript_ingestor.extraction import (
    Fetcher,
    IngestorConfig,
    extract_title,
    format_transcript,
    locate_tracks,
    select_track,
)
from transcript_ingestor.ingestor import base
from transcript_ingestor.ingestor.base import timer
from transcript_ingestor.ingestor.schema import (
    NO_CAPTIONS,
    NO_LANGUAGE_MATCH,
    NOT_FOUND_MARKER,
    TRANSCRIPT_FETCH_FAILED,
    VIDEO_NOT_FOUND,
    FetchFailure,
    PipelineResult,
    VideoDetails,
)
from transcript_ingestor.logging_core.logger import RunLogger, get_logger, log_event


DEFAULT_LANG = "en"


def get_video_details(
    video_id: str,
    lang: str = DEFAULT_LANG,
    config: Optional[IngestorConfig] = None,
    fetcher: Optional[Fetcher] = None,
    run_id: Optional[uuid.UUID] = None,
) -> PipelineResult:
    """
    Fetch title and transcript for a video.

    Args:
        video_id: Opaque video identifier, inserted into the watch URL as-is
        lang: Language code matched against caption track identifiers
        config: Transport settings; ignored when a fetcher is supplied
        fetcher: Fetcher to use (tests inject one with a mock transport)
        run_id: Correlation id for logs; generated when omitted

    Returns:
        FetchFailure if the watch page could not be retrieved, else VideoDetails.
    """
    run_id = run_id or uuid.uuid4()
    logger = get_logger(run_id)
    fetcher = fetcher or Fetcher(config)

    page_url = fetcher.config.page_url(video_id)
    log_event(
        logger,
        logging.INFO,
        "Starting video details extraction",
        event_type="pipeline_start",
        metadata={"video_id": video_id, "lang": lang},
    )

    with timer() as end:
        page = fetcher.fetch(page_url)

    if not page.success:
        log_event(
            logger,
            logging.ERROR,
            "Watch page fetch failed",
            stage_name=base.FETCH_PAGE,
            event_type="failure",
            metadata={"url": page_url, "cause": page.cause, "execution_time_ms": end()},
        )
        return FetchFailure(message=page.error or "")

    log_event(
        logger,
        logging.INFO,
        "Watch page fetched",
        stage_name=base.FETCH_PAGE,
        event_type="success",
        metadata={"status_code": page.status_code, "bytes": len(page.body), "execution_time_ms": end()},
    )

    if NOT_FOUND_MARKER in page.body:
        log_event(
            logger,
            logging.WARNING,
            "Watch page reports video not found",
            stage_name=base.FETCH_PAGE,
            event_type="not_found",
        )
        return VideoDetails(video_title=VIDEO_NOT_FOUND, transcript=VIDEO_NOT_FOUND)

    title = extract_title(page.body)
    log_event(
        logger,
        logging.INFO,
        "Title extracted",
        stage_name=base.EXTRACT_TITLE,
        event_type="success",
        metadata={"title": title},
    )

    transcript = _resolve_transcript(page.body, lang, fetcher, logger)

    log_event(logger, logging.INFO, "Video details extraction completed", event_type="pipeline_success")
    return VideoDetails(video_title=title, transcript=transcript)


def _resolve_transcript(page: str, lang: str, fetcher: Fetcher, logger: RunLogger) -> str:
    """Walk locate → select → fetch → format, returning a sentinel at the first gap."""
    tracks = locate_tracks(page, logger)
    if tracks is None:
        log_event(logger, logging.WARNING, "No caption listing on page", stage_name=base.LOCATE_TRACKS, event_type="failure")
        return NO_CAPTIONS

    track = select_track(tracks, lang)
    if track is None:
        log_event(
            logger,
            logging.WARNING,
            "No caption track for language",
            stage_name=base.SELECT_TRACK,
            event_type="failure",
            metadata={"lang": lang, "available": [t.vss_id for t in tracks]},
        )
        return NO_LANGUAGE_MATCH

    log_event(
        logger,
        logging.INFO,
        "Caption track selected",
        stage_name=base.SELECT_TRACK,
        event_type="success",
        metadata={"vss_id": track.vss_id, "track_count": len(tracks)},
    )

    with timer() as end:
        payload = fetcher.fetch(track.base_url)

    if not payload.success:
        log_event(
            logger,
            logging.WARNING,
            "Caption payload fetch failed",
            stage_name=base.FETCH_TRANSCRIPT,
            event_type="failure",
            metadata={"cause": payload.cause, "execution_time_ms": end()},
        )
        return TRANSCRIPT_FETCH_FAILED

    transcript = format_transcript(payload.body)
    log_event(
        logger,
        logging.INFO,
        "Transcript formatted",
        stage_name=base.FORMAT_TRANSCRIPT,
        event_type="success",
        metadata={"chars": len(transcript), "execution_time_ms": end()},
    )
    return transcript


# High-Level Intent
# runner.py turns a video id into a title/transcript pair. It owns the
# fallback tree and nothing else: extraction lives in transcript_ingestor.extraction,
# transport in Fetcher, wire shape in schema.

# Data Flow
# entry point → get_video_details(video_id, lang, config)
# → Fetcher.fetch(watch url) → "404 Not Found"? → extract_title
# → locate_tracks → select_track → Fetcher.fetch(baseUrl) → format_transcript
# → VideoDetails

# Edge Cases & Failure Scenarios
# Page fetch fails → FetchFailure, nothing else attempted.
# Page body mentions "404 Not Found" anywhere → both fields "Video not found".
# Listing missing or undecodable → "No captions available."
# Listing empty, no language match, or match without baseUrl → language sentinel.
# Payload fetch fails → "Error fetching transcript."
