# transcript_ingestor/extraction/formatter.py
"""
Timed-text payload to plain text.

The payload is treated as text, not parsed as XML: the wrapper is removed by
literal match, segments are split on their closing tag, and any remaining
markup is stripped. Start times and durations are discarded.
"""

from __future__ import annotations

import html
import re


TRANSCRIPT_WRAPPER_OPEN = '<?xml version="1.0" encoding="utf-8" ?><transcript>'
TRANSCRIPT_WRAPPER_CLOSE = "</transcript>"
SEGMENT_CLOSE = "</text>"

TAG_REGEX = re.compile(r"<[^>]+>")


def format_transcript(payload: str) -> str:
    """Return one line per non-blank segment, entity-decoded."""
    for wrapper in (TRANSCRIPT_WRAPPER_OPEN, TRANSCRIPT_WRAPPER_CLOSE):
        payload = payload.replace(wrapper, "")

    lines = []
    for fragment in payload.split(SEGMENT_CLOSE):
        text = TAG_REGEX.sub("", fragment)
        if text.strip():
            lines.append(html.unescape(text) + "\n")

    return "".join(lines).strip()
