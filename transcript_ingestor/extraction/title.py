# transcript_ingestor/extraction/title.py
"""Page title extraction."""

from __future__ import annotations

import html
import re


UNKNOWN_TITLE = "Unknown Title"
SITE_SUFFIX = " - YouTube"

TITLE_REGEX = re.compile(r"<title>(.*?)</title>")


def extract_title(page: str) -> str:
    """Return the decoded text of the first <title> element, minus the site suffix."""
    match = TITLE_REGEX.search(page)
    if not match:
        return UNKNOWN_TITLE

    title = html.unescape(match.group(1))
    return title.replace(SITE_SUFFIX, "")
