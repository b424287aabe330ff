"""
Shared helpers for pipeline steps.

Step names used in structured logs are defined here so the runner and
any log consumer agree on them.
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Callable, Iterator


FETCH_PAGE = "fetch_page"
EXTRACT_TITLE = "extract_title"
LOCATE_TRACKS = "locate_tracks"
SELECT_TRACK = "select_track"
FETCH_TRANSCRIPT = "fetch_transcript"
FORMAT_TRANSCRIPT = "format_transcript"


@contextmanager
def timer() -> Iterator[Callable[[], float]]:
    """
    Context manager that provides an end() function returning elapsed milliseconds.

    Usage:
        with timer() as end:
            do_work()
        execution_time_ms = end()
    """
    start = time.perf_counter()

    def end() -> float:
        return round((time.perf_counter() - start) * 1000, 3)

    yield end
