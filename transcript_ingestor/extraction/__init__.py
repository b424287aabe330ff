from transcript_ingestor.extraction.captions import locate_tracks, select_track
from transcript_ingestor.extraction.fetcher import Fetcher
from transcript_ingestor.extraction.formatter import format_transcript
from transcript_ingestor.extraction.schema import CaptionTrack, FetchResult, IngestorConfig
from transcript_ingestor.extraction.title import extract_title

__all__ = [
    "CaptionTrack",
    "FetchResult",
    "Fetcher",
    "IngestorConfig",
    "extract_title",
    "format_transcript",
    "locate_tracks",
    "select_track",
]
