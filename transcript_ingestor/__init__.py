"""Title and caption transcript extraction for public YouTube videos."""

from transcript_ingestor.ingestor import FetchFailure, VideoDetails, get_video_details

__all__ = ["FetchFailure", "VideoDetails", "get_video_details"]
__version__ = "0.1.0"
