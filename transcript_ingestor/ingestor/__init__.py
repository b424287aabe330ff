from transcript_ingestor.ingestor.runner import DEFAULT_LANG, get_video_details
from transcript_ingestor.ingestor.schema import FetchFailure, PipelineResult, VideoDetails, to_payload

__all__ = ["DEFAULT_LANG", "FetchFailure", "PipelineResult", "VideoDetails", "get_video_details", "to_payload"]
