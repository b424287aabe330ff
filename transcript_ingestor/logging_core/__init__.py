from transcript_ingestor.logging_core.logger import configure_logging, get_logger, log_event

__all__ = ["configure_logging", "get_logger", "log_event"]
