from __future__ import annotations


class TranscriptIngestorError(Exception):
    """Base error for the transcript ingestor."""


class ConfigurationError(TranscriptIngestorError, ValueError):
    """Raised when ingestor or transport settings are invalid."""
