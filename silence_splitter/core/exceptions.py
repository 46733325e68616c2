# File: silence_splitter/core/exceptions.py

from pathlib import Path
from typing import Optional


class SilenceSplitterError(Exception):
    """Base exception for all silence_splitter errors."""


class ToolNotFoundError(SilenceSplitterError):
    """Raised at startup when the ffmpeg binary cannot be located."""


class DiscoveryError(SilenceSplitterError):
    """
    A directory walk hit an unreadable path.
    Non-fatal: the affected subtree is skipped and the error is reported.
    """

    def __init__(self, path: Path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Error walking the path {path}: {cause}")


class ProbeError(SilenceSplitterError):
    """
    The silence analyzer could not be launched or exited non-zero.
    Carries whatever diagnostic output was captured before the failure.
    """

    def __init__(self, path: Path, cause: str, output: Optional[str] = None):
        self.path = path
        self.cause = cause
        self.output = output or ""
        message = f"Error detecting silence in {path}: {cause}"
        if self.output:
            message += f"\nffmpeg output: {self.output}"
        super().__init__(message)


class NoSilenceDetected(SilenceSplitterError):
    """Analysis succeeded but produced no usable segment pairing."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"No silence detected in file: {path}")


class ExportError(SilenceSplitterError):
    """The encoder failed on a specific segment. Earlier segments stay on disk."""

    def __init__(self, path: Path, segment_index: int, cause: str):
        self.path = path
        self.segment_index = segment_index
        self.cause = cause
        super().__init__(f"Error processing segment {segment_index} of {path}: {cause}")
