from pathlib import Path
from typing import Iterable

class SelectionRules:
    """
    Central logic for which files the scanner hands to the pipeline.
    """

    @classmethod
    def normalize_extensions(cls, extensions: Iterable[str]) -> frozenset:
        """Lower-cases and dot-prefixes: {"MP3", ".Wav"} -> {".mp3", ".wav"}"""
        return frozenset(
            ext.lower() if ext.startswith(".") else f".{ext.lower()}"
            for ext in extensions
        )

    @classmethod
    def should_select(cls, path: Path, extensions: Iterable[str]) -> bool:
        """
        Returns True for a non-directory whose extension matches, ignoring case.
        a.MP3, a.mp3 and a.Mp3 match ".mp3"; a.mp3x does not.
        """
        if path.is_dir():
            return False
        return path.suffix.lower() in cls.normalize_extensions(extensions)
