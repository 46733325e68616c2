from dataclasses import dataclass
from pathlib import Path

@dataclass(frozen=True)
class MediaFile:
    """
    Entity representing an audio file on the filesystem.
    Identified by its path; never mutated after discovery.
    """
    path: Path

    def __post_init__(self):
        if str(self.path).strip() == "." or str(self.path).strip() == "":
             raise ValueError("File path cannot be empty.")

    @property
    def stem(self) -> str:
        """Basename without the final extension."""
        return self.path.stem

    @property
    def directory(self) -> Path:
        return self.path.parent

    def sibling(self, filename: str) -> "MediaFile":
        """A file with the given name in the same directory."""
        return MediaFile(self.directory / filename)
