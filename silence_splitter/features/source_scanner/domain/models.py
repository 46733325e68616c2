from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, List

from silence_splitter.core.config.settings import settings
from silence_splitter.core.exceptions import DiscoveryError

@dataclass(frozen=True)
class ScanRequest:
    """
    Intent to scan one root directory for audio files.
    The root is not validated here: a missing root is reported as a
    discovery error by the walk, not raised.
    """
    root_path: Path
    extensions: FrozenSet[str] = settings.INPUT_EXTENSIONS

@dataclass
class ScanSummary:
    """
    Report returned after scanning one root completes.
    """
    root_path: Path
    files_found: int = 0
    errors: List[DiscoveryError] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return not self.errors
