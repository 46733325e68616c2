from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Iterator

from silence_splitter.core.exceptions import DiscoveryError

class IFileWalker(ABC):
    """
    Contract for traversing a filesystem.
    Abstracts os.walk vs pathlib.
    """
    @abstractmethod
    def walk(self, root: Path, on_error: Callable[[DiscoveryError], None]) -> Iterator[Path]:
        """
        Yields every non-directory path under root, recursively.
        Unreadable subtrees are skipped and reported through on_error.
        """
        pass
