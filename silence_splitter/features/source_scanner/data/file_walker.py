import os
from pathlib import Path
from typing import Callable, Iterator

from silence_splitter.core.exceptions import DiscoveryError
from ..domain.interfaces import IFileWalker

class LocalFileWalker(IFileWalker):
    """
    Concrete implementation using standard os.walk for efficiency.
    """

    def walk(self, root: Path, on_error: Callable[[DiscoveryError], None]) -> Iterator[Path]:
        def report(err: OSError):
            # os.walk skips the directory it could not list and carries on with the rest
            failed_path = Path(err.filename) if err.filename else root
            on_error(DiscoveryError(failed_path, err))

        for dirpath, dirnames, filenames in os.walk(root, onerror=report):
            for filename in filenames:
                yield Path(dirpath) / filename
