import logging
from pathlib import Path
from typing import Callable, Optional

from silence_splitter.core.exceptions import DiscoveryError

from ..domain.interfaces import IFileWalker
from ..domain.models import ScanRequest, ScanSummary
from ..data.file_walker import LocalFileWalker
from ..data.selection_rules import SelectionRules

logger = logging.getLogger(__name__)

class DirectoryScanner:
    """
    Service responsible for discovering candidate audio files under one root.
    """

    def __init__(self, walker: Optional[IFileWalker] = None):
        self.walker = walker or LocalFileWalker()

    def scan(self, request: ScanRequest, sink: Callable[[Path], None]) -> ScanSummary:
        """
        Walks the root and passes every matching file to `sink` in discovery order.
        `sink` may block (e.g. a full queue); the walk simply waits.
        """
        summary = ScanSummary(root_path=request.root_path)
        logger.info(f"Starting scan of: {request.root_path}")

        def record_error(error: DiscoveryError):
            logger.error(str(error))
            summary.errors.append(error)

        for file_path in self.walker.walk(request.root_path, record_error):
            if not SelectionRules.should_select(file_path, request.extensions):
                continue

            sink(file_path)
            summary.files_found += 1

        logger.info(f"Scan complete. Found {summary.files_found} files in {request.root_path}")
        return summary
