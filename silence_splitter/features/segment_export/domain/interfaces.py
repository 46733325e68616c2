from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from silence_splitter.features.silence_detection.domain.models import Segment
from .models import ExportResult

class ISegmentExporter(ABC):
    """
    Contract for materializing segments as separate files.
    Abstracts away the underlying tool (FFmpeg) from the business logic.
    """

    @abstractmethod
    def export_segments(self, source_path: Path, segments: List[Segment]) -> ExportResult:
        """
        Writes one output file per segment, strictly in index order.

        Args:
            source_path: The original audio file.
            segments: Ordered segments derived from silence analysis.

        Raises:
            ExportError: On the first segment that fails. Files already
                written for earlier segments are left in place.
        """
        pass
