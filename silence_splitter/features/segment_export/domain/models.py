from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from silence_splitter.core.config.settings import settings

@dataclass(frozen=True)
class ExportConfig:
    """
    Output parameters for segment export.
    Segments are stream-copied, so the extension must match the source codec.
    """
    output_extension: str = settings.OUTPUT_EXTENSION
    index_width: int = 3

@dataclass
class ExportResult:
    """
    The files written for one source, in segment index order.
    """
    source_path: Path
    output_paths: List[Path] = field(default_factory=list)

    @property
    def segment_count(self) -> int:
        return len(self.output_paths)
