from pathlib import Path
from typing import List, Optional

from silence_splitter.core.tools.locator import ToolConfig
from silence_splitter.features.silence_detection.domain.models import Segment
from ..domain.models import ExportConfig, ExportResult
from ..data.ffmpeg_adapter import FFmpegSegmentExporter

def export_segments(source_path: str, segments: List[Segment], tools: ToolConfig,
                    config: Optional[ExportConfig] = None) -> ExportResult:
    """
    Public Service API: Write each segment of a file next to it.

    Args:
        source_path: Path to the original audio file.
        segments: Ordered segments to cut.
        tools: Resolved ffmpeg location.
        config: Output naming settings.
    """
    adapter = FFmpegSegmentExporter(tools, config)
    return adapter.export_segments(Path(source_path), segments)
