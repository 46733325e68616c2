from pathlib import Path
from typing import Optional

from silence_splitter.core.tools.locator import ToolConfig
from silence_splitter.features.silence_detection.data.ffmpeg_probe import FFmpegSilenceProbe
from silence_splitter.features.silence_detection.domain.models import DetectionConfig
from silence_splitter.features.segment_export.data.ffmpeg_adapter import FFmpegSegmentExporter
from silence_splitter.features.segment_export.domain.models import ExportConfig

from ..domain.models import Outcome
from .processor import FileProcessor

def build_file_processor(tools: ToolConfig,
                         detection: Optional[DetectionConfig] = None,
                         export: Optional[ExportConfig] = None) -> FileProcessor:
    """Wires the ffmpeg adapters into a FileProcessor."""
    return FileProcessor(
        probe=FFmpegSilenceProbe(tools, detection),
        exporter=FFmpegSegmentExporter(tools, export)
    )

def process_file(path: str, tools: ToolConfig) -> Outcome:
    """
    Standalone API: split a single file with default settings.
    """
    return build_file_processor(tools).process(Path(path))
