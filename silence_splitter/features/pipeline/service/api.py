from pathlib import Path
from typing import Callable, List, Optional

from silence_splitter.core.jobs.service.manager import JobLedger
from silence_splitter.core.tools.locator import ToolConfig
from silence_splitter.features.file_processing.domain.models import Outcome
from silence_splitter.features.file_processing.service.api import build_file_processor
from silence_splitter.features.silence_detection.domain.models import DetectionConfig
from silence_splitter.features.segment_export.domain.models import ExportConfig

from ..domain.models import PipelineConfig, PipelineReport
from .scheduler import PipelineScheduler

def run_pipeline(roots: List[str],
                 tools: ToolConfig,
                 config: Optional[PipelineConfig] = None,
                 detection: Optional[DetectionConfig] = None,
                 export: Optional[ExportConfig] = None,
                 ledger_url: Optional[str] = None,
                 on_outcome: Optional[Callable[[Outcome], None]] = None) -> PipelineReport:
    """
    Public Service API: split every audio file found under the given roots.

    Args:
        roots: Directories to scan recursively.
        tools: Resolved ffmpeg location (see core.tools.locator.resolve_toolchain).
        config: Worker pool and queue sizing.
        detection: Silence threshold settings.
        export: Output naming settings.
        ledger_url: Optional database URL; when set every outcome is persisted.
        on_outcome: Called on the calling thread as each outcome arrives.
    """
    processor = build_file_processor(tools, detection, export)
    ledger = JobLedger.open(ledger_url) if ledger_url else None

    scheduler = PipelineScheduler(
        processor=processor,
        config=config,
        ledger=ledger,
        on_outcome=on_outcome
    )
    return scheduler.run([Path(r) for r in roots])
