# File: silence_splitter/features/pipeline/domain/models.py
from dataclasses import dataclass, field
from typing import FrozenSet, List

from silence_splitter.core.common.enums import OutcomeStatus
from silence_splitter.core.config.settings import settings
from silence_splitter.core.exceptions import DiscoveryError
from silence_splitter.features.file_processing.domain.models import Outcome
from silence_splitter.features.source_scanner.domain.models import ScanSummary

@dataclass(frozen=True)
class PipelineConfig:
    """
    Sizing of the worker pool and its queues.
    Defaults to one worker per CPU; tests pin worker_count=1 for determinism.
    """
    worker_count: int = settings.WORKER_COUNT
    job_queue_capacity: int = settings.JOB_QUEUE_CAPACITY
    result_queue_capacity: int = settings.RESULT_QUEUE_CAPACITY
    extensions: FrozenSet[str] = settings.INPUT_EXTENSIONS

    def __post_init__(self):
        if self.worker_count < 1:
            raise ValueError(f"worker_count must be at least 1, got {self.worker_count}")
        if self.job_queue_capacity < 1 or self.result_queue_capacity < 1:
            raise ValueError("Queue capacities must be at least 1 (queues are always bounded).")

@dataclass
class PipelineReport:
    """
    Everything a run produced: one scan summary per root, one outcome per file.
    Outcomes are in completion order, not discovery order.
    """
    scans: List[ScanSummary] = field(default_factory=list)
    outcomes: List[Outcome] = field(default_factory=list)
    files_enqueued: int = 0

    def _count(self, status: OutcomeStatus) -> int:
        return sum(1 for o in self.outcomes if o.status == status)

    @property
    def succeeded(self) -> int:
        return self._count(OutcomeStatus.COMPLETED)

    @property
    def no_silence(self) -> int:
        return self._count(OutcomeStatus.NO_SILENCE)

    @property
    def failed(self) -> int:
        return self._count(OutcomeStatus.FAILED)

    @property
    def discovery_errors(self) -> List[DiscoveryError]:
        return [err for scan in self.scans for err in scan.errors]
