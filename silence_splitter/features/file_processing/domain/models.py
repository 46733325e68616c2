from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from silence_splitter.core.common.enums import OutcomeStatus, ProcessingStage

@dataclass(frozen=True)
class Outcome:
    """
    Terminal result of processing one file.
    Consumed exactly once by the aggregator.

    `stage` is where processing stopped: DONE on success, NO_SILENCE when the
    analysis found nothing to cut, otherwise the stage that failed.
    """
    path: Path
    status: OutcomeStatus
    stage: ProcessingStage
    segment_count: int = 0
    output_paths: List[Path] = field(default_factory=list)
    error: Optional[Exception] = None

    @property
    def succeeded(self) -> bool:
        return self.status == OutcomeStatus.COMPLETED

    @property
    def message(self) -> str:
        if self.error is not None:
            return str(self.error)
        return f"Successfully processed file: {self.path}"
