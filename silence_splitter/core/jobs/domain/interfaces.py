from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from silence_splitter.core.jobs.models import JobModel
from silence_splitter.features.file_processing.domain.models import Outcome

class IJobRepository(ABC):
    """
    Contract for outcome persistence.
    """

    @abstractmethod
    def record_outcome(self, run_id: UUID, outcome: Outcome) -> UUID:
        """
        Stores one terminal outcome and returns the new record id.
        """
        pass

    @abstractmethod
    def list_jobs(self, run_id: Optional[UUID] = None) -> List[JobModel]:
        """
        Returns recorded jobs, optionally limited to one run.
        """
        pass
