import logging
import uuid
from typing import List
from uuid import UUID

from silence_splitter.core.database.connection import build_session_factory
from silence_splitter.core.jobs.models import JobModel
from silence_splitter.features.file_processing.domain.models import Outcome
from ..domain.interfaces import IJobRepository
from ..data.repository import SqlJobRepository

logger = logging.getLogger(__name__)

class JobLedger:
    """
    Public API for the Jobs Core Module.
    Records every outcome of one pipeline run under a shared run id.
    """

    def __init__(self, repo: IJobRepository, run_id: UUID = None):
        self.repo = repo
        self.run_id = run_id or uuid.uuid4()

    @classmethod
    def open(cls, database_url: str) -> "JobLedger":
        """Connects to (and if needed creates) the ledger database."""
        repo = SqlJobRepository(build_session_factory(database_url))
        ledger = cls(repo)
        logger.info(f"Recording outcomes for run {ledger.run_id}")
        return ledger

    def record(self, outcome: Outcome) -> UUID:
        job_id = self.repo.record_outcome(self.run_id, outcome)
        logger.debug(f"Recorded job {job_id} [{outcome.status.value}] {outcome.path}")
        return job_id

    def jobs(self) -> List[JobModel]:
        """All jobs recorded for this run."""
        return self.repo.list_jobs(self.run_id)
