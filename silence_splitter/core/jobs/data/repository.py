from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import sessionmaker

from silence_splitter.core.jobs.models import JobModel
from silence_splitter.features.file_processing.domain.models import Outcome
from ..domain.interfaces import IJobRepository

class SqlJobRepository(IJobRepository):

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def record_outcome(self, run_id: UUID, outcome: Outcome) -> UUID:
        with self.session_factory() as db:
            job = JobModel(
                run_id=run_id,
                file_path=str(outcome.path),
                status=outcome.status,
                stage=outcome.stage,
                segment_count=outcome.segment_count,
                output_paths=[str(p) for p in outcome.output_paths],
                error_type=type(outcome.error).__name__ if outcome.error else None,
                error_message=str(outcome.error) if outcome.error else None
            )
            db.add(job)
            db.commit()
            db.refresh(job)
            return job.id

    def list_jobs(self, run_id: Optional[UUID] = None) -> List[JobModel]:
        with self.session_factory() as db:
            query = db.query(JobModel)
            if run_id is not None:
                query = query.filter(JobModel.run_id == run_id)
            jobs = query.order_by(JobModel.recorded_at, JobModel.file_path).all()
            # Detach so callers can read attributes after the session closes
            db.expunge_all()
            return jobs
