import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, Integer, DateTime, Enum as SQLEnum, JSON, Uuid
from silence_splitter.core.database.base import Base
from silence_splitter.core.common.enums import OutcomeStatus, ProcessingStage

def utc_now():
    return datetime.now(timezone.utc)

class JobModel(Base):
    """
    One row per processed file.
    Rows sharing a run_id come from the same pipeline run.
    """
    __tablename__ = "segment_jobs"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    run_id = Column(Uuid(as_uuid=True), nullable=False, index=True)

    file_path = Column(String, nullable=False, index=True)
    status = Column(SQLEnum(OutcomeStatus), nullable=False, index=True)
    stage = Column(SQLEnum(ProcessingStage), nullable=False)

    segment_count = Column(Integer, default=0, nullable=False)
    output_paths = Column(JSON, default=list)

    # Exception class name, e.g. "ProbeError", and its message
    error_type = Column(String, nullable=True)
    error_message = Column(String, nullable=True)

    recorded_at = Column(DateTime(timezone=True), default=utc_now)
