"""ExportJob Entity

Tracks workspace export jobs for ZIP archive generation.
"""
from datetime import datetime
from typing import Optional
from sqlmodel import Field
from src.domain.base import BaseModel, generate_uuid
from src.domain.enums import ExportJobStatus, TERMINAL_EXPORT_STATUSES


class InvalidExportJobTransition(Exception):
    """Raised when a job is moved out of a state that does not allow it"""

    def __init__(self, job_id: str, current: str, target: str):
        self.job_id = job_id
        self.current = current
        self.target = target
        super().__init__(f"Export job {job_id} cannot move from {current} to {target}")


class ExportJob(BaseModel, table=True):
    """
    ExportJob Entity

    Tracks async jobs that package a workspace's approved content as a ZIP file.
    Item counts are a snapshot taken when the job is created.
    """
    __tablename__ = "export_jobs"

    id: str = Field(default_factory=generate_uuid, primary_key=True)

    # Foreign keys
    workspace_id: str = Field(foreign_key="workspaces.id", index=True, nullable=False)

    # Job status
    status: ExportJobStatus = Field(default=ExportJobStatus.pending, nullable=False, index=True)

    # Content counts frozen at submission
    items_total: int = Field(default=0, nullable=False)
    items_captions: int = Field(default=0, nullable=False)
    items_generated_assets: int = Field(default=0, nullable=False)

    # Output
    output_path: Optional[str] = Field(default=None)

    # Error tracking
    error_message: Optional[str] = Field(default=None)

    # Timestamps
    created_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)
    started_at: Optional[datetime] = Field(default=None)
    completed_at: Optional[datetime] = Field(default=None)

    # Business logic methods

    @property
    def status_value(self) -> str:
        return self.status.value if hasattr(self.status, "value") else self.status

    def is_terminal(self) -> bool:
        return self.status in TERMINAL_EXPORT_STATUSES

    def start_processing(self) -> None:
        """Mark job as processing"""
        self._ensure_status(ExportJobStatus.pending, ExportJobStatus.processing)
        self.status = ExportJobStatus.processing
        self.started_at = datetime.utcnow()

    def complete(self, output_path: str) -> None:
        """Mark job as completed with the archive location"""
        self._ensure_status(ExportJobStatus.processing, ExportJobStatus.completed)
        self.status = ExportJobStatus.completed
        self.output_path = output_path
        self.error_message = None
        self.completed_at = datetime.utcnow()

    def fail(self, error_message: str) -> None:
        """Mark job as failed with error message"""
        if self.is_terminal():
            raise InvalidExportJobTransition(self.id, self.status_value, ExportJobStatus.failed.value)
        self.status = ExportJobStatus.failed
        self.output_path = None
        self.error_message = error_message
        self.completed_at = datetime.utcnow()

    def _ensure_status(self, expected: ExportJobStatus, target: ExportJobStatus) -> None:
        if self.status != expected:
            raise InvalidExportJobTransition(self.id, self.status_value, target.value)
