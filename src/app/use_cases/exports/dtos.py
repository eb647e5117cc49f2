"""Export DTOs

Data Transfer Objects for workspace export functionality.
"""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field
from src.domain.export_job import ExportJob


class StartExportResponseDTO(BaseModel):
    """Response DTO for starting an export job"""
    job_id: str
    status: str
    message: str


class ExportJobStatusDTO(BaseModel):
    """Response DTO for export job status"""
    export_job_id: str
    workspace_id: str
    status: str
    items_total: int
    items_captions: int
    items_generated_assets: int
    output_path: Optional[str] = None
    # False when a completed job's archive was removed by retention cleanup
    file_available: Optional[bool] = None
    error_message: Optional[str] = None
    created_at: datetime
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, export_job: ExportJob, file_available: Optional[bool] = None) -> "ExportJobStatusDTO":
        return cls(
            export_job_id=export_job.id,
            workspace_id=export_job.workspace_id,
            status=export_job.status_value,
            items_total=export_job.items_total,
            items_captions=export_job.items_captions,
            items_generated_assets=export_job.items_generated_assets,
            output_path=export_job.output_path,
            file_available=file_available,
            error_message=export_job.error_message,
            created_at=export_job.created_at,
            started_at=export_job.started_at,
            completed_at=export_job.completed_at,
        )


class ExportJobListDTO(BaseModel):
    """Response DTO for a workspace's export history"""
    workspace_id: str
    jobs: List[ExportJobStatusDTO]
    count: int
    status_filter: str
    limit: int


class ExportStatisticsDTO(BaseModel):
    """Aggregate export statistics for a workspace"""
    workspace_id: str
    total_exports: int
    completed_exports: int
    failed_exports: int
    average_processing_seconds: int
    total_items_exported: int
    success_rate: float


class ExportDownloadDTO(BaseModel):
    """Location of a completed export archive"""
    export_job_id: str
    file_path: str
    file_name: str


class CleanupRequestDTO(BaseModel):
    """Request DTO for cleaning up old export files"""
    # Falls back to EXPORT_RETENTION_HOURS when omitted
    older_than_hours: Optional[float] = Field(default=None, gt=0)


class CleanupResultDTO(BaseModel):
    """Response DTO for export file cleanup"""
    deleted_count: int
    older_than_hours: float
    message: str
