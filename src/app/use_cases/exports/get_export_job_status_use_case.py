"""Get Export Job Status Use Case

Retrieves the status of an export job including the archive location if complete.
"""
from libs.result import Result, Error, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.file_storage import FileStorage
from src.domain.enums import ExportJobStatus
from .dtos import ExportJobStatusDTO


class GetExportJobStatusUseCase:
    """
    Use case: Get Export Job Status

    Returns the current status of an export job. For completed jobs it also
    reports whether the archive is still on disk, since retention cleanup
    removes files without touching job records.
    """

    def __init__(self, uow: UnitOfWork, file_storage: FileStorage):
        self.uow = uow
        self.file_storage = file_storage

    async def execute(self, job_id: str) -> Result[ExportJobStatusDTO]:
        """
        Get the status of an export job

        Args:
            job_id: The export job ID

        Returns:
            Result[ExportJobStatusDTO]: Job status with output path if complete
        """
        async with self.uow:
            export_job = await self.uow.export_jobs.get_by_id(job_id)
            if not export_job:
                return Return.err(Error(
                    code="EXPORT_JOB_NOT_FOUND",
                    message="Export job not found"
                ))

            file_available = None
            if export_job.status == ExportJobStatus.completed and export_job.output_path:
                file_available = await self.file_storage.exists(export_job.output_path)

            return Return.ok(ExportJobStatusDTO.from_entity(export_job, file_available))
