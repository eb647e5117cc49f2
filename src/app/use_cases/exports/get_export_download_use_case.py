"""Get Export Download Use Case

Resolves the archive of a completed export job for download.
"""
import os
from libs.result import Result, Error, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.file_storage import FileStorage
from src.domain.enums import ExportJobStatus
from .dtos import ExportDownloadDTO


class GetExportDownloadUseCase:
    """
    Use case: Get Export Download

    A completed job whose archive was removed by retention cleanup stays
    completed; the download fails with EXPORT_FILE_EXPIRED instead.
    """

    def __init__(self, uow: UnitOfWork, file_storage: FileStorage):
        self.uow = uow
        self.file_storage = file_storage

    async def execute(self, job_id: str) -> Result[ExportDownloadDTO]:
        async with self.uow:
            export_job = await self.uow.export_jobs.get_by_id(job_id)
            if not export_job:
                return Return.err(Error(
                    code="EXPORT_JOB_NOT_FOUND",
                    message="Export job not found"
                ))

            if export_job.status != ExportJobStatus.completed or not export_job.output_path:
                return Return.err(Error(
                    code="EXPORT_NOT_READY",
                    message="Export not ready for download"
                ))

            output_path = export_job.output_path

        if not await self.file_storage.exists(output_path):
            return Return.err(Error(
                code="EXPORT_FILE_EXPIRED",
                message="Export file is no longer available, start a new export"
            ))

        return Return.ok(ExportDownloadDTO(
            export_job_id=job_id,
            file_path=self.file_storage.full_path(output_path),
            file_name=os.path.basename(output_path),
        ))
