"""Delete Export Job Use Case

Administrative removal of an export job record and its archive.
"""
import logging
from libs.result import Result, Error, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.file_storage import FileStorage
from src.domain.enums import ExportJobStatus

logger = logging.getLogger(__name__)


class DeleteExportJobUseCase:
    """
    Use case: Delete Export Job

    Removes the archive file if present, then the job record. Jobs that are
    still processing cannot be deleted.
    """

    def __init__(self, uow: UnitOfWork, file_storage: FileStorage):
        self.uow = uow
        self.file_storage = file_storage

    async def execute(self, job_id: str) -> Result[bool]:
        async with self.uow:
            export_job = await self.uow.export_jobs.get_by_id(job_id)
            if not export_job:
                return Return.err(Error(
                    code="EXPORT_JOB_NOT_FOUND",
                    message="Export job not found"
                ))

            if export_job.status == ExportJobStatus.processing:
                return Return.err(Error(
                    code="EXPORT_JOB_IN_PROGRESS",
                    message="Export job is still processing"
                ))

            if export_job.output_path:
                logger.info(f"[DeleteExport] Deleting export file for job {job_id}")
                try:
                    await self.file_storage.delete(export_job.output_path)
                except OSError as e:
                    logger.warning(f"[DeleteExport] Failed to delete export file for job {job_id}: {e}")

            await self.uow.export_jobs.delete(export_job)
            await self.uow.commit()

        logger.info(f"[DeleteExport] Deleted export job {job_id}")
        return Return.ok(True)
