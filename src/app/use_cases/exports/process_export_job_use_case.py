"""Process Export Job Use Case

Processes a pending export job by building the workspace archive.
"""
import logging
from typing import Optional
from libs.result import Result, Error, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.archive_builder import ArchiveBuilder, ExportOptions
from src.domain.enums import ExportJobStatus

logger = logging.getLogger(__name__)


class ProcessExportJobUseCase:
    """
    Use case: Process Export Job

    Processes a pending export job by:
    1. Marking it processing
    2. Building the archive with ArchiveBuilder
    3. Recording the archive path, or the failure message

    Failures are written to the job record and never raised to the caller.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        archive_builder: ArchiveBuilder,
        options: Optional[ExportOptions] = None,
    ):
        self.uow = uow
        self.archive_builder = archive_builder
        self.options = options or ExportOptions()

    async def execute(self, job_id: str) -> Result[bool]:
        """
        Process an export job

        Args:
            job_id: The export job ID to process

        Returns:
            Result[bool]: True if the archive was produced
        """
        async with self.uow:
            export_job = await self.uow.export_jobs.get_by_id(job_id)
            if not export_job:
                logger.error(f"[ProcessExport] Job not found: {job_id}")
                return Return.err(Error(
                    code="EXPORT_JOB_NOT_FOUND",
                    message="Export job not found"
                ))

            if export_job.status != ExportJobStatus.pending:
                logger.info(
                    f"[ProcessExport] Job {job_id} is not pending, status: {export_job.status_value}"
                )
                return Return.err(Error(
                    code="INVALID_JOB_STATUS",
                    message=f"Job status is {export_job.status_value}, expected pending"
                ))

            export_job.start_processing()
            await self.uow.export_jobs.update(export_job)
            await self.uow.commit()
            workspace_id = export_job.workspace_id

        logger.info(f"[ProcessExport] Job {job_id} processing (workspace {workspace_id})")

        # Build outside of the job transaction to avoid long-running transactions
        try:
            archive = await self.archive_builder.create_export(workspace_id, self.options)
        except Exception as e:
            error_message = str(e) or "Unknown error"
            logger.exception(f"[ProcessExport] Job {job_id} failed: {error_message}")
            await self._record_failure(job_id, error_message)
            return Return.err(Error(
                code="EXPORT_FAILED",
                message=error_message
            ))

        try:
            async with self.uow:
                export_job = await self.uow.export_jobs.get_by_id(job_id)
                export_job.complete(archive.archive_path)
                await self.uow.export_jobs.update(export_job)
                await self.uow.commit()
        except Exception as e:
            error_message = str(e) or "Unknown error"
            logger.exception(f"[ProcessExport] Job {job_id} could not be marked completed: {error_message}")
            # The job never points at the archive, so it is removed
            await self.archive_builder.discard(archive)
            await self._record_failure(job_id, error_message)
            return Return.err(Error(
                code="EXPORT_FAILED",
                message=error_message
            ))

        if archive.warnings:
            logger.warning(
                f"[ProcessExport] Job {job_id} completed with omissions: {'; '.join(archive.warnings)}"
            )
        logger.info(f"[ProcessExport] Job {job_id} completed: {archive.archive_path}")
        return Return.ok(True)

    async def _record_failure(self, job_id: str, error_message: str) -> None:
        async with self.uow:
            export_job = await self.uow.export_jobs.get_by_id(job_id)
            export_job.fail(error_message)
            await self.uow.export_jobs.update(export_job)
            await self.uow.commit()
