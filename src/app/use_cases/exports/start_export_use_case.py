"""Start Export Use Case

Creates a new export job for a workspace and hands it to the export queue.
"""
import logging
from libs.result import Result, Error, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.export_queue import ExportJobQueue, ExportQueueFullError
from src.domain.export_job import ExportJob
from .dtos import StartExportResponseDTO

logger = logging.getLogger(__name__)


class StartExportUseCase:
    """
    Use case: Start Export

    Creates an async job to export a workspace's approved captions and
    generated assets as a ZIP file. Returns as soon as the job is queued;
    callers poll the job status for the outcome.
    """

    def __init__(self, uow: UnitOfWork, export_queue: ExportJobQueue):
        self.uow = uow
        self.export_queue = export_queue

    async def execute(self, workspace_id: str) -> Result[StartExportResponseDTO]:
        """
        Start a new export job for a workspace

        Args:
            workspace_id: The workspace to export

        Returns:
            Result[StartExportResponseDTO]: Job ID, status and summary message
        """
        async with self.uow:
            workspace = await self.uow.workspaces.get_by_id(workspace_id)
            if not workspace:
                return Return.err(Error(
                    code="WORKSPACE_NOT_FOUND",
                    message="Workspace not found"
                ))

            caption_count = await self.uow.captions.count_approved_by_workspace(workspace_id)
            generated_count = await self.uow.generated_assets.count_approved_by_workspace(workspace_id)

            if caption_count == 0 and generated_count == 0:
                return Return.err(Error(
                    code="NO_APPROVED_CONTENT",
                    message="No approved content found for export"
                ))

            # Counts are a snapshot; they are not re-read while the job runs
            export_job = ExportJob(
                workspace_id=workspace_id,
                items_total=caption_count + generated_count,
                items_captions=caption_count,
                items_generated_assets=generated_count,
            )
            export_job = await self.uow.export_jobs.create(export_job)
            await self.uow.commit()
            job_id = export_job.id
            job_status = export_job.status_value

        logger.info(
            f"[StartExport] Created export job {job_id} for workspace {workspace_id} "
            f"({caption_count} captions, {generated_count} generated images)"
        )

        try:
            self.export_queue.submit(job_id)
        except ExportQueueFullError as e:
            logger.error(f"[StartExport] {e}")
            async with self.uow:
                export_job = await self.uow.export_jobs.get_by_id(job_id)
                export_job.fail("Export queue is full")
                await self.uow.export_jobs.update(export_job)
                await self.uow.commit()
            return Return.err(Error(
                code="EXPORT_QUEUE_FULL",
                message="Export queue is full, try again later",
                reason=job_id
            ))

        total = caption_count + generated_count
        return Return.ok(StartExportResponseDTO(
            job_id=job_id,
            status=job_status,
            message=(
                f"Export started for {total} approved items "
                f"({caption_count} captions, {generated_count} generated images)"
            ),
        ))
