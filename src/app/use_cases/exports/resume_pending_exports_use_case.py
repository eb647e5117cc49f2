"""Resume Pending Exports Use Case

Re-submits jobs left pending in the store, e.g. after a restart dropped
the in-memory queue.
"""
import logging
from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.export_queue import ExportJobQueue, ExportQueueFullError

logger = logging.getLogger(__name__)


class ResumePendingExportsUseCase:
    """Use case: queue every pending export job found in the store"""

    def __init__(self, uow: UnitOfWork, export_queue: ExportJobQueue):
        self.uow = uow
        self.export_queue = export_queue

    async def execute(self, limit: int = 50) -> Result[int]:
        async with self.uow:
            pending_jobs = await self.uow.export_jobs.get_pending_jobs(limit=limit)
            job_ids = [job.id for job in pending_jobs]

        queued = 0
        for job_id in job_ids:
            try:
                self.export_queue.submit(job_id)
            except ExportQueueFullError:
                # The rest stay pending for the next resume
                logger.warning(f"[ResumeExports] Queue full, {len(job_ids) - queued} jobs left pending")
                break
            queued += 1

        if queued:
            logger.info(f"[ResumeExports] Re-queued {queued} pending export jobs")
        return Return.ok(queued)
