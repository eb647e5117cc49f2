"""Get Export Statistics Use Case

Aggregates a workspace's export history into success and timing figures.
"""
from libs.result import Result, Error, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.enums import ExportJobStatus
from .dtos import ExportStatisticsDTO


class GetExportStatisticsUseCase:
    """
    Use case: Get Export Statistics

    Average processing time is measured from job creation to completion over
    completed jobs only. Total items counts the snapshot of every job.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, workspace_id: str) -> Result[ExportStatisticsDTO]:
        async with self.uow:
            workspace = await self.uow.workspaces.get_by_id(workspace_id)
            if not workspace:
                return Return.err(Error(
                    code="WORKSPACE_NOT_FOUND",
                    message="Workspace not found"
                ))

            jobs = await self.uow.export_jobs.get_by_workspace(workspace_id)

            completed = [job for job in jobs if job.status == ExportJobStatus.completed]
            failed = [job for job in jobs if job.status == ExportJobStatus.failed]

            processing_times = [
                (job.completed_at - job.created_at).total_seconds()
                for job in completed
                if job.completed_at and job.created_at
            ]
            average_time = sum(processing_times) / len(processing_times) if processing_times else 0

            return Return.ok(ExportStatisticsDTO(
                workspace_id=workspace_id,
                total_exports=len(jobs),
                completed_exports=len(completed),
                failed_exports=len(failed),
                average_processing_seconds=round(average_time),
                total_items_exported=sum(job.items_total or 0 for job in jobs),
                success_rate=(len(completed) / len(jobs)) * 100 if jobs else 0.0,
            ))
