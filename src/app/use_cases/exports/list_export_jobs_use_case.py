"""List Export Jobs Use Case

Returns a workspace's export history, most recent first.
"""
from typing import Optional
from libs.result import Result, Error, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.enums import ExportJobStatus
from .dtos import ExportJobListDTO, ExportJobStatusDTO


class ListExportJobsUseCase:
    """Use case: List a workspace's export jobs, optionally filtered by status"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        workspace_id: str,
        status: Optional[ExportJobStatus] = None,
        limit: int = 20,
    ) -> Result[ExportJobListDTO]:
        if limit < 1:
            return Return.err(Error(
                code="INVALID_LIMIT",
                message="Limit must be at least 1"
            ))

        async with self.uow:
            workspace = await self.uow.workspaces.get_by_id(workspace_id)
            if not workspace:
                return Return.err(Error(
                    code="WORKSPACE_NOT_FOUND",
                    message="Workspace not found"
                ))

            jobs = await self.uow.export_jobs.get_by_workspace(workspace_id, status=status, limit=limit)

            return Return.ok(ExportJobListDTO(
                workspace_id=workspace_id,
                jobs=[ExportJobStatusDTO.from_entity(job) for job in jobs],
                count=len(jobs),
                status_filter=status.value if status else "all",
                limit=limit,
            ))
