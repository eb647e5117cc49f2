from typing import List, Optional
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel import select
from src.app.repositories.export_job_repository import IExportJobRepository
from src.domain.export_job import ExportJob
from src.domain.enums import ExportJobStatus


class SqlAlchemyExportJobRepository(IExportJobRepository):
    """SQLAlchemy implementation of ExportJob repository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, export_job: ExportJob) -> ExportJob:
        """Create a new export job"""
        self.session.add(export_job)
        await self.session.flush()
        await self.session.refresh(export_job)
        return export_job

    async def get_by_id(self, job_id: str) -> Optional[ExportJob]:
        """Get export job by ID"""
        stmt = select(ExportJob).where(ExportJob.id == job_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_workspace(
        self,
        workspace_id: str,
        status: Optional[ExportJobStatus] = None,
        limit: Optional[int] = None,
    ) -> List[ExportJob]:
        """Get export jobs for a workspace, most recent first"""
        stmt = (
            select(ExportJob)
            .where(ExportJob.workspace_id == workspace_id)
            .order_by(ExportJob.created_at.desc())
        )
        if status:
            stmt = stmt.where(ExportJob.status == status)
        if limit:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def update(self, export_job: ExportJob) -> ExportJob:
        """Update an existing export job"""
        self.session.add(export_job)
        await self.session.flush()
        await self.session.refresh(export_job)
        return export_job

    async def delete(self, export_job: ExportJob) -> None:
        """Delete an export job record"""
        await self.session.delete(export_job)
        await self.session.flush()

    async def get_pending_jobs(self, limit: int = 10) -> List[ExportJob]:
        """Get pending export jobs for processing"""
        stmt = (
            select(ExportJob)
            .where(ExportJob.status == ExportJobStatus.pending)
            .order_by(ExportJob.created_at.asc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
