from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.export_job import ExportJob
from src.domain.enums import ExportJobStatus


class IExportJobRepository(ABC):
    """Interface for ExportJob repository"""

    @abstractmethod
    async def create(self, export_job: ExportJob) -> ExportJob:
        """Create a new export job"""
        pass

    @abstractmethod
    async def get_by_id(self, job_id: str) -> Optional[ExportJob]:
        """Get export job by ID"""
        pass

    @abstractmethod
    async def get_by_workspace(
        self,
        workspace_id: str,
        status: Optional[ExportJobStatus] = None,
        limit: Optional[int] = None,
    ) -> List[ExportJob]:
        """Get export jobs for a workspace, most recent first"""
        pass

    @abstractmethod
    async def update(self, export_job: ExportJob) -> ExportJob:
        """Update an existing export job"""
        pass

    @abstractmethod
    async def delete(self, export_job: ExportJob) -> None:
        """Delete an export job record"""
        pass

    @abstractmethod
    async def get_pending_jobs(self, limit: int = 10) -> List[ExportJob]:
        """Get pending export jobs for processing, oldest first"""
        pass
