from abc import ABC, abstractmethod
from typing import Optional
from src.domain.workspace import Workspace


class IWorkspaceRepository(ABC):
    """Read-only repository interface for Workspace entity"""

    @abstractmethod
    async def get_by_id(self, workspace_id: str) -> Optional[Workspace]:
        """Get workspace by ID"""
        pass
