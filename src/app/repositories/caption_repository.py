from abc import ABC, abstractmethod
from typing import List
from src.domain.caption import Caption


class ICaptionRepository(ABC):
    """Read-only repository interface for Caption entity"""

    @abstractmethod
    async def get_approved_by_workspace(self, workspace_id: str) -> List[Caption]:
        """Get approved captions of a workspace, oldest first"""
        pass

    @abstractmethod
    async def count_approved_by_workspace(self, workspace_id: str) -> int:
        """Count approved captions of a workspace"""
        pass
