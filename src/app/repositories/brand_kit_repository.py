from abc import ABC, abstractmethod
from typing import Optional
from src.domain.brand_kit import BrandKit


class IBrandKitRepository(ABC):
    """Read-only repository interface for BrandKit entity"""

    @abstractmethod
    async def get_by_workspace(self, workspace_id: str) -> Optional[BrandKit]:
        """Get the brand kit of a workspace, if one exists"""
        pass
