from abc import ABC, abstractmethod
from typing import List
from src.domain.generated_asset import GeneratedAsset


class IGeneratedAssetRepository(ABC):
    """Read-only repository interface for GeneratedAsset entity"""

    @abstractmethod
    async def get_approved_by_workspace(self, workspace_id: str) -> List[GeneratedAsset]:
        """Get approved generated assets of a workspace, oldest first"""
        pass

    @abstractmethod
    async def count_approved_by_workspace(self, workspace_id: str) -> int:
        """Count approved generated assets of a workspace"""
        pass
