from abc import ABC, abstractmethod
from typing import Optional
from src.domain.asset import Asset


class IAssetRepository(ABC):
    """Read-only repository interface for Asset entity"""

    @abstractmethod
    async def get_by_id(self, asset_id: str) -> Optional[Asset]:
        """Get asset by ID"""
        pass
