from typing import Optional
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel import select
from src.app.repositories import IAssetRepository
from src.domain import Asset


class SqlAlchemyAssetRepository(IAssetRepository):
    """SQLAlchemy implementation of IAssetRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, asset_id: str) -> Optional[Asset]:
        """Get asset by ID"""
        statement = select(Asset).where(Asset.id == asset_id)
        result = await self.session.exec(statement)
        return result.first()
