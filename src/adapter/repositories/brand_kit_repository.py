from typing import Optional
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel import select
from src.app.repositories import IBrandKitRepository
from src.domain import BrandKit


class SqlAlchemyBrandKitRepository(IBrandKitRepository):
    """SQLAlchemy implementation of IBrandKitRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_workspace(self, workspace_id: str) -> Optional[BrandKit]:
        """Get the most recently updated brand kit of a workspace"""
        statement = (
            select(BrandKit)
            .where(BrandKit.workspace_id == workspace_id)
            .order_by(BrandKit.updated_at.desc())
        )
        result = await self.session.exec(statement)
        return result.first()
