from typing import Optional
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel import select
from src.app.repositories import IWorkspaceRepository
from src.domain import Workspace


class SqlAlchemyWorkspaceRepository(IWorkspaceRepository):
    """SQLAlchemy implementation of IWorkspaceRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, workspace_id: str) -> Optional[Workspace]:
        """Get workspace by ID"""
        statement = select(Workspace).where(Workspace.id == workspace_id)
        result = await self.session.exec(statement)
        return result.first()
