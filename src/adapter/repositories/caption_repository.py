from typing import List
from sqlalchemy import func
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel import select
from src.app.repositories import ICaptionRepository
from src.domain import Caption
from src.domain.enums import ApprovalStatus


class SqlAlchemyCaptionRepository(ICaptionRepository):
    """SQLAlchemy implementation of ICaptionRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_approved_by_workspace(self, workspace_id: str) -> List[Caption]:
        """Get approved captions of a workspace, oldest first"""
        statement = (
            select(Caption)
            .where(
                Caption.workspace_id == workspace_id,
                Caption.approval_status == ApprovalStatus.approved,
            )
            .order_by(Caption.created_at.asc())
        )
        result = await self.session.exec(statement)
        return list(result.all())

    async def count_approved_by_workspace(self, workspace_id: str) -> int:
        """Count approved captions of a workspace"""
        statement = (
            select(func.count())
            .select_from(Caption)
            .where(
                Caption.workspace_id == workspace_id,
                Caption.approval_status == ApprovalStatus.approved,
            )
        )
        result = await self.session.exec(statement)
        return result.one()
