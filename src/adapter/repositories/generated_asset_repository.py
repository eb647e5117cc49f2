from typing import List
from sqlalchemy import func
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel import select
from src.app.repositories import IGeneratedAssetRepository
from src.domain import GeneratedAsset
from src.domain.enums import ApprovalStatus


class SqlAlchemyGeneratedAssetRepository(IGeneratedAssetRepository):
    """SQLAlchemy implementation of IGeneratedAssetRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_approved_by_workspace(self, workspace_id: str) -> List[GeneratedAsset]:
        """Get approved generated assets of a workspace, oldest first"""
        statement = (
            select(GeneratedAsset)
            .where(
                GeneratedAsset.workspace_id == workspace_id,
                GeneratedAsset.approval_status == ApprovalStatus.approved,
            )
            .order_by(GeneratedAsset.created_at.asc())
        )
        result = await self.session.exec(statement)
        return list(result.all())

    async def count_approved_by_workspace(self, workspace_id: str) -> int:
        """Count approved generated assets of a workspace"""
        statement = (
            select(func.count())
            .select_from(GeneratedAsset)
            .where(
                GeneratedAsset.workspace_id == workspace_id,
                GeneratedAsset.approval_status == ApprovalStatus.approved,
            )
        )
        result = await self.session.exec(statement)
        return result.one()
