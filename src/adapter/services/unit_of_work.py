from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.services.unit_of_work import UnitOfWork
from src.adapter.repositories.workspace_repository import SqlAlchemyWorkspaceRepository
from src.adapter.repositories.brand_kit_repository import SqlAlchemyBrandKitRepository
from src.adapter.repositories.asset_repository import SqlAlchemyAssetRepository
from src.adapter.repositories.caption_repository import SqlAlchemyCaptionRepository
from src.adapter.repositories.generated_asset_repository import SqlAlchemyGeneratedAssetRepository
from src.adapter.repositories.export_job_repository import SqlAlchemyExportJobRepository


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.workspaces = SqlAlchemyWorkspaceRepository(self.session)
        self.brand_kits = SqlAlchemyBrandKitRepository(self.session)
        self.assets = SqlAlchemyAssetRepository(self.session)
        self.captions = SqlAlchemyCaptionRepository(self.session)
        self.generated_assets = SqlAlchemyGeneratedAssetRepository(self.session)
        self.export_jobs = SqlAlchemyExportJobRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
