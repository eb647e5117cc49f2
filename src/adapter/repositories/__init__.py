from src.adapter.repositories.workspace_repository import SqlAlchemyWorkspaceRepository
from src.adapter.repositories.brand_kit_repository import SqlAlchemyBrandKitRepository
from src.adapter.repositories.asset_repository import SqlAlchemyAssetRepository
from src.adapter.repositories.caption_repository import SqlAlchemyCaptionRepository
from src.adapter.repositories.generated_asset_repository import SqlAlchemyGeneratedAssetRepository
from src.adapter.repositories.export_job_repository import SqlAlchemyExportJobRepository

__all__ = [
    "SqlAlchemyWorkspaceRepository",
    "SqlAlchemyBrandKitRepository",
    "SqlAlchemyAssetRepository",
    "SqlAlchemyCaptionRepository",
    "SqlAlchemyGeneratedAssetRepository",
    "SqlAlchemyExportJobRepository",
]
