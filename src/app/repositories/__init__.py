from src.app.repositories.workspace_repository import IWorkspaceRepository
from src.app.repositories.brand_kit_repository import IBrandKitRepository
from src.app.repositories.asset_repository import IAssetRepository
from src.app.repositories.caption_repository import ICaptionRepository
from src.app.repositories.generated_asset_repository import IGeneratedAssetRepository
from src.app.repositories.export_job_repository import IExportJobRepository

__all__ = [
    "IWorkspaceRepository",
    "IBrandKitRepository",
    "IAssetRepository",
    "ICaptionRepository",
    "IGeneratedAssetRepository",
    "IExportJobRepository",
]
