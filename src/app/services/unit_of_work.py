from abc import ABC, abstractmethod
from src.app.repositories import (
    IWorkspaceRepository,
    IBrandKitRepository,
    IAssetRepository,
    ICaptionRepository,
    IGeneratedAssetRepository,
    IExportJobRepository,
)


class UnitOfWork(ABC):
    """Groups repositories that share one transaction"""

    workspaces: IWorkspaceRepository
    brand_kits: IBrandKitRepository
    assets: IAssetRepository
    captions: ICaptionRepository
    generated_assets: IGeneratedAssetRepository
    export_jobs: IExportJobRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
