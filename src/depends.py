from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.adapter.services.local_file_storage import LocalFileStorage
from src.app.services.archive_builder import ArchiveBuilder, ExportOptions
from src.app.services.export_queue import ExportJobQueue
from src.app.services.file_storage import FileStorage
from src.app.services.unit_of_work import UnitOfWork
from src.worker import ExportWorker, create_export_job_processor

# PostgreSQL engine
engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


def get_config(request: Request):
    return getattr(request.app.state, "config", ApplicationConfig)


def get_session_factory(request: Request) -> sessionmaker:
    return getattr(request.app.state, "session_factory", AsyncSessionLocal)


async def get_session(session_factory: sessionmaker = Depends(get_session_factory)) -> AsyncSession:
    async with session_factory() as session:
        yield session


async def get_unit_of_work(session_factory: sessionmaker = Depends(get_session_factory)):
    async with session_factory() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_file_storage(config=Depends(get_config)) -> FileStorage:
    """Dependency for the export output directory"""
    return LocalFileStorage(base_path=config.EXPORTS_DIR)


def get_export_queue(request: Request) -> ExportJobQueue:
    """The worker started with the application"""
    return request.app.state.export_worker


def export_options_from_config(config) -> ExportOptions:
    return ExportOptions(
        include_assets=config.EXPORT_INCLUDE_ASSETS,
        include_captions=config.EXPORT_INCLUDE_CAPTIONS,
        include_generated_images=config.EXPORT_INCLUDE_GENERATED_IMAGES,
    )


def get_export_options(config=Depends(get_config)) -> ExportOptions:
    return export_options_from_config(config)


def get_archive_builder(
    uow: UnitOfWork = Depends(get_unit_of_work),
    file_storage: FileStorage = Depends(get_file_storage),
    config=Depends(get_config),
) -> ArchiveBuilder:
    return ArchiveBuilder(uow, file_storage, asset_root=config.ASSET_ROOT)


def build_export_worker(config, session_factory: sessionmaker) -> ExportWorker:
    """Worker whose jobs each run in their own session"""
    processor = create_export_job_processor(
        session_factory=session_factory,
        file_storage=LocalFileStorage(base_path=config.EXPORTS_DIR),
        asset_root=config.ASSET_ROOT,
        options=export_options_from_config(config),
    )
    return ExportWorker(
        processor,
        concurrency=config.EXPORT_WORKER_CONCURRENCY,
        max_queue_size=config.EXPORT_QUEUE_SIZE,
    )
