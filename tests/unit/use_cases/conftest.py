import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    """Create a mock unit of work"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    uow.workspaces = MagicMock()
    uow.brand_kits = MagicMock()
    uow.assets = MagicMock()
    uow.captions = MagicMock()
    uow.generated_assets = MagicMock()
    uow.export_jobs = MagicMock()
    return uow


@pytest.fixture
def mock_file_storage():
    storage = MagicMock()
    storage.exists = AsyncMock(return_value=True)
    storage.delete = AsyncMock(return_value=True)
    storage.list_files = AsyncMock(return_value=[])
    storage.full_path = MagicMock(side_effect=lambda path: path)
    return storage
