"""
Unit tests for CleanupOldExportsUseCase

Sweeps run against a real LocalFileStorage with file ages set through
os.utime.
"""
import os
import time
import pytest
from unittest.mock import AsyncMock, MagicMock
from src.adapter.services.local_file_storage import LocalFileStorage
from src.app.services.file_storage import StoredFile
from src.app.use_cases.exports import CleanupOldExportsUseCase

HOUR = 60 * 60


def write_aged_file(directory, name: str, age_hours: float) -> str:
    path = directory / name
    path.write_bytes(b"zip")
    mtime = time.time() - age_hours * HOUR
    os.utime(path, (mtime, mtime))
    return str(path)


@pytest.mark.asyncio
async def test_cleanup_deletes_only_files_older_than_cutoff(tmp_path):
    exports_dir = tmp_path / "exports"
    exports_dir.mkdir()
    write_aged_file(exports_dir, "recent.zip", 10)
    write_aged_file(exports_dir, "older.zip", 30)
    write_aged_file(exports_dir, "oldest.zip", 50)
    use_case = CleanupOldExportsUseCase(LocalFileStorage(str(exports_dir)))

    result = await use_case.execute(older_than_hours=24)

    assert result.is_ok()
    assert result.value.deleted_count == 2
    assert result.value.message == "Cleaned up 2 old export files"
    assert sorted(os.listdir(exports_dir)) == ["recent.zip"]


@pytest.mark.asyncio
async def test_cleanup_missing_directory_returns_zero(tmp_path):
    use_case = CleanupOldExportsUseCase(LocalFileStorage(str(tmp_path / "never-created")))

    result = await use_case.execute()

    assert result.is_ok()
    assert result.value.deleted_count == 0


@pytest.mark.asyncio
async def test_cleanup_ignores_directories(tmp_path):
    exports_dir = tmp_path / "exports"
    (exports_dir / "nested").mkdir(parents=True)
    old = time.time() - 100 * HOUR
    os.utime(exports_dir / "nested", (old, old))
    use_case = CleanupOldExportsUseCase(LocalFileStorage(str(exports_dir)))

    result = await use_case.execute(older_than_hours=1)

    assert result.value.deleted_count == 0
    assert (exports_dir / "nested").is_dir()


@pytest.mark.asyncio
async def test_cleanup_continues_after_delete_error():
    now = time.time()
    storage = MagicMock()
    storage.list_files = AsyncMock(return_value=[
        StoredFile(name="locked.zip", path="/exports/locked.zip", modified_at=now - 48 * HOUR),
        StoredFile(name="old.zip", path="/exports/old.zip", modified_at=now - 48 * HOUR),
    ])
    storage.delete = AsyncMock(side_effect=[PermissionError("denied"), True])
    use_case = CleanupOldExportsUseCase(storage)

    result = await use_case.execute(older_than_hours=24)

    assert result.is_ok()
    assert result.value.deleted_count == 1
    assert storage.delete.await_count == 2


@pytest.mark.asyncio
async def test_cleanup_does_not_count_files_already_gone():
    storage = MagicMock()
    storage.list_files = AsyncMock(return_value=[
        StoredFile(name="gone.zip", path="/exports/gone.zip", modified_at=time.time() - 48 * HOUR),
    ])
    storage.delete = AsyncMock(return_value=False)
    use_case = CleanupOldExportsUseCase(storage)

    result = await use_case.execute(older_than_hours=24)

    assert result.value.deleted_count == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("hours", [0, -5])
async def test_cleanup_rejects_non_positive_window(hours):
    storage = MagicMock()
    storage.list_files = AsyncMock()
    use_case = CleanupOldExportsUseCase(storage)

    result = await use_case.execute(older_than_hours=hours)

    assert result.is_err()
    assert result.error.code == "INVALID_RETENTION_WINDOW"
    storage.list_files.assert_not_called()
