"""Local File Storage Adapter

Local filesystem implementation of the export output directory.
"""
import logging
import stat
from pathlib import Path
from typing import List

import aiofiles
import aiofiles.os

from src.app.services.file_storage import FileStorage, StoredFile

logger = logging.getLogger(__name__)


class LocalFileStorage(FileStorage):
    """Local filesystem storage implementation"""

    def __init__(self, base_path: str):
        """
        Initialize local file storage

        The base directory is created lazily on first upload, so a sweep of
        a fresh installation finds nothing instead of an empty directory.

        Args:
            base_path: Base directory for export files
        """
        self.base_path = Path(base_path)

    def full_path(self, file_path: str) -> str:
        path = Path(file_path)
        if path.is_absolute():
            return str(path)
        return str(self.base_path / path)

    async def upload(self, file_path: str, content: bytes) -> str:
        """Write file content to local storage"""
        full_path = Path(self.full_path(file_path))
        # Ensure parent directory exists
        await aiofiles.os.makedirs(full_path.parent, exist_ok=True)

        try:
            async with aiofiles.open(full_path, "wb") as f:
                await f.write(content)
                await f.flush()
        except OSError:
            # Partial archives are never valid output
            try:
                await aiofiles.os.remove(full_path)
            except FileNotFoundError:
                pass
            raise

        return str(full_path)

    async def delete(self, file_path: str) -> bool:
        """Delete a file from local storage"""
        full_path = self.full_path(file_path)
        try:
            await aiofiles.os.remove(full_path)
        except FileNotFoundError:
            return False
        return True

    async def exists(self, file_path: str) -> bool:
        """Check if a file exists in local storage"""
        return await aiofiles.os.path.isfile(self.full_path(file_path))

    async def list_files(self) -> List[StoredFile]:
        """List regular files at the storage root"""
        if not await aiofiles.os.path.isdir(self.base_path):
            return []

        files = []
        for name in await aiofiles.os.listdir(self.base_path):
            path = self.base_path / name
            try:
                st = await aiofiles.os.stat(path)
            except FileNotFoundError:
                # Removed between listing and stat
                continue
            if not stat.S_ISREG(st.st_mode):
                continue
            files.append(StoredFile(name=name, path=str(path), modified_at=st.st_mtime))
        return files
