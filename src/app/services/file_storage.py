"""File Storage Interface

Abstract interface over the export output directory.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List


@dataclass
class StoredFile:
    """Entry of the export output directory"""
    name: str
    path: str
    modified_at: float  # POSIX timestamp


class FileStorage(ABC):
    """Interface for export file storage operations"""

    @abstractmethod
    async def upload(self, file_path: str, content: bytes) -> str:
        """
        Write file content to storage

        Returns only once the file is fully written and closed. A failed
        write leaves no file behind.

        Args:
            file_path: The destination path relative to the storage root
            content: The file content as bytes

        Returns:
            The absolute path of the stored file
        """
        pass

    @abstractmethod
    async def delete(self, file_path: str) -> bool:
        """
        Delete a file from storage

        Args:
            file_path: Path relative to the storage root, or absolute path

        Returns:
            True if a file was removed, False if there was nothing to remove

        Raises:
            OSError: if the file exists but could not be removed
        """
        pass

    @abstractmethod
    async def exists(self, file_path: str) -> bool:
        """Check if a file exists in storage"""
        pass

    @abstractmethod
    async def list_files(self) -> List[StoredFile]:
        """
        List entries at the storage root

        Returns an empty list when the storage root does not exist.
        """
        pass

    @abstractmethod
    def full_path(self, file_path: str) -> str:
        """Resolve a storage path to an absolute filesystem path"""
        pass
