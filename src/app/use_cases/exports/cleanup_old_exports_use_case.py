"""Cleanup Old Exports Use Case

Retention sweep over the export output directory.
"""
import logging
import time
from libs.result import Result, Error, Return
from src.app.services.file_storage import FileStorage
from .dtos import CleanupResultDTO

logger = logging.getLogger(__name__)


class CleanupOldExportsUseCase:
    """
    Use case: Cleanup Old Exports

    Deletes export files last modified strictly before now - older_than_hours.
    Best effort: a file that cannot be removed is logged and skipped. Job
    records are not consulted or updated.
    """

    def __init__(self, file_storage: FileStorage):
        self.file_storage = file_storage

    async def execute(self, older_than_hours: float = 24) -> Result[CleanupResultDTO]:
        """
        Remove aged export files

        Args:
            older_than_hours: Minimum age of files to delete

        Returns:
            Result[CleanupResultDTO]: Number of files actually removed
        """
        if older_than_hours <= 0:
            return Return.err(Error(
                code="INVALID_RETENTION_WINDOW",
                message="older_than_hours must be greater than 0"
            ))

        cutoff_time = time.time() - older_than_hours * 60 * 60
        deleted_count = 0

        for stored_file in await self.file_storage.list_files():
            if stored_file.modified_at >= cutoff_time:
                continue
            try:
                if await self.file_storage.delete(stored_file.path):
                    deleted_count += 1
            except OSError as e:
                logger.error(f"[ExportCleanup] Error deleting old export file {stored_file.name}: {e}")

        logger.info(
            f"[ExportCleanup] Removed {deleted_count} export files older than {older_than_hours}h"
        )
        return Return.ok(CleanupResultDTO(
            deleted_count=deleted_count,
            older_than_hours=older_than_hours,
            message=f"Cleaned up {deleted_count} old export files",
        ))
