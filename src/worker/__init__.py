"""Worker module - Background job processing for the export service.

Contains background workers for:
- ExportWorker: Builds export archives for queued export jobs
"""
from .export_worker import ExportWorker, create_export_job_processor

__all__ = ["ExportWorker", "create_export_job_processor"]
