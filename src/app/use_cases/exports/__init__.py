from .dtos import (
    StartExportResponseDTO,
    ExportJobStatusDTO,
    ExportJobListDTO,
    ExportStatisticsDTO,
    ExportDownloadDTO,
    CleanupRequestDTO,
    CleanupResultDTO,
)
from .start_export_use_case import StartExportUseCase
from .process_export_job_use_case import ProcessExportJobUseCase
from .get_export_job_status_use_case import GetExportJobStatusUseCase
from .list_export_jobs_use_case import ListExportJobsUseCase
from .get_export_statistics_use_case import GetExportStatisticsUseCase
from .get_export_download_use_case import GetExportDownloadUseCase
from .delete_export_job_use_case import DeleteExportJobUseCase
from .cleanup_old_exports_use_case import CleanupOldExportsUseCase
from .resume_pending_exports_use_case import ResumePendingExportsUseCase

__all__ = [
    "StartExportResponseDTO",
    "ExportJobStatusDTO",
    "ExportJobListDTO",
    "ExportStatisticsDTO",
    "ExportDownloadDTO",
    "CleanupRequestDTO",
    "CleanupResultDTO",
    "StartExportUseCase",
    "ProcessExportJobUseCase",
    "GetExportJobStatusUseCase",
    "ListExportJobsUseCase",
    "GetExportStatisticsUseCase",
    "GetExportDownloadUseCase",
    "DeleteExportJobUseCase",
    "CleanupOldExportsUseCase",
    "ResumePendingExportsUseCase",
]
