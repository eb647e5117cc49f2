"""Export API Routes

Endpoints for packaging a workspace's approved content as a ZIP archive,
tracking export jobs and cleaning up old archives.
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.responses import FileResponse
from src.api.error import ClientError, ServerError
from src.app.services.archive_builder import ArchiveBuilder, ExportOptions
from src.app.services.export_queue import ExportJobQueue
from src.app.services.file_storage import FileStorage
from src.app.services.unit_of_work import UnitOfWork
from src.depends import (
    get_archive_builder,
    get_config,
    get_export_options,
    get_export_queue,
    get_file_storage,
    get_unit_of_work,
)
from src.domain.enums import ExportJobStatus
from src.app.use_cases.exports import (
    StartExportUseCase,
    ProcessExportJobUseCase,
    GetExportJobStatusUseCase,
    ListExportJobsUseCase,
    GetExportStatisticsUseCase,
    GetExportDownloadUseCase,
    DeleteExportJobUseCase,
    CleanupOldExportsUseCase,
    StartExportResponseDTO,
    ExportJobStatusDTO,
    ExportJobListDTO,
    ExportStatisticsDTO,
    CleanupRequestDTO,
    CleanupResultDTO,
)

router = APIRouter()


@router.post(
    "/workspaces/{workspace_id}/exports",
    response_model=StartExportResponseDTO,
    status_code=status.HTTP_202_ACCEPTED
)
async def start_export(
    workspace_id: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
    export_queue: ExportJobQueue = Depends(get_export_queue),
):
    """
    Start an export job for a workspace

    Returns immediately with the job ID; poll the status endpoint for completion.
    """
    use_case = StartExportUseCase(uow, export_queue)
    result = await use_case.execute(workspace_id)

    if result.is_err():
        if result.error.code == "WORKSPACE_NOT_FOUND":
            raise ClientError(result.error, status_code=status.HTTP_404_NOT_FOUND)
        elif result.error.code == "EXPORT_QUEUE_FULL":
            raise ClientError(result.error, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)
        elif result.error.code == "NO_APPROVED_CONTENT":
            raise ClientError(result.error, status_code=status.HTTP_400_BAD_REQUEST)
        else:
            raise ServerError(result.error)

    return result.value


@router.get(
    "/workspaces/{workspace_id}/exports",
    response_model=ExportJobListDTO,
    status_code=status.HTTP_200_OK
)
async def list_export_jobs(
    workspace_id: str,
    status_filter: Optional[ExportJobStatus] = Query(None, alias="status"),
    limit: int = Query(20),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Export history for a workspace, most recent first"""
    use_case = ListExportJobsUseCase(uow)
    result = await use_case.execute(workspace_id, status=status_filter, limit=limit)

    if result.is_err():
        if result.error.code == "WORKSPACE_NOT_FOUND":
            raise ClientError(result.error, status_code=status.HTTP_404_NOT_FOUND)
        elif result.error.code == "INVALID_LIMIT":
            raise ClientError(result.error, status_code=status.HTTP_400_BAD_REQUEST)
        else:
            raise ServerError(result.error)

    return result.value


@router.get(
    "/workspaces/{workspace_id}/exports/statistics",
    response_model=ExportStatisticsDTO,
    status_code=status.HTTP_200_OK
)
async def get_export_statistics(
    workspace_id: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = GetExportStatisticsUseCase(uow)
    result = await use_case.execute(workspace_id)

    if result.is_err():
        if result.error.code == "WORKSPACE_NOT_FOUND":
            raise ClientError(result.error, status_code=status.HTTP_404_NOT_FOUND)
        else:
            raise ServerError(result.error)

    return result.value


@router.post(
    "/exports/cleanup",
    response_model=CleanupResultDTO,
    status_code=status.HTTP_200_OK
)
async def cleanup_old_exports(
    request: CleanupRequestDTO,
    file_storage: FileStorage = Depends(get_file_storage),
    config=Depends(get_config),
):
    """Delete export archives older than the retention window"""
    older_than_hours = request.older_than_hours
    if older_than_hours is None:
        older_than_hours = float(config.EXPORT_RETENTION_HOURS)

    use_case = CleanupOldExportsUseCase(file_storage)
    result = await use_case.execute(older_than_hours=older_than_hours)

    if result.is_err():
        raise ClientError(result.error, status_code=status.HTTP_400_BAD_REQUEST)

    return result.value


@router.get(
    "/exports/{job_id}",
    response_model=ExportJobStatusDTO,
    status_code=status.HTTP_200_OK
)
async def get_export_job_status(
    job_id: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
    file_storage: FileStorage = Depends(get_file_storage),
):
    """
    Get export job status

    When complete, includes the archive path and whether it is still on disk.
    """
    use_case = GetExportJobStatusUseCase(uow, file_storage)
    result = await use_case.execute(job_id)

    if result.is_err():
        if result.error.code == "EXPORT_JOB_NOT_FOUND":
            raise ClientError(result.error, status_code=status.HTTP_404_NOT_FOUND)
        else:
            raise ServerError(result.error)

    return result.value


@router.post(
    "/exports/{job_id}/process",
    response_model=ExportJobStatusDTO,
    status_code=status.HTTP_200_OK
)
async def process_export_job(
    job_id: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
    archive_builder: ArchiveBuilder = Depends(get_archive_builder),
    file_storage: FileStorage = Depends(get_file_storage),
    options: ExportOptions = Depends(get_export_options),
):
    """
    Process a pending export job inline

    A failed build is recorded on the job and reported through its status.
    """
    use_case = ProcessExportJobUseCase(uow, archive_builder, options)
    result = await use_case.execute(job_id)

    if result.is_err():
        if result.error.code == "EXPORT_JOB_NOT_FOUND":
            raise ClientError(result.error, status_code=status.HTTP_404_NOT_FOUND)
        elif result.error.code == "INVALID_JOB_STATUS":
            raise ClientError(result.error, status_code=status.HTTP_409_CONFLICT)

    status_result = await GetExportJobStatusUseCase(uow, file_storage).execute(job_id)
    if status_result.is_err():
        raise ServerError(status_result.error)

    return status_result.value


@router.get("/exports/{job_id}/download", status_code=status.HTTP_200_OK)
async def download_export(
    job_id: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
    file_storage: FileStorage = Depends(get_file_storage),
):
    """Stream a completed export archive"""
    use_case = GetExportDownloadUseCase(uow, file_storage)
    result = await use_case.execute(job_id)

    if result.is_err():
        if result.error.code == "EXPORT_JOB_NOT_FOUND":
            raise ClientError(result.error, status_code=status.HTTP_404_NOT_FOUND)
        elif result.error.code == "EXPORT_NOT_READY":
            raise ClientError(result.error, status_code=status.HTTP_409_CONFLICT)
        elif result.error.code == "EXPORT_FILE_EXPIRED":
            raise ClientError(result.error, status_code=status.HTTP_410_GONE)
        else:
            raise ServerError(result.error)

    return FileResponse(
        result.value.file_path,
        media_type="application/zip",
        filename=result.value.file_name,
    )


@router.delete("/exports/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_export_job(
    job_id: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
    file_storage: FileStorage = Depends(get_file_storage),
):
    """Remove an export job and its archive"""
    use_case = DeleteExportJobUseCase(uow, file_storage)
    result = await use_case.execute(job_id)

    if result.is_err():
        if result.error.code == "EXPORT_JOB_NOT_FOUND":
            raise ClientError(result.error, status_code=status.HTTP_404_NOT_FOUND)
        elif result.error.code == "EXPORT_JOB_IN_PROGRESS":
            raise ClientError(result.error, status_code=status.HTTP_409_CONFLICT)
        else:
            raise ServerError(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
