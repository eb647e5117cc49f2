"""
Unit tests for export history use cases: listing, statistics, download,
deletion and resuming pending jobs.
"""
import pytest
from datetime import datetime, timedelta
from unittest.mock import AsyncMock, MagicMock
from src.app.use_cases.exports import (
    ListExportJobsUseCase,
    GetExportStatisticsUseCase,
    GetExportDownloadUseCase,
    DeleteExportJobUseCase,
    ResumePendingExportsUseCase,
)
from src.app.services.export_queue import ExportQueueFullError
from src.domain.export_job import ExportJob
from src.domain.workspace import Workspace
from src.domain.enums import ExportJobStatus


@pytest.fixture
def workspace():
    return Workspace(id="ws-1", client_name="Acme")


def completed_job(job_id: str, seconds: int, items: int = 2) -> ExportJob:
    created_at = datetime(2024, 1, 1, 12, 0, 0)
    return ExportJob(
        id=job_id,
        workspace_id="ws-1",
        status=ExportJobStatus.completed,
        items_total=items,
        output_path=f"/srv/exports/{job_id}.zip",
        created_at=created_at,
        started_at=created_at,
        completed_at=created_at + timedelta(seconds=seconds),
    )


class TestListExportJobs:

    @pytest.mark.asyncio
    async def test_list_with_status_filter(self, mock_uow, workspace):
        jobs = [completed_job("job-2", 10), completed_job("job-1", 20)]
        mock_uow.workspaces.get_by_id = AsyncMock(return_value=workspace)
        mock_uow.export_jobs.get_by_workspace = AsyncMock(return_value=jobs)
        use_case = ListExportJobsUseCase(mock_uow)

        result = await use_case.execute("ws-1", status=ExportJobStatus.completed, limit=5)

        assert result.is_ok()
        assert result.value.count == 2
        assert [job.export_job_id for job in result.value.jobs] == ["job-2", "job-1"]
        assert result.value.status_filter == "completed"
        assert result.value.limit == 5
        mock_uow.export_jobs.get_by_workspace.assert_awaited_once_with(
            "ws-1", status=ExportJobStatus.completed, limit=5
        )

    @pytest.mark.asyncio
    async def test_list_defaults(self, mock_uow, workspace):
        mock_uow.workspaces.get_by_id = AsyncMock(return_value=workspace)
        mock_uow.export_jobs.get_by_workspace = AsyncMock(return_value=[])
        use_case = ListExportJobsUseCase(mock_uow)

        result = await use_case.execute("ws-1")

        assert result.value.status_filter == "all"
        assert result.value.limit == 20
        assert result.value.jobs == []

    @pytest.mark.asyncio
    async def test_list_workspace_not_found(self, mock_uow):
        mock_uow.workspaces.get_by_id = AsyncMock(return_value=None)
        use_case = ListExportJobsUseCase(mock_uow)

        result = await use_case.execute("missing")

        assert result.error.code == "WORKSPACE_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_list_rejects_invalid_limit(self, mock_uow):
        use_case = ListExportJobsUseCase(mock_uow)

        result = await use_case.execute("ws-1", limit=0)

        assert result.error.code == "INVALID_LIMIT"


class TestGetExportStatistics:

    @pytest.mark.asyncio
    async def test_statistics(self, mock_uow, workspace):
        failed = ExportJob(id="job-3", workspace_id="ws-1", status=ExportJobStatus.failed, items_total=4)
        pending = ExportJob(id="job-4", workspace_id="ws-1", items_total=1)
        jobs = [completed_job("job-1", 10, items=2), completed_job("job-2", 30, items=3), failed, pending]
        mock_uow.workspaces.get_by_id = AsyncMock(return_value=workspace)
        mock_uow.export_jobs.get_by_workspace = AsyncMock(return_value=jobs)
        use_case = GetExportStatisticsUseCase(mock_uow)

        result = await use_case.execute("ws-1")

        assert result.is_ok()
        stats = result.value
        assert stats.total_exports == 4
        assert stats.completed_exports == 2
        assert stats.failed_exports == 1
        assert stats.average_processing_seconds == 20
        assert stats.total_items_exported == 10
        assert stats.success_rate == 50.0

    @pytest.mark.asyncio
    async def test_statistics_without_jobs(self, mock_uow, workspace):
        mock_uow.workspaces.get_by_id = AsyncMock(return_value=workspace)
        mock_uow.export_jobs.get_by_workspace = AsyncMock(return_value=[])
        use_case = GetExportStatisticsUseCase(mock_uow)

        result = await use_case.execute("ws-1")

        assert result.value.total_exports == 0
        assert result.value.average_processing_seconds == 0
        assert result.value.success_rate == 0.0


class TestGetExportDownload:

    @pytest.mark.asyncio
    async def test_download_ready(self, mock_uow, mock_file_storage):
        mock_uow.export_jobs.get_by_id = AsyncMock(return_value=completed_job("job-1", 5))
        use_case = GetExportDownloadUseCase(mock_uow, mock_file_storage)

        result = await use_case.execute("job-1")

        assert result.is_ok()
        assert result.value.file_path == "/srv/exports/job-1.zip"
        assert result.value.file_name == "job-1.zip"

    @pytest.mark.asyncio
    async def test_download_not_ready(self, mock_uow, mock_file_storage):
        mock_uow.export_jobs.get_by_id = AsyncMock(
            return_value=ExportJob(id="job-1", workspace_id="ws-1", status=ExportJobStatus.processing)
        )
        use_case = GetExportDownloadUseCase(mock_uow, mock_file_storage)

        result = await use_case.execute("job-1")

        assert result.error.code == "EXPORT_NOT_READY"
        mock_file_storage.exists.assert_not_called()

    @pytest.mark.asyncio
    async def test_download_file_expired(self, mock_uow, mock_file_storage):
        """A completed job whose archive was swept reports the file as gone"""
        job = completed_job("job-1", 5)
        mock_uow.export_jobs.get_by_id = AsyncMock(return_value=job)
        mock_file_storage.exists = AsyncMock(return_value=False)
        use_case = GetExportDownloadUseCase(mock_uow, mock_file_storage)

        result = await use_case.execute("job-1")

        assert result.error.code == "EXPORT_FILE_EXPIRED"
        assert job.status == ExportJobStatus.completed

    @pytest.mark.asyncio
    async def test_download_not_found(self, mock_uow, mock_file_storage):
        mock_uow.export_jobs.get_by_id = AsyncMock(return_value=None)
        use_case = GetExportDownloadUseCase(mock_uow, mock_file_storage)

        result = await use_case.execute("missing")

        assert result.error.code == "EXPORT_JOB_NOT_FOUND"


class TestDeleteExportJob:

    @pytest.mark.asyncio
    async def test_delete_removes_file_then_record(self, mock_uow, mock_file_storage):
        job = completed_job("job-1", 5)
        mock_uow.export_jobs.get_by_id = AsyncMock(return_value=job)
        mock_uow.export_jobs.delete = AsyncMock()
        use_case = DeleteExportJobUseCase(mock_uow, mock_file_storage)

        result = await use_case.execute("job-1")

        assert result.is_ok()
        mock_file_storage.delete.assert_awaited_once_with("/srv/exports/job-1.zip")
        mock_uow.export_jobs.delete.assert_awaited_once_with(job)
        mock_uow.commit.assert_called_once()

    @pytest.mark.asyncio
    async def test_delete_survives_file_error(self, mock_uow, mock_file_storage):
        mock_uow.export_jobs.get_by_id = AsyncMock(return_value=completed_job("job-1", 5))
        mock_uow.export_jobs.delete = AsyncMock()
        mock_file_storage.delete = AsyncMock(side_effect=PermissionError("denied"))
        use_case = DeleteExportJobUseCase(mock_uow, mock_file_storage)

        result = await use_case.execute("job-1")

        assert result.is_ok()
        mock_uow.export_jobs.delete.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_delete_processing_job_is_refused(self, mock_uow, mock_file_storage):
        mock_uow.export_jobs.get_by_id = AsyncMock(
            return_value=ExportJob(id="job-1", workspace_id="ws-1", status=ExportJobStatus.processing)
        )
        mock_uow.export_jobs.delete = AsyncMock()
        use_case = DeleteExportJobUseCase(mock_uow, mock_file_storage)

        result = await use_case.execute("job-1")

        assert result.error.code == "EXPORT_JOB_IN_PROGRESS"
        mock_uow.export_jobs.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_not_found(self, mock_uow, mock_file_storage):
        mock_uow.export_jobs.get_by_id = AsyncMock(return_value=None)
        use_case = DeleteExportJobUseCase(mock_uow, mock_file_storage)

        result = await use_case.execute("missing")

        assert result.error.code == "EXPORT_JOB_NOT_FOUND"


class TestResumePendingExports:

    @pytest.mark.asyncio
    async def test_resume_submits_pending_jobs(self, mock_uow):
        jobs = [ExportJob(id=f"job-{i}", workspace_id="ws-1") for i in range(3)]
        mock_uow.export_jobs.get_pending_jobs = AsyncMock(return_value=jobs)
        queue = MagicMock()
        use_case = ResumePendingExportsUseCase(mock_uow, queue)

        result = await use_case.execute(limit=10)

        assert result.value == 3
        assert [c.args[0] for c in queue.submit.call_args_list] == ["job-0", "job-1", "job-2"]
        mock_uow.export_jobs.get_pending_jobs.assert_awaited_once_with(limit=10)

    @pytest.mark.asyncio
    async def test_resume_stops_when_queue_is_full(self, mock_uow):
        jobs = [ExportJob(id=f"job-{i}", workspace_id="ws-1") for i in range(3)]
        mock_uow.export_jobs.get_pending_jobs = AsyncMock(return_value=jobs)
        queue = MagicMock()
        queue.submit = MagicMock(side_effect=[None, ExportQueueFullError("job-1", 1), None])
        use_case = ResumePendingExportsUseCase(mock_uow, queue)

        result = await use_case.execute()

        assert result.value == 1
        assert queue.submit.call_count == 2
