"""Unit tests for export domain entities

Covers ExportJob status transitions and the export views of captions,
assets and brand kits.
"""
import pytest
from datetime import datetime
from src.domain.export_job import ExportJob, InvalidExportJobTransition
from src.domain.caption import Caption
from src.domain.asset import Asset
from src.domain.brand_kit import BrandKit
from src.domain.enums import ExportJobStatus, ApprovalStatus


def make_job(**overrides) -> ExportJob:
    data = dict(id="job-1", workspace_id="ws-1", items_total=3, items_captions=2, items_generated_assets=1)
    data.update(overrides)
    return ExportJob(**data)


class TestExportJob:
    """Test ExportJob lifecycle"""

    def test_new_job_is_pending(self):
        job = make_job()
        assert job.status == ExportJobStatus.pending
        assert job.output_path is None
        assert job.error_message is None
        assert job.created_at is not None
        assert job.is_terminal() is False

    def test_start_processing_sets_started_at(self):
        job = make_job()
        job.start_processing()
        assert job.status == ExportJobStatus.processing
        assert job.started_at is not None

    def test_complete_sets_output_path_and_clears_error(self):
        job = make_job()
        job.start_processing()
        job.complete("/exports/Acme_export_export_1_abc.zip")

        assert job.status == ExportJobStatus.completed
        assert job.output_path == "/exports/Acme_export_export_1_abc.zip"
        assert job.error_message is None
        assert job.completed_at is not None
        assert job.is_terminal() is True

    def test_fail_sets_error_and_clears_output_path(self):
        job = make_job()
        job.start_processing()
        job.fail("No approved content found for export")

        assert job.status == ExportJobStatus.failed
        assert job.error_message == "No approved content found for export"
        assert job.output_path is None
        assert job.completed_at is not None

    def test_pending_job_can_fail(self):
        job = make_job()
        job.fail("Export queue is full")
        assert job.status == ExportJobStatus.failed

    def test_cannot_complete_pending_job(self):
        job = make_job()
        with pytest.raises(InvalidExportJobTransition):
            job.complete("/exports/a.zip")

    def test_cannot_start_twice(self):
        job = make_job()
        job.start_processing()
        with pytest.raises(InvalidExportJobTransition) as exc_info:
            job.start_processing()
        assert exc_info.value.current == "processing"
        assert exc_info.value.target == "processing"

    @pytest.mark.parametrize("finish", ["complete", "fail"])
    def test_terminal_jobs_never_move_again(self, finish):
        job = make_job()
        job.start_processing()
        if finish == "complete":
            job.complete("/exports/a.zip")
        else:
            job.fail("boom")

        with pytest.raises(InvalidExportJobTransition):
            job.fail("again")
        with pytest.raises(InvalidExportJobTransition):
            job.start_processing()

    def test_status_value_accepts_plain_strings(self):
        job = make_job(status="completed")
        assert job.status_value == "completed"


class TestCaption:
    """Test Caption export helpers"""

    def test_ad_copy_variations_skips_empty_payloads(self):
        caption = Caption(
            workspace_id="ws-1",
            asset_id="asset-1",
            text="Summer sale",
            variations=[
                {"id": "v1", "label": "short", "text": "Sale!", "ad_copy": {"headline": "Save 20%"}},
                {"id": "v2", "label": "long", "text": "Big summer sale", "ad_copy": {}},
                {"id": "v3", "label": "plain", "text": "Sale"},
            ],
        )
        assert [v["id"] for v in caption.ad_copy_variations()] == ["v1"]

    def test_ad_copy_variations_without_variations(self):
        caption = Caption(workspace_id="ws-1", asset_id="asset-1", text="Hi")
        assert caption.ad_copy_variations() == []

    def test_to_export_dict(self):
        generated_at = datetime(2024, 5, 1, 10, 0, 0)
        caption = Caption(
            id="cap-1",
            workspace_id="ws-1",
            asset_id="asset-1",
            text="Fresh coffee every morning",
            approval_status=ApprovalStatus.approved,
            generated_at=generated_at,
        )
        data = caption.to_export_dict()

        assert data["id"] == "cap-1"
        assert data["text"] == "Fresh coffee every morning"
        assert data["approvalStatus"] == "approved"
        assert data["generatedAt"] == generated_at.isoformat()
        assert data["approvedAt"] is None
        assert data["variations"] == []
        assert caption.is_approved() is True


def test_asset_summary():
    asset = Asset(id="asset-1", workspace_id="ws-1", original_name="beach.jpg", mime_type="image/jpeg", url="/uploads/beach.jpg")
    assert asset.summary() == {"id": "asset-1", "originalName": "beach.jpg", "mimeType": "image/jpeg"}


def test_brand_kit_snapshot():
    brand_kit = BrandKit(
        id="bk-1",
        workspace_id="ws-1",
        colors={"primary": "#112233"},
        fonts={"heading": "Inter"},
        voice_prompt="Friendly and upbeat",
    )
    snapshot = brand_kit.to_snapshot()
    assert snapshot["colors"] == {"primary": "#112233"}
    assert snapshot["voicePrompt"] == "Friendly and upbeat"
    assert snapshot["logoUrl"] is None
