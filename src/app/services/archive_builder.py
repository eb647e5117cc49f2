"""
Archive Builder - Packages a workspace's approved content as a ZIP archive
"""
import io
import json
import logging
import re
import time
import uuid
import zipfile
from datetime import datetime
from pathlib import Path, PurePosixPath
from typing import Any, Dict, List, Optional

import aiofiles
from pydantic import BaseModel, Field

from src.app.services.file_storage import FileStorage
from src.app.services.unit_of_work import UnitOfWork
from src.domain.asset import Asset
from src.domain.caption import Caption
from src.domain.enums import ExportFormat

logger = logging.getLogger(__name__)


class ExportError(Exception):
    """Base error for archive construction"""

    code = "EXPORT_FAILED"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class WorkspaceNotFoundError(ExportError):
    code = "WORKSPACE_NOT_FOUND"

    def __init__(self, workspace_id: str):
        self.workspace_id = workspace_id
        super().__init__("Workspace not found")


class NoApprovedContentError(ExportError):
    code = "NO_APPROVED_CONTENT"

    def __init__(self, message: str = "No approved content found for export"):
        super().__init__(message)


class UnsupportedExportFormatError(ExportError):
    code = "UNSUPPORTED_EXPORT_FORMAT"

    def __init__(self, export_format: str):
        super().__init__(f"Export format '{export_format}' is not supported")


class ArchiveWriteError(ExportError):
    code = "ARCHIVE_WRITE_FAILED"


class ExportOptions(BaseModel):
    """Per-invocation archive contents"""
    include_assets: bool = False
    include_captions: bool = True
    include_generated_images: bool = True
    format: ExportFormat = ExportFormat.zip


class ArchiveResult(BaseModel):
    archive_path: str
    file_name: str
    entries: List[str] = Field(default_factory=list)
    # Source files that were skipped because they could not be read
    warnings: List[str] = Field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return not self.warnings


def sanitize_name(name: str) -> str:
    """Replace every non-alphanumeric character with an underscore"""
    return re.sub(r"[^a-zA-Z0-9]", "_", name)


def build_export_file_name(client_name: str) -> str:
    """Collision-resistant archive name: millisecond timestamp plus a random suffix"""
    export_id = f"export_{int(time.time() * 1000)}_{uuid.uuid4().hex[:9]}"
    return f"{sanitize_name(client_name)}_export_{export_id}.zip"


class ArchiveBuilder:
    """
    Builds the export archive for a workspace

    Layout:
    - metadata.json
    - captions.txt, captions.json
    - ad-copy.json, ad-copy/<asset-name>.json
    - assets/originals/<original-filename>
    - generated-images/<format>/<layout>/<image-filename>
    - README.md

    Source files that are missing on disk are skipped and reported in
    ArchiveResult.warnings instead of failing the export.
    """

    def __init__(self, uow: UnitOfWork, file_storage: FileStorage, asset_root: str = "."):
        self.uow = uow
        self.file_storage = file_storage
        self.asset_root = Path(asset_root)

    async def create_export(
        self, workspace_id: str, options: Optional[ExportOptions] = None
    ) -> ArchiveResult:
        """
        Create a ZIP export of approved captions and generated assets

        Args:
            workspace_id: Workspace to export
            options: Which sections to include (defaults to ExportOptions())

        Returns:
            ArchiveResult with the stored archive path and any skipped files

        Raises:
            UnsupportedExportFormatError: for formats other than zip
            WorkspaceNotFoundError: if the workspace does not exist
            NoApprovedContentError: if nothing is approved
            ArchiveWriteError: if the archive could not be written
        """
        options = options or ExportOptions()
        if options.format != ExportFormat.zip:
            raise UnsupportedExportFormatError(options.format.value)

        async with self.uow:
            workspace = await self.uow.workspaces.get_by_id(workspace_id)
            if not workspace:
                raise WorkspaceNotFoundError(workspace_id)

            captions = await self.uow.captions.get_approved_by_workspace(workspace_id)
            generated_assets = await self.uow.generated_assets.get_approved_by_workspace(workspace_id)
            if not captions and not generated_assets:
                raise NoApprovedContentError()

            brand_kit = await self.uow.brand_kits.get_by_workspace(workspace_id)

            # Distinct assets in caption order
            assets: Dict[str, Optional[Asset]] = {}
            for caption in captions:
                if caption.asset_id not in assets:
                    assets[caption.asset_id] = await self.uow.assets.get_by_id(caption.asset_id)

            # Entities expire when the unit of work rolls back on exit, so the
            # archive is assembled while they are still loaded
            file_name = build_export_file_name(workspace.client_name)
            warnings: List[str] = []
            entries: List[str] = []

            zip_buffer = io.BytesIO()
            with zipfile.ZipFile(zip_buffer, "w", zipfile.ZIP_DEFLATED, compresslevel=9) as zip_file:

                def add(name: str, content) -> None:
                    zip_file.writestr(name, content)
                    entries.append(name)

                metadata = {
                    "exportDate": datetime.utcnow().isoformat(),
                    "workspace": {
                        "id": workspace.id,
                        "clientName": workspace.client_name,
                    },
                    "counts": {
                        "captions": len(captions),
                        "generatedImages": len(generated_assets),
                        "assets": len(assets) if options.include_assets else 0,
                    },
                    "brandKit": brand_kit.to_snapshot() if brand_kit else None,
                }
                add("metadata.json", json.dumps(metadata, indent=2))

                if options.include_captions:
                    add("captions.txt", self._captions_text(captions, assets))
                    add("captions.json", json.dumps(self._captions_json(captions, assets), indent=2))

                    ad_copy = self._ad_copy_entries(captions, assets)
                    if ad_copy:
                        add("ad-copy.json", json.dumps(ad_copy, indent=2))
                        for asset_name, payload in self._ad_copy_by_asset(ad_copy).items():
                            add(f"ad-copy/{asset_name}.json", json.dumps(payload, indent=2))

                if options.include_assets:
                    used_names = set()
                    for asset_id, asset in assets.items():
                        if not asset:
                            warnings.append(f"Asset {asset_id} not found")
                            continue
                        content = await self._read_source(asset.url, warnings)
                        if content is None:
                            continue
                        name = PurePosixPath(asset.original_name).name or asset.id
                        if name in used_names:
                            name = f"{asset.id}_{name}"
                        used_names.add(name)
                        add(f"assets/originals/{name}", content)

                if options.include_generated_images:
                    for generated_asset in generated_assets:
                        content = await self._read_source(generated_asset.image_url, warnings)
                        if content is None:
                            continue
                        image_name = PurePosixPath(generated_asset.image_url).name
                        add(
                            f"generated-images/{generated_asset.format}/{generated_asset.layout}/{image_name}",
                            content,
                        )

                add("README.md", self._readme(workspace.client_name, options, captions, generated_assets, assets))

        try:
            archive_path = await self.file_storage.upload(file_name, zip_buffer.getvalue())
        except OSError as e:
            raise ArchiveWriteError(f"Failed to write export archive {file_name}: {e}") from e

        if warnings:
            logger.warning(
                f"[ArchiveBuilder] Export {file_name} completed with {len(warnings)} skipped files"
            )

        return ArchiveResult(
            archive_path=archive_path,
            file_name=file_name,
            entries=entries,
            warnings=warnings,
        )

    async def discard(self, archive: ArchiveResult) -> None:
        """Remove an archive that will not be recorded on its job"""
        try:
            await self.file_storage.delete(archive.archive_path)
        except OSError as e:
            logger.warning(f"[ArchiveBuilder] Failed to remove archive {archive.file_name}: {e}")

    async def _read_source(self, relative_url: str, warnings: List[str]) -> Optional[bytes]:
        """Read a source file under the asset root, or record a warning"""
        source_path = self.asset_root / relative_url.lstrip("/")
        try:
            async with aiofiles.open(source_path, "rb") as f:
                return await f.read()
        except OSError as e:
            logger.warning(f"[ArchiveBuilder] Skipping unreadable source file {source_path}: {e}")
            warnings.append(f"Source file missing: {relative_url}")
            return None

    @staticmethod
    def _captions_text(captions: List[Caption], assets: Dict[str, Optional[Asset]]) -> str:
        blocks = []
        for index, caption in enumerate(captions, start=1):
            asset = assets.get(caption.asset_id)
            blocks.append(
                f"=== Caption {index} ===\n"
                f"Asset: {asset.original_name if asset else 'Unknown'}\n"
                f"Caption: {caption.text}\n"
                f"Generated: {caption.generated_at.isoformat() if caption.generated_at else 'Unknown'}\n"
                f"Approved: {caption.approved_at.isoformat() if caption.approved_at else 'Unknown'}\n\n"
            )
        return "".join(blocks)

    @staticmethod
    def _captions_json(
        captions: List[Caption], assets: Dict[str, Optional[Asset]]
    ) -> List[Dict[str, Any]]:
        records = []
        for caption in captions:
            asset = assets.get(caption.asset_id)
            record = caption.to_export_dict()
            record["approved"] = caption.is_approved()
            record["asset"] = asset.summary() if asset else None
            records.append(record)
        return records

    @staticmethod
    def _ad_copy_entries(
        captions: List[Caption], assets: Dict[str, Optional[Asset]]
    ) -> List[Dict[str, Any]]:
        entries = []
        for caption in captions:
            variations = caption.ad_copy_variations()
            if not variations:
                continue
            asset = assets.get(caption.asset_id)
            entries.append({
                "captionId": caption.id,
                "assetId": caption.asset_id,
                "assetName": asset.original_name if asset else None,
                "variations": [
                    {
                        "id": variation.get("id"),
                        "label": variation.get("label"),
                        "text": variation.get("text"),
                        "adCopy": variation["ad_copy"],
                    }
                    for variation in variations
                ],
            })
        return entries

    @staticmethod
    def _ad_copy_by_asset(ad_copy: List[Dict[str, Any]]) -> Dict[str, Dict[str, Any]]:
        """One payload per asset, keyed by a file-safe name unique within the archive"""
        by_asset: Dict[str, Dict[str, Any]] = {}
        for entry in ad_copy:
            payload = by_asset.setdefault(entry["assetId"], {
                "assetId": entry["assetId"],
                "assetName": entry["assetName"],
                "variations": [],
            })
            payload["variations"].extend(entry["variations"])

        by_file_name: Dict[str, Dict[str, Any]] = {}
        for asset_id, payload in by_asset.items():
            name = asset_id
            if payload["assetName"]:
                name = sanitize_name(PurePosixPath(payload["assetName"]).stem) or asset_id
            if name in by_file_name:
                name = f"{asset_id}_{name}"
            by_file_name[name] = payload
        return by_file_name

    @staticmethod
    def _readme(
        client_name: str,
        options: ExportOptions,
        captions: List[Caption],
        generated_assets: list,
        assets: Dict[str, Optional[Asset]],
    ) -> str:
        contents = ["- metadata.json: Export information and counts"]
        if options.include_captions:
            contents.append("- captions.txt: Human-readable captions with asset names")
            contents.append("- captions.json: Machine-readable caption data")
            if any(caption.ad_copy_variations() for caption in captions):
                contents.append("- ad-copy.json, ad-copy/: Ad copy for each asset")
        if options.include_assets:
            contents.append("- assets/originals/: Original asset files")
        if options.include_generated_images:
            contents.append("- generated-images/: Rendered social media posts")

        counts = [f"- Approved Captions: {len(captions)}"]
        if generated_assets:
            counts.append(f"- Generated Images: {len(generated_assets)}")
        if options.include_assets:
            counts.append(f"- Original Assets: {len(assets)}")

        return (
            f"# {client_name} Export\n\n"
            "This export contains approved captions and creative assets.\n\n"
            "## Contents:\n"
            + "\n".join(contents)
            + "\n\n## Generated:\n"
            + f"{datetime.utcnow().isoformat()}\n\n"
            + "## Counts:\n"
            + "\n".join(counts)
            + "\n"
        )
