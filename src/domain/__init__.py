from src.domain.base import BaseModel, generate_uuid
from src.domain.enums import (
    ApprovalStatus,
    ExportJobStatus,
    ExportFormat,
)
from src.domain.workspace import Workspace
from src.domain.brand_kit import BrandKit
from src.domain.asset import Asset
from src.domain.caption import Caption
from src.domain.generated_asset import GeneratedAsset
from src.domain.export_job import ExportJob, InvalidExportJobTransition

__all__ = [
    # Base
    "BaseModel",
    "generate_uuid",
    # Enums
    "ApprovalStatus",
    "ExportJobStatus",
    "ExportFormat",
    # Entities
    "Workspace",
    "BrandKit",
    "Asset",
    "Caption",
    "GeneratedAsset",
    "ExportJob",
    "InvalidExportJobTransition",
]
