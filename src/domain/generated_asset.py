"""GeneratedAsset Entity

Rendered creative image produced from a caption, keyed by output format
(e.g. instagram-square) and layout (e.g. center-focus).
"""
from datetime import datetime
from typing import Optional
from sqlmodel import Field
from src.domain.base import BaseModel, generate_uuid
from src.domain.enums import ApprovalStatus


class GeneratedAsset(BaseModel, table=True):
    __tablename__ = "generated_assets"

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    workspace_id: str = Field(foreign_key="workspaces.id", index=True, nullable=False)
    caption_id: Optional[str] = Field(default=None, foreign_key="captions.id")

    image_url: str = Field(nullable=False)
    format: str = Field(nullable=False)
    layout: str = Field(nullable=False)

    approval_status: ApprovalStatus = Field(default=ApprovalStatus.pending, nullable=False, index=True)
    created_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)
