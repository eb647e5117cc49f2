"""Caption Entity

Caption text for an asset together with its generated variations. A
variation may carry an ad-copy payload (headline, body, cta, ...).
"""
from datetime import datetime
from typing import Optional, List, Dict, Any
from sqlmodel import Field, Column
from sqlalchemy import JSON as SQLJSON
from src.domain.base import BaseModel, generate_uuid
from src.domain.enums import ApprovalStatus


class Caption(BaseModel, table=True):
    __tablename__ = "captions"

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    workspace_id: str = Field(foreign_key="workspaces.id", index=True, nullable=False)
    asset_id: str = Field(foreign_key="assets.id", index=True, nullable=False)

    text: str = Field(default="", nullable=False)
    # [{"id": ..., "label": ..., "text": ..., "ad_copy": {...}}]
    variations: Optional[List[Dict[str, Any]]] = Field(default=None, sa_column=Column(SQLJSON))

    approval_status: ApprovalStatus = Field(default=ApprovalStatus.pending, nullable=False, index=True)
    generated_at: Optional[datetime] = Field(default=None)
    approved_at: Optional[datetime] = Field(default=None)
    created_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)

    def is_approved(self) -> bool:
        return self.approval_status == ApprovalStatus.approved

    def ad_copy_variations(self) -> List[Dict[str, Any]]:
        """Variations that carry a non-empty ad-copy payload"""
        return [v for v in (self.variations or []) if v.get("ad_copy")]

    def to_export_dict(self) -> Dict[str, Any]:
        status = self.approval_status
        return {
            "id": self.id,
            "workspaceId": self.workspace_id,
            "assetId": self.asset_id,
            "text": self.text,
            "variations": self.variations or [],
            "approvalStatus": status.value if hasattr(status, "value") else status,
            "generatedAt": self.generated_at.isoformat() if self.generated_at else None,
            "approvedAt": self.approved_at.isoformat() if self.approved_at else None,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
