from datetime import datetime
from typing import Optional, Dict, Any
from sqlmodel import Field
from src.domain.base import BaseModel, generate_uuid


class Asset(BaseModel, table=True):
    """Original file uploaded to a workspace. `url` is relative to the asset root."""
    __tablename__ = "assets"

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    workspace_id: str = Field(foreign_key="workspaces.id", index=True, nullable=False)

    original_name: str = Field(nullable=False)
    mime_type: str = Field(nullable=False)
    size: Optional[int] = Field(default=None)
    url: str = Field(nullable=False)

    created_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)

    def summary(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "originalName": self.original_name,
            "mimeType": self.mime_type,
        }
