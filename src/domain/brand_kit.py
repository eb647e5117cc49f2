"""BrandKit Entity

Brand colors, fonts and voice for a workspace. Exported as a snapshot in
the archive metadata.
"""
from datetime import datetime
from typing import Optional, Dict, Any
from sqlmodel import Field, Column
from sqlalchemy import JSON as SQLJSON
from src.domain.base import BaseModel, generate_uuid


class BrandKit(BaseModel, table=True):
    __tablename__ = "brand_kits"

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    workspace_id: str = Field(foreign_key="workspaces.id", index=True, nullable=False)

    colors: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(SQLJSON))
    fonts: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(SQLJSON))
    voice_prompt: Optional[str] = Field(default=None)
    logo_url: Optional[str] = Field(default=None)

    created_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)

    def to_snapshot(self) -> Dict[str, Any]:
        """Serializable snapshot used in export metadata"""
        return {
            "id": self.id,
            "workspaceId": self.workspace_id,
            "colors": self.colors,
            "fonts": self.fonts,
            "voicePrompt": self.voice_prompt,
            "logoUrl": self.logo_url,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }
