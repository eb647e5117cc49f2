from datetime import datetime
from sqlmodel import Field
from src.domain.base import BaseModel, generate_uuid


class Workspace(BaseModel, table=True):
    __tablename__ = "workspaces"

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    client_name: str = Field(max_length=255, nullable=False)
    created_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)
