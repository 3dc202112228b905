"""Folder schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from snippet_vault.schemas.snippet import SnippetResponse


class FolderCreate(BaseModel):
    """Create a new folder."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(None, max_length=2000)


class FolderResponse(BaseModel):
    """Folder response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None
    user_id: int
    created_at: datetime
    updated_at: datetime


class FolderDetailResponse(FolderResponse):
    """Folder with the snippets filed in it."""

    snippets: list[SnippetResponse] = []
