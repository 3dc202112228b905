"""Code snippet schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from snippet_vault.models.snippet import DEFAULT_LANGUAGE


class SnippetCreate(BaseModel):
    """Create a new snippet."""

    title: str = Field(..., min_length=1, max_length=255)
    code: str = Field(..., min_length=1)
    description: str | None = Field(None, max_length=2000)
    language: str = Field(DEFAULT_LANGUAGE, min_length=1, max_length=50)
    folder_id: int | None = None


class SnippetResponse(BaseModel):
    """Snippet response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str | None
    code: str | None
    language: str
    screenshot_url: str | None
    folder_id: int | None
    folder_name: str | None = None
    user_id: int
    created_at: datetime
    updated_at: datetime
