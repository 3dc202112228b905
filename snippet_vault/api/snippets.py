"""Code snippet API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile, status

from snippet_vault.api.dependencies import get_current_user, get_snippet_service
from snippet_vault.schemas.auth import Principal
from snippet_vault.schemas.snippet import SnippetCreate, SnippetResponse
from snippet_vault.services.screenshot_storage import InvalidImageError
from snippet_vault.services.snippet_service import SnippetService

router = APIRouter(prefix="/api/v1/snippets", tags=["snippets"])


@router.get("", response_model=list[SnippetResponse])
def get_snippets(
    current_user: Annotated[Principal, Depends(get_current_user)],
    service: Annotated[SnippetService, Depends(get_snippet_service)],
    search: Annotated[str | None, Query(max_length=200)] = None,
    folder_id: int | None = None,
):
    """Get the current user's snippets, optionally filtered by text or folder."""
    return service.list_snippets(current_user.id, search=search, folder_id=folder_id)


@router.post("", response_model=SnippetResponse, status_code=status.HTTP_201_CREATED)
def create_snippet(
    snippet_data: SnippetCreate,
    current_user: Annotated[Principal, Depends(get_current_user)],
    service: Annotated[SnippetService, Depends(get_snippet_service)],
):
    """Create a new snippet."""
    return service.create_snippet(
        current_user.id,
        title=snippet_data.title,
        code=snippet_data.code,
        description=snippet_data.description,
        language=snippet_data.language,
        folder_id=snippet_data.folder_id,
    )


@router.get("/{snippet_id}", response_model=SnippetResponse)
def get_snippet(
    snippet_id: int,
    current_user: Annotated[Principal, Depends(get_current_user)],
    service: Annotated[SnippetService, Depends(get_snippet_service)],
):
    """Get a specific snippet."""
    return service.get_snippet(snippet_id, current_user.id)


@router.delete("/{snippet_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_snippet(
    snippet_id: int,
    current_user: Annotated[Principal, Depends(get_current_user)],
    service: Annotated[SnippetService, Depends(get_snippet_service)],
):
    """Delete a snippet owned by the current user."""
    if not service.delete_snippet(snippet_id, current_user.id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Snippet not found")


@router.post("/{snippet_id}/screenshot", response_model=SnippetResponse)
async def upload_screenshot(
    snippet_id: int,
    file: Annotated[UploadFile, File(description="Screenshot image (JPEG, PNG, GIF, or WebP)")],
    current_user: Annotated[Principal, Depends(get_current_user)],
    service: Annotated[SnippetService, Depends(get_snippet_service)],
):
    """Attach a screenshot image to a snippet.

    Note: This endpoint must remain async because UploadFile.read() is async.
    """
    image_data = await file.read()
    try:
        return service.attach_screenshot(snippet_id, current_user.id, image_data, file.content_type)
    except InvalidImageError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from None
