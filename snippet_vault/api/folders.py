"""Folder API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from snippet_vault.api.dependencies import get_current_user, get_snippet_service
from snippet_vault.schemas.auth import Principal
from snippet_vault.schemas.folder import FolderCreate, FolderDetailResponse, FolderResponse
from snippet_vault.services.snippet_service import SnippetService

router = APIRouter(prefix="/api/v1/folders", tags=["folders"])


@router.get("", response_model=list[FolderResponse])
def get_folders(
    current_user: Annotated[Principal, Depends(get_current_user)],
    service: Annotated[SnippetService, Depends(get_snippet_service)],
):
    """Get all folders of the current user."""
    return service.list_folders(current_user.id)


@router.post("", response_model=FolderResponse, status_code=status.HTTP_201_CREATED)
def create_folder(
    folder_data: FolderCreate,
    current_user: Annotated[Principal, Depends(get_current_user)],
    service: Annotated[SnippetService, Depends(get_snippet_service)],
):
    """Create a new folder."""
    return service.create_folder(current_user.id, folder_data.name, folder_data.description)


@router.get("/{folder_id}", response_model=FolderDetailResponse)
def get_folder(
    folder_id: int,
    current_user: Annotated[Principal, Depends(get_current_user)],
    service: Annotated[SnippetService, Depends(get_snippet_service)],
):
    """Get a folder with its snippets."""
    return service.get_folder(folder_id, current_user.id)


@router.delete("/{folder_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_folder(
    folder_id: int,
    current_user: Annotated[Principal, Depends(get_current_user)],
    service: Annotated[SnippetService, Depends(get_snippet_service)],
):
    """Delete a folder. Its snippets are kept without a folder."""
    if not service.delete_folder(folder_id, current_user.id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Folder not found")
