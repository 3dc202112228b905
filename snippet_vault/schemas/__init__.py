"""Pydantic schemas for API requests and responses."""

from snippet_vault.schemas.auth import AuthResponse, Principal, UserLogin, UserRegister
from snippet_vault.schemas.folder import FolderCreate, FolderDetailResponse, FolderResponse
from snippet_vault.schemas.snippet import SnippetCreate, SnippetResponse

__all__ = [
    "UserRegister",
    "UserLogin",
    "Principal",
    "AuthResponse",
    "FolderCreate",
    "FolderResponse",
    "FolderDetailResponse",
    "SnippetCreate",
    "SnippetResponse",
]
