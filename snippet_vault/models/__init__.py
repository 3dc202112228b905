"""SQLAlchemy models."""

from snippet_vault.models.folder import Folder
from snippet_vault.models.snippet import CodeSnippet
from snippet_vault.models.user import User

__all__ = [
    "User",
    "Folder",
    "CodeSnippet",
]
