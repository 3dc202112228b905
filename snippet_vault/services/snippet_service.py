"""Folder and snippet operations, always scoped to the owning user."""

import logging

from fastapi import HTTPException, status
from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload

from snippet_vault.models.folder import Folder
from snippet_vault.models.snippet import DEFAULT_LANGUAGE, CodeSnippet
from snippet_vault.services.screenshot_storage import ScreenshotStorage

logger = logging.getLogger(__name__)


def _like_pattern(term: str) -> str:
    """Substring LIKE pattern with wildcards in ``term`` escaped."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class SnippetService:
    """Service for folder and snippet CRUD.

    Every query filters on ``user_id`` so one user can never read or change
    another user's rows, even with a guessed id.
    """

    def __init__(self, db: Session, storage: ScreenshotStorage | None = None):
        self.db = db
        self.storage = storage

    # --- Folders ---

    def list_folders(self, owner_id: int) -> list[Folder]:
        """Get all folders of a user ordered by name."""
        return (
            self.db.query(Folder)
            .filter(Folder.user_id == owner_id)
            .order_by(Folder.name.asc(), Folder.id.asc())
            .all()
        )

    def create_folder(self, owner_id: int, name: str, description: str | None = None) -> Folder:
        """Create a folder for a user."""
        folder = Folder(name=name, description=description or None, user_id=owner_id)
        self.db.add(folder)
        self.db.commit()
        self.db.refresh(folder)
        return folder

    def get_folder(self, folder_id: int, owner_id: int) -> Folder:
        """Get an owned folder or raise 404."""
        folder = (
            self.db.query(Folder)
            .filter(Folder.id == folder_id, Folder.user_id == owner_id)
            .first()
        )
        if folder is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Folder not found")
        return folder

    def delete_folder(self, folder_id: int, owner_id: int) -> int:
        """Delete an owned folder, keeping its snippets unfiled.

        Returns the number of folders removed (0 or 1).
        """
        self.db.query(CodeSnippet).filter(
            CodeSnippet.folder_id == folder_id,
            CodeSnippet.user_id == owner_id,
        ).update({CodeSnippet.folder_id: None}, synchronize_session=False)
        deleted = (
            self.db.query(Folder)
            .filter(Folder.id == folder_id, Folder.user_id == owner_id)
            .delete(synchronize_session=False)
        )
        if deleted:
            self.db.commit()
        else:
            self.db.rollback()
        return deleted

    # --- Snippets ---

    def list_snippets(
        self,
        owner_id: int,
        search: str | None = None,
        folder_id: int | None = None,
    ) -> list[CodeSnippet]:
        """Get a user's snippets, newest first.

        ``search`` matches case-insensitively anywhere in the title,
        description or code.
        """
        query = (
            self.db.query(CodeSnippet)
            .options(joinedload(CodeSnippet.folder))
            .filter(CodeSnippet.user_id == owner_id)
        )
        if folder_id is not None:
            query = query.filter(CodeSnippet.folder_id == folder_id)
        if search and search.strip():
            pattern = _like_pattern(search.strip())
            query = query.filter(
                or_(
                    CodeSnippet.title.ilike(pattern, escape="\\"),
                    CodeSnippet.description.ilike(pattern, escape="\\"),
                    CodeSnippet.code.ilike(pattern, escape="\\"),
                )
            )
        return query.order_by(CodeSnippet.created_at.desc(), CodeSnippet.id.desc()).all()

    def create_snippet(
        self,
        owner_id: int,
        title: str,
        code: str | None,
        description: str | None = None,
        language: str = DEFAULT_LANGUAGE,
        folder_id: int | None = None,
    ) -> CodeSnippet:
        """Create a snippet; ``folder_id`` must name one of the owner's folders."""
        if folder_id is not None:
            self.get_folder(folder_id, owner_id)

        snippet = CodeSnippet(
            title=title,
            description=description or None,
            code=code,
            language=language or DEFAULT_LANGUAGE,
            folder_id=folder_id,
            user_id=owner_id,
        )
        self.db.add(snippet)
        self.db.commit()
        self.db.refresh(snippet)
        return snippet

    def get_snippet(self, snippet_id: int, owner_id: int) -> CodeSnippet:
        """Get an owned snippet or raise 404."""
        snippet = (
            self.db.query(CodeSnippet)
            .options(joinedload(CodeSnippet.folder))
            .filter(CodeSnippet.id == snippet_id, CodeSnippet.user_id == owner_id)
            .first()
        )
        if snippet is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Snippet not found")
        return snippet

    def delete_snippet(self, snippet_id: int, owner_id: int) -> int:
        """Delete an owned snippet and its screenshot.

        Returns the number of rows removed; 0 when the snippet does not exist
        or belongs to someone else.
        """
        screenshot_url = (
            self.db.query(CodeSnippet.screenshot_url)
            .filter(CodeSnippet.id == snippet_id, CodeSnippet.user_id == owner_id)
            .scalar()
        )
        deleted = (
            self.db.query(CodeSnippet)
            .filter(CodeSnippet.id == snippet_id, CodeSnippet.user_id == owner_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()

        if deleted and screenshot_url and self.storage is not None:
            self.storage.delete(screenshot_url)
        return deleted

    def attach_screenshot(
        self, snippet_id: int, owner_id: int, data: bytes, content_type: str | None
    ) -> CodeSnippet:
        """Store an image and point the snippet at it, replacing any previous one."""
        if self.storage is None:
            raise RuntimeError("Screenshot storage is not configured")

        snippet = self.get_snippet(snippet_id, owner_id)
        previous_url = snippet.screenshot_url

        snippet.screenshot_url = self.storage.save(data, content_type)
        self.db.commit()
        self.db.refresh(snippet)

        if previous_url:
            self.storage.delete(previous_url)
        logger.info(f"Attached screenshot to snippet {snippet.id}")
        return snippet
