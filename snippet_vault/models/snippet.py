"""Code snippet model."""

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from snippet_vault.database import Base
from snippet_vault.models.mixins import TimestampMixin

DEFAULT_LANGUAGE = "javascript"


class CodeSnippet(Base, TimestampMixin):
    """A saved piece of code, optionally filed in a folder."""

    __tablename__ = "code_snippets"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(String, nullable=True)
    code = Column(Text, nullable=True)
    language = Column(String(50), nullable=False, default=DEFAULT_LANGUAGE)
    screenshot_url = Column(String(500), nullable=True)
    folder_id = Column(
        Integer, ForeignKey("folders.id", ondelete="SET NULL"), nullable=True, index=True
    )
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # Relationships
    folder = relationship("Folder", back_populates="snippets")

    @property
    def folder_name(self) -> str | None:
        """Name of the containing folder, if any."""
        return self.folder.name if self.folder is not None else None
