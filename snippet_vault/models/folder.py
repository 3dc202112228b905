"""Folder model."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from snippet_vault.database import Base
from snippet_vault.models.mixins import TimestampMixin


class Folder(Base, TimestampMixin):
    """Folder for grouping a user's snippets."""

    __tablename__ = "folders"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(String, nullable=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # Relationships
    snippets = relationship(
        "CodeSnippet",
        back_populates="folder",
        order_by="CodeSnippet.id.desc()",
        passive_deletes=True,
    )
