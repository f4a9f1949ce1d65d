"""Post ORM — read-only mapping of the host's content items and their meta.

Invariants:
    - One table for every content type (posts, pages, custom types, attachments, field definitions)
    - post_name is the slug; post_status gates visibility (only "publish" is served)
    - postmeta rows are ordered by meta_id; a meta_key may repeat

Design Decisions:
    - Mapping only, no relationships: the service issues explicit queries so async
      sessions never lazy-load (ADR: predictable query count per request)
    - post_date is naive local time, as the host stores it
"""

from datetime import datetime

from sqlalchemy import String, Text, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Post(Base):
    """Host content item of any type."""
    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    post_type: Mapped[str] = mapped_column(
        String(20), nullable=False, default="post", index=True,
    )
    post_status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="publish", index=True,
    )
    post_title: Mapped[str] = mapped_column(Text, nullable=False, default="")
    post_name: Mapped[str] = mapped_column(
        String(200), nullable=False, default="", index=True,
    )
    post_content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    post_excerpt: Mapped[str] = mapped_column(Text, nullable=False, default="")
    post_date: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.now,
    )
    post_parent: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    post_mime_type: Mapped[str] = mapped_column(
        String(100), nullable=False, default="",
    )
    guid: Mapped[str] = mapped_column(String(255), nullable=False, default="")


class PostMeta(Base):
    """Custom field row attached to a content item."""
    __tablename__ = "postmeta"

    meta_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    post_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("posts.id"), nullable=False, index=True,
    )
    meta_key: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    meta_value: Mapped[str | None] = mapped_column(Text, nullable=True)
