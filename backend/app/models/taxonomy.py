"""Taxonomy ORM — registered taxonomies, their terms, term meta and term assignments.

Invariants:
    - terms.taxonomy references taxonomies.name; a term belongs to exactly one taxonomy
    - terms.parent is 0 for root terms
    - terms.count is maintained by the host (published items carrying the term)
    - term_relationships is the only post ↔ term link

Design Decisions:
    - object_types as JSON list: mirrors the host's registration call, read in full per request
"""

from sqlalchemy import String, Text, Integer, Boolean, JSON, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Taxonomy(Base):
    """Registered classification scheme."""
    __tablename__ = "taxonomies"

    name: Mapped[str] = mapped_column(String(32), primary_key=True)
    label: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    public: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    hierarchical: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    object_types: Mapped[list] = mapped_column(JSON, nullable=False, default=list)


class Term(Base):
    """Value within a taxonomy."""
    __tablename__ = "terms"

    term_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    taxonomy: Mapped[str] = mapped_column(
        String(32), ForeignKey("taxonomies.name"), nullable=False, index=True,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    slug: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    parent: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class TermMeta(Base):
    """Metadata row attached to a term."""
    __tablename__ = "termmeta"

    meta_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    term_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("terms.term_id"), nullable=False, index=True,
    )
    meta_key: Mapped[str] = mapped_column(String(255), nullable=False)
    meta_value: Mapped[str | None] = mapped_column(Text, nullable=True)


class TermRelationship(Base):
    """Assignment of a term to a content item."""
    __tablename__ = "term_relationships"

    post_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("posts.id"), primary_key=True,
    )
    term_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("terms.term_id"), primary_key=True, index=True,
    )
