"""PostType ORM — content types registered with the host.

Invariants:
    - name is the type slug used in URLs and in posts.post_type
    - menu_position then name gives registration order

Design Decisions:
    - rewrite_slug NULL means "use the type name"; empty string means site root
"""

from sqlalchemy import String, Integer, Boolean
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class PostType(Base):
    """Registered content type."""
    __tablename__ = "post_types"

    name: Mapped[str] = mapped_column(String(20), primary_key=True)
    label: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    public: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    hierarchical: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    exclude_from_search: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    rewrite_slug: Mapped[str | None] = mapped_column(String(100), nullable=True)
    menu_position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
