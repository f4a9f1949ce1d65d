"""ORM Models — read-only SQLAlchemy mappings of the host CMS tables.

Invariants:
    - All models inherit from Base (db/base.py)
    - The host owns the schema: nothing here is created or migrated in production

Design Decisions:
    - One file per host concern for locality (posts, post types, taxonomies)
    - All models imported here so Base.metadata is complete before tests call create_all
"""

from app.models.post import Post, PostMeta  # noqa: F401
from app.models.post_type import PostType  # noqa: F401
from app.models.taxonomy import Taxonomy, Term, TermMeta, TermRelationship  # noqa: F401
