"""SQLAlchemy Declarative Base — shared base class for all host table mappings.

Invariants:
    - All models inherit from Base
    - Base.metadata describes the host tables this service reads

Design Decisions:
    - Separate file for Base: post, post_type and taxonomy modules import it without importing each other
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all Content API ORM models."""
    pass
