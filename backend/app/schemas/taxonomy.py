"""Taxonomy Schemas — response contracts for taxonomies and their terms."""

from pydantic import BaseModel, Field


class TermRecord(BaseModel):
    """Term with its stored metadata (every value per key)."""
    id: int
    name: str
    slug: str
    count: int = 0
    meta: dict[str, list[str | None]] = Field(default_factory=dict)


class TaxonomyRecord(BaseModel):
    """Public taxonomy: label plus all terms, empty ones included."""
    name: str
    terms: list[TermRecord] = Field(default_factory=list)
