"""Content Schemas — response contracts for content records and blocks.

Invariants:
    - Block fields serialize under the host's camelCase names (blockName, innerHTML, innerContent)
    - featured_image is null, never "", when there is no usable image
    - custom_fields only on ContentRecordWithFields

Design Decisions:
    - Aliases + populate_by_name: core builds dicts with wire names, Python code may use snake_case
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class BlockRecord(BaseModel):
    """One parsed block and its rendered markup."""
    model_config = ConfigDict(populate_by_name=True)

    block_name: str | None = Field(None, alias="blockName")
    attrs: dict[str, Any] = Field(default_factory=dict)
    inner_html: str = Field("", alias="innerHTML")
    inner_content: list[str | None] = Field(default_factory=list, alias="innerContent")
    rendered: str = ""


class ContentRecord(BaseModel):
    """Flat projection of one published content item."""
    id: int
    type: str
    title: str
    slug: str
    date: str
    excerpt: str
    featured_image: str | None = None
    blocks: list[BlockRecord] = Field(default_factory=list)
    permalink: str


class ContentRecordWithFields(ContentRecord):
    """Content record plus public custom fields."""
    custom_fields: dict[str, Any] = Field(default_factory=dict)
