"""Base Schemas — shared pydantic configuration and identifier inputs.

Invariants:
    - Wire format is camelCase; Python code uses snake_case field names
    - Models accept either spelling on input (populate_by_name)

Design Decisions:
    - alias_generator over per-field aliases: one rule for every schema
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for all API schemas."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class GetByIdInput(CamelModel):
    """Single-resource lookup."""
    id: int = Field(gt=0)


class PageMeta(CamelModel):
    total_items: int
    current_page: int
    page_size: int
    total_pages: int
