"""Data models for placeholder substitution."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class MappingSource(str, Enum):
    """Where a placeholder's value comes from at render time."""

    CUSTOMER = "customer"  # Customer profile field, e.g. name
    TRANSACTION = "transaction"  # Transaction field, e.g. totalAmount
    STATIC = "static"  # Value typed in by the operator
    USER_INPUT = "user_input"


class PlaceholderSource(BaseModel):
    """Resolution mapping entry for one placeholder."""

    source: str  # Usually a MappingSource value; unknown sources render as user input
    path: Optional[str] = None  # Field path for customer/transaction sources
    label: Optional[str] = None
    value: Optional[str] = None  # Literal for static sources


# Placeholder index (int or digit string) -> source descriptor
PlaceholderResolutionMapping = dict[int | str, PlaceholderSource]


class LivePreview(BaseModel):
    """First-row preview of a template under the current mapping."""

    preview: str = ""
    to: str = ""
    is_complete: bool = False
    unmapped_variables: list[int] = Field(default_factory=list)
    mapped_count: int = 0
    total_variables: int = 0
