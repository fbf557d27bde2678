"""
==============================================================================
Product Schemas Module
==============================================================================

Request schemas for product operations.

Validation Rules:
----------------
- name:        required string, not blank, 1-100 characters
- description: optional string, at most 500 characters
- price:       required, finite number greater than zero
- category:    optional string, at most 50 characters
- stock:       optional non-negative integer (stored as 0 when absent)

Types are strict: "9.99" is not a price and 2.5 is not a stock count.

==============================================================================
"""

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr, field_validator
from pydantic_core import PydanticCustomError


# =============================================================================
# CREATE SCHEMAS
# =============================================================================

class CreateProductRequest(BaseModel):
    """Product creation payload. Unknown fields, including ``id``, are ignored."""
    name: StrictStr = Field(..., min_length=1, max_length=100)
    description: Optional[StrictStr] = Field(default=None, max_length=500)
    price: StrictFloat = Field(..., gt=0, allow_inf_nan=False)
    category: Optional[StrictStr] = Field(default=None, max_length=50)
    stock: Optional[StrictInt] = Field(default=None, ge=0)

    @field_validator("name")
    @classmethod
    def reject_blank_name(cls, v: str) -> str:
        if not v.strip():
            raise PydanticCustomError("blank_string", "Product name is required")
        return v

    @field_validator("price", mode="before")
    @classmethod
    def reject_oversized_price(cls, v: Any) -> Any:
        # JSON integers are unbounded; float() overflows past ~1.8e308
        if isinstance(v, int) and not isinstance(v, bool):
            try:
                return float(v)
            except OverflowError:
                raise PydanticCustomError(
                    "finite_number", "Price must be a positive value"
                ) from None
        return v


# Messages reported for constraint violations, keyed by (field, error type).
# Anything not listed is reported with the Pydantic message.
CREATE_PRODUCT_MESSAGES: Dict[Tuple[str, str], str] = {
    ("name", "missing"): "Product name is required",
    ("name", "string_too_short"): "Product name is required",
    ("name", "string_too_long"): "Product name must be between 1 and 100 characters",
    ("name", "string_type"): "Product name must be a string",
    ("description", "string_too_long"): "Description cannot exceed 500 characters",
    ("description", "string_type"): "Description must be a string",
    ("price", "missing"): "Price is required",
    ("price", "float_type"): "Price must be a number",
    ("price", "greater_than"): "Price must be a positive value",
    ("price", "finite_number"): "Price must be a positive value",
    ("category", "string_too_long"): "Category cannot exceed 50 characters",
    ("category", "string_type"): "Category must be a string",
    ("stock", "int_type"): "Stock must be an integer",
    ("stock", "greater_than_equal"): "Stock cannot be negative",
}
