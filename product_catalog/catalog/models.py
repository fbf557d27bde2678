"""
==============================================================================
Product Models Module
==============================================================================

Pydantic models for product catalog items.

==============================================================================
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """
    Product model for catalog items.

    Instances are immutable; the store assigns ``id`` by saving a copy.

    Attributes:
        id: Store-generated identifier (None until saved)
        name: Product display name
        description: Free-text description
        price: Unit price, strictly positive
        category: Catalog category (e.g., "Tops", "Electronics")
        stock: Units on hand
    """

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = Field(default=None, description="Product identifier")
    name: str = Field(..., min_length=1, description="Product name")
    description: Optional[str] = Field(default=None, description="Product description")
    price: float = Field(..., gt=0, description="Unit price")
    category: Optional[str] = Field(default=None, description="Category")
    stock: int = Field(default=0, ge=0, description="Units in stock")
