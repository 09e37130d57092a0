"""
Pydantic models for catalog products.
"""

from typing import List

from pydantic import BaseModel, Field

from doc_agent_api.core.store import TimestampedRecord


class Product(TimestampedRecord):
    """A product as stored and returned by the API."""

    name: str = ""
    description: str = ""
    price: float = 0.0
    stock: int = 0


class ProductIn(BaseModel):
    """Request body for creating or replacing a product."""

    name: str = Field("", examples=["Laptop"])
    description: str = Field("", examples=["High-performance laptop"])
    price: float = Field(0.0, examples=[999.99])
    stock: int = Field(0, examples=[10])

    def to_record(self) -> Product:
        return Product(**self.model_dump())


class ProductList(BaseModel):
    products: List[Product]
    count: int
