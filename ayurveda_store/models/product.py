from sqlalchemy import Column, JSON
from sqlmodel import SQLModel, Field
from typing import List, Optional
from datetime import datetime


class Product(SQLModel, table=True):
    __tablename__ = "products"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    description: Optional[str] = None
    detailed_description: Optional[str] = None

    # paise
    price: int

    image_url: Optional[str] = None
    images: List[str] = Field(default_factory=list, sa_column=Column(JSON))

    in_stock: bool = True
    stock_quantity: int = 0

    category: Optional[str] = Field(default=None, index=True)
    dosage: Optional[str] = None
    ingredients: Optional[str] = None
    benefits: Optional[str] = None
    usage_instructions: Optional[str] = None
    weight: Optional[str] = None
    sku: Optional[str] = None

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    @property
    def primary_image(self) -> Optional[str]:
        if self.image_url:
            return self.image_url
        return self.images[0] if self.images else None
