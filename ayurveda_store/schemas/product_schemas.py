from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import datetime

from ayurveda_store.models.product import Product
from ayurveda_store.utils.money import to_rupees


class ProductCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    price: Optional[float] = None       # rupees
    description: Optional[str] = None
    detailed_description: Optional[str] = None
    image_url: Optional[str] = None
    image: Optional[str] = None
    images: Optional[List[str]] = None
    in_stock: Optional[bool] = Field(default=None, alias="inStock")
    stock_quantity: Optional[int] = None
    category: Optional[str] = None
    dosage: Optional[str] = None
    ingredients: Optional[str] = None
    benefits: Optional[str] = None
    usage_instructions: Optional[str] = None
    weight: Optional[str] = None
    sku: Optional[str] = None


class ProductUpdate(ProductCreate):
    pass


class ProductRead(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    detailed_description: Optional[str] = None
    price: float                         # rupees
    image_url: Optional[str] = None
    images: List[str] = []
    in_stock: bool
    stock_quantity: int
    category: Optional[str] = None
    dosage: Optional[str] = None
    ingredients: Optional[str] = None
    benefits: Optional[str] = None
    usage_instructions: Optional[str] = None
    weight: Optional[str] = None
    sku: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_product(cls, product: Product) -> "ProductRead":
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            detailed_description=product.detailed_description,
            price=to_rupees(product.price),
            image_url=product.primary_image,
            images=product.images or [],
            in_stock=product.in_stock,
            stock_quantity=product.stock_quantity,
            category=product.category,
            dosage=product.dosage,
            ingredients=product.ingredients,
            benefits=product.benefits,
            usage_instructions=product.usage_instructions,
            weight=product.weight,
            sku=product.sku,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )
