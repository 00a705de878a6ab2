from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime

from ayurveda_store.constants.order_status import ReviewStatus


class ProductReview(SQLModel, table=True):
    __tablename__ = "product_reviews"

    id: Optional[int] = Field(default=None, primary_key=True)
    product_id: int = Field(foreign_key="products.id", index=True)
    user_name: str
    user_email: str
    rating: int
    review_text: str

    status: str = Field(default=ReviewStatus.pending.value, index=True)
    admin_notes: Optional[str] = None

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
