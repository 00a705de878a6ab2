from sqlmodel import SQLModel, Field, Relationship
from typing import List, Optional
from datetime import datetime

from ayurveda_store.constants.order_status import OrderStatus
from ayurveda_store.models.order_item import OrderItem


class Order(SQLModel, table=True):
    __tablename__ = "orders"

    id: Optional[int] = Field(default=None, primary_key=True)

    payment_id: Optional[str] = Field(default=None, index=True)
    razorpay_order_id: Optional[str] = Field(default=None, index=True)

    # paise, as reported by the gateway
    amount: int

    customer_name: Optional[str] = None
    customer_email: Optional[str] = None
    customer_phone: Optional[str] = None
    shipping_address: Optional[str] = None

    status: str = Field(default=OrderStatus.pending.value)

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    items: List["OrderItem"] = Relationship(back_populates="order")
