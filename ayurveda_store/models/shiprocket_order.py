from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime


class ShiprocketOrder(SQLModel, table=True):
    __tablename__ = "shiprocket_orders"

    id: Optional[int] = Field(default=None, primary_key=True)
    order_id: int = Field(foreign_key="orders.id", index=True)

    shiprocket_order_id: Optional[str] = None
    shiprocket_shipment_id: Optional[str] = None
    tracking_url: Optional[str] = None
    awb_code: Optional[str] = None
    status: str = Field(default="pending")

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
