from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ayurveda_store.models.order import Order
    from ayurveda_store.models.product import Product


class OrderItem(SQLModel, table=True):
    __tablename__ = "order_items"

    id: Optional[int] = Field(default=None, primary_key=True)
    order_id: int = Field(foreign_key="orders.id", index=True)
    product_id: Optional[int] = Field(default=None, foreign_key="products.id")

    quantity: int = 1
    # paise, frozen at the time of sale
    price_at_purchase: int

    order: Optional["Order"] = Relationship(back_populates="items")
    product: Optional["Product"] = Relationship()
