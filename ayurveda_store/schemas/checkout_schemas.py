from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class LineItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: Optional[int] = Field(default=None, alias="productId")
    quantity: int = 1
    price: Optional[float] = None       # rupees per unit, optional


class CustomerDetails(BaseModel):
    customer_name: Optional[str] = None
    customer_email: Optional[str] = None
    customer_phone: Optional[str] = None
    shipping_address: Optional[str] = None


class OrderIntentRequest(CustomerDetails):
    model_config = ConfigDict(populate_by_name=True)

    items: Optional[List[LineItem]] = None
    total_amount: Optional[int] = Field(default=None, alias="totalAmount")   # paise


class SingleProductIntentRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: Optional[int] = Field(default=None, alias="productId")
    amount: Optional[int] = None        # paise


class PaymentVerifyRequest(CustomerDetails):
    model_config = ConfigDict(populate_by_name=True)

    order_id: Optional[str] = Field(default=None, alias="orderId")
    payment_id: Optional[str] = Field(default=None, alias="paymentId")
    signature: Optional[str] = None

    items: Optional[List[LineItem]] = None

    # "buy now" checkout sends a single product instead of items
    product_id: Optional[int] = Field(default=None, alias="productId")
    quantity: Optional[int] = None

    def line_items(self) -> List[LineItem]:
        if self.items:
            return self.items
        if self.product_id is not None:
            return [LineItem(product_id=self.product_id, quantity=self.quantity or 1)]
        return []


class ShipmentRequest(CustomerDetails):
    model_config = ConfigDict(populate_by_name=True)

    order_id: Optional[int] = Field(default=None, alias="orderId")
    items: List[LineItem] = []
