"""
Shopper cart kept on the shopper's side of the checkout.

The cart never touches the database. It is an ordered list of lines keyed
by product id, persisted through an injected storage object so it survives
between sessions, and it turns itself into the order-intent request that
opens a Razorpay order. Stock is not reconciled here.
"""
import json
import logging
import os
from typing import Dict, List, Optional

from pydantic import BaseModel, ValidationError

from ayurveda_store.schemas.checkout_schemas import LineItem, OrderIntentRequest
from ayurveda_store.schemas.product_schemas import ProductRead
from ayurveda_store.utils.money import to_paise

logger = logging.getLogger(__name__)

CART_STORAGE_KEY = "ayurveda_cart"


class CartLine(BaseModel):
    product_id: int
    name: Optional[str] = None
    unit_price: float           # rupees
    quantity: int


class MemoryCartStorage:
    def __init__(self):
        self._data: Dict[str, str] = {}

    def load(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def save(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileCartStorage:
    """Key/value storage backed by one JSON file on disk."""

    def __init__(self, path: str):
        self.path = path

    def _read_all(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        with open(self.path, "r", encoding="utf-8") as fh:
            data = json.load(fh)
        return data if isinstance(data, dict) else {}

    def load(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def save(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except ValueError:
            data = {}
        data[key] = value

        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as fh:
            json.dump(data, fh)


class CartStore:

    def __init__(self, storage=None, key: str = CART_STORAGE_KEY):
        self.storage = storage if storage is not None else MemoryCartStorage()
        self.key = key
        self._lines: List[CartLine] = []

    @classmethod
    def open(cls, storage, key: str = CART_STORAGE_KEY) -> "CartStore":
        cart = cls(storage, key)
        cart.load()
        return cart

    # ---------------------------------------------------------
    # persistence hooks
    # ---------------------------------------------------------

    def load(self) -> None:
        try:
            raw = self.storage.load(self.key)
            parsed = json.loads(raw) if raw else []
            self._lines = (
                [CartLine(**line) for line in parsed]
                if isinstance(parsed, list) else []
            )
        except (ValueError, TypeError, ValidationError):
            logger.exception("Error loading cart from storage")
            self._lines = []

    def save(self) -> None:
        try:
            self.storage.save(
                self.key,
                json.dumps([line.model_dump() for line in self._lines]),
            )
        except OSError:
            logger.exception("Error saving cart to storage")

    # ---------------------------------------------------------
    # mutations
    # ---------------------------------------------------------

    def _find(self, product_id: int) -> Optional[CartLine]:
        return next((l for l in self._lines if l.product_id == product_id), None)

    def add(
        self,
        product_id: int,
        unit_price: float,
        quantity: int = 1,
        name: Optional[str] = None,
    ) -> CartLine:
        if quantity <= 0:
            raise ValueError("Quantity must be positive")

        line = self._find(product_id)
        if line:
            line.quantity += quantity
        else:
            line = CartLine(
                product_id=product_id,
                name=name,
                unit_price=unit_price,
                quantity=quantity,
            )
            self._lines.append(line)

        self.save()
        return line

    def add_product(self, product: ProductRead, quantity: int = 1) -> CartLine:
        return self.add(product.id, product.price, quantity, name=product.name)

    def remove(self, product_id: int) -> None:
        self._lines = [l for l in self._lines if l.product_id != product_id]
        self.save()

    def set_quantity(self, product_id: int, quantity: int) -> None:
        if quantity <= 0:
            self.remove(product_id)
            return

        line = self._find(product_id)
        if line:
            line.quantity = quantity
            self.save()

    def clear(self) -> None:
        self._lines = []
        self.save()

    # ---------------------------------------------------------
    # derived values
    # ---------------------------------------------------------

    @property
    def lines(self) -> List[CartLine]:
        return list(self._lines)

    def contains(self, product_id: int) -> bool:
        return self._find(product_id) is not None

    def total_items(self) -> int:
        return sum(l.quantity for l in self._lines)

    def total_price(self) -> float:
        return sum((l.unit_price or 0) * l.quantity for l in self._lines)

    def to_order_request(self, **customer) -> OrderIntentRequest:
        """Body for the order-intent endpoint; the total goes out in paise."""
        return OrderIntentRequest(
            items=[
                LineItem(product_id=l.product_id, quantity=l.quantity, price=l.unit_price)
                for l in self._lines
            ],
            total_amount=to_paise(self.total_price()),
            **customer,
        )
