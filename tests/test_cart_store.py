import json
from datetime import datetime

import pytest

from ayurveda_store.schemas.product_schemas import ProductRead
from ayurveda_store.services.cart_store import (
    CART_STORAGE_KEY,
    CartStore,
    JsonFileCartStorage,
    MemoryCartStorage,
)


def test_adding_same_product_merges_quantity():
    cart = CartStore()
    cart.add(1, 499.0, quantity=2)
    cart.add(1, 499.0, quantity=3)

    assert len(cart.lines) == 1
    assert cart.lines[0].quantity == 5
    assert cart.total_items() == 5


def test_add_rejects_non_positive_quantity():
    cart = CartStore()
    with pytest.raises(ValueError):
        cart.add(1, 499.0, quantity=0)
    assert cart.lines == []


def test_set_quantity_zero_removes_line():
    cart = CartStore()
    cart.add(1, 499.0)
    cart.add(2, 325.0)

    cart.set_quantity(1, 0)

    assert not cart.contains(1)
    assert cart.contains(2)


def test_set_quantity_replaces():
    cart = CartStore()
    cart.add(1, 499.0, quantity=4)
    cart.set_quantity(1, 2)
    assert cart.total_items() == 2


def test_totals():
    cart = CartStore()
    cart.add(1, 499.0, quantity=2)
    cart.add(2, 325.5)

    assert cart.total_items() == 3
    assert cart.total_price() == pytest.approx(1323.5)


def test_clear():
    cart = CartStore()
    cart.add(1, 499.0)
    cart.clear()
    assert cart.lines == []
    assert cart.total_price() == 0


def test_add_product_uses_catalog_price():
    now = datetime.utcnow()
    product = ProductRead(
        id=9, name="Chyawanprash", price=650.0, in_stock=True,
        stock_quantity=20, created_at=now, updated_at=now,
    )
    cart = CartStore()

    line = cart.add_product(product, quantity=2)

    assert line.name == "Chyawanprash"
    assert line.unit_price == 650.0
    assert cart.total_price() == 1300.0


def test_cart_survives_reopen_from_file(tmp_path):
    path = tmp_path / "cart" / "store.json"
    cart = CartStore.open(JsonFileCartStorage(str(path)))
    cart.add(1, 499.0, quantity=2, name="Ashwagandha Churna")

    reopened = CartStore.open(JsonFileCartStorage(str(path)))

    assert [(l.product_id, l.quantity, l.name) for l in reopened.lines] == [
        (1, 2, "Ashwagandha Churna")
    ]
    assert CART_STORAGE_KEY in json.loads(path.read_text())


def test_corrupt_storage_loads_empty():
    storage = MemoryCartStorage()
    storage.save(CART_STORAGE_KEY, "{not json")

    cart = CartStore.open(storage)

    assert cart.lines == []


def test_storage_with_wrong_shape_loads_empty():
    storage = MemoryCartStorage()
    storage.save(CART_STORAGE_KEY, json.dumps([{"product_id": "abc"}]))

    assert CartStore.open(storage).lines == []


def test_to_order_request_sends_paise():
    cart = CartStore()
    cart.add(1, 499.0, quantity=2)
    cart.add(2, 325.5)

    request = cart.to_order_request(customer_name="Meera Nair")

    assert request.total_amount == 132350
    assert request.customer_name == "Meera Nair"
    assert [(i.product_id, i.quantity, i.price) for i in request.items] == [
        (1, 2, 499.0),
        (2, 1, 325.5),
    ]
    assert request.model_dump(by_alias=True)["totalAmount"] == 132350
