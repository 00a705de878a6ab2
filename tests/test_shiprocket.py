from unittest.mock import MagicMock

import pytest
from sqlmodel import Session, select

from ayurveda_store.config import settings
from ayurveda_store.models.order import Order
from ayurveda_store.models.product import Product
from ayurveda_store.models.shiprocket_order import ShiprocketOrder
from ayurveda_store.services import shiprocket_service


def _response(ok=True, payload=None, text=""):
    response = MagicMock()
    response.ok = ok
    response.json.return_value = payload or {}
    response.text = text
    return response


@pytest.fixture
def paid_order(engine):
    with Session(engine) as s:
        product = Product(name="Brahmi Ghrita", price=45000, sku="BRG-200")
        order = Order(
            payment_id="pay_SHIP1",
            razorpay_order_id="order_SHIP1",
            amount=90000,
            customer_name="Arjun Menon",
            customer_email="arjun@gmail.com",
            customer_phone="9847012345",
            shipping_address="4 Temple Street, Thrissur",
            status="processing",
        )
        s.add_all([product, order])
        s.commit()
        return order.id, product.id


@pytest.fixture
def shiprocket_credentials(monkeypatch):
    monkeypatch.setattr(settings, "shiprocket_email", "ops@ayurclinic.in")
    monkeypatch.setattr(settings, "shiprocket_password", "ship-pass")


def test_unconfigured_stores_placeholder(client, engine, paid_order):
    order_id, product_id = paid_order

    res = client.post("/api/shiprocket/create-order", json={
        "orderId": order_id,
        "items": [{"productId": product_id, "quantity": 2, "price": 450}],
    })

    assert res.status_code == 200
    assert res.json()["success"] is True

    with Session(engine) as s:
        shipment = s.exec(select(ShiprocketOrder)).one()
        assert shipment.order_id == order_id
        assert shipment.status == "pending"
        assert shipment.shiprocket_order_id.startswith("SR_")
        assert shipment.tracking_url is None


def test_missing_order_id(client):
    res = client.post("/api/shiprocket/create-order", json={"items": []})
    assert res.status_code == 400
    assert res.json() == {"error": "Order ID is required"}


def test_configured_registers_adhoc_order(
    client, engine, paid_order, shiprocket_credentials, monkeypatch
):
    order_id, product_id = paid_order
    post = MagicMock(side_effect=[
        _response(payload={"token": "sr-token"}),
        _response(payload={
            "order_id": 998877,
            "shipment_id": 554433,
            "status": "NEW",
            "awb_code": "",
        }),
    ])
    monkeypatch.setattr(shiprocket_service.requests, "post", post)

    res = client.post("/api/shiprocket/create-order", json={
        "orderId": order_id,
        "items": [{"productId": product_id, "quantity": 2, "price": 450}],
        "customer_name": "Arjun Menon",
        "customer_email": "arjun@gmail.com",
        "customer_phone": "9847012345",
        "shipping_address": "4 Temple Street, Thrissur",
    })

    assert res.status_code == 200
    assert res.json()["success"] is True

    login_call, order_call = post.call_args_list
    assert login_call.args[0].endswith("/auth/login")
    assert login_call.kwargs["json"] == {
        "email": "ops@ayurclinic.in",
        "password": "ship-pass",
    }

    assert order_call.args[0].endswith("/orders/create/adhoc")
    assert order_call.kwargs["headers"] == {"Authorization": "Bearer sr-token"}
    body = order_call.kwargs["json"]
    assert body["order_id"] == order_id
    assert body["payment_method"] == "Prepaid"
    assert body["billing_customer_name"] == "Arjun Menon"
    assert body["order_items"] == [
        {"name": "Brahmi Ghrita", "sku": "BRG-200", "units": 2, "selling_price": 450}
    ]
    assert body["sub_total"] == 900
    assert body["weight"] == 0.5

    with Session(engine) as s:
        shipment = s.exec(select(ShiprocketOrder)).one()
        assert shipment.shiprocket_order_id == "998877"
        assert shipment.shiprocket_shipment_id == "554433"
        assert shipment.status == "NEW"
        assert shipment.awb_code is None


def test_auth_failure_reports_without_raising(
    client, engine, paid_order, shiprocket_credentials, monkeypatch
):
    order_id, _ = paid_order
    post = MagicMock(return_value=_response(ok=False, text="bad credentials"))
    monkeypatch.setattr(shiprocket_service.requests, "post", post)

    res = client.post("/api/shiprocket/create-order", json={"orderId": order_id})

    assert res.status_code == 200
    assert res.json() == {
        "success": False,
        "error": "Shiprocket order creation failed, but main order is saved",
    }
    assert post.call_count == 1

    with Session(engine) as s:
        assert s.exec(select(ShiprocketOrder)).all() == []


def test_network_error_reports_without_raising(
    client, paid_order, shiprocket_credentials, monkeypatch
):
    order_id, _ = paid_order
    monkeypatch.setattr(
        shiprocket_service.requests,
        "post",
        MagicMock(side_effect=shiprocket_service.requests.ConnectionError("dns")),
    )

    res = client.post("/api/shiprocket/create-order", json={"orderId": order_id})

    assert res.status_code == 200
    assert res.json()["success"] is False


def test_tracking_not_found(client):
    res = client.get("/api/shiprocket/tracking/12345")
    assert res.status_code == 404
    assert res.json() == {"error": "Tracking information not found"}


def test_tracking_returns_shipment(client, engine, paid_order):
    order_id, _ = paid_order
    with Session(engine) as s:
        s.add(ShiprocketOrder(
            order_id=order_id,
            shiprocket_order_id="998877",
            tracking_url="https://shiprocket.co/tracking/AWB123",
            awb_code="AWB123",
            status="IN TRANSIT",
        ))
        s.commit()

    res = client.get(f"/api/shiprocket/tracking/{order_id}")

    assert res.status_code == 200
    assert res.json() == {
        "tracking_url": "https://shiprocket.co/tracking/AWB123",
        "awb_code": "AWB123",
        "status": "IN TRANSIT",
        "shiprocket_order_id": "998877",
    }
