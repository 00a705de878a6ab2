import logging
import time
from datetime import datetime
from typing import Any, Dict, List, Optional

import requests
from sqlmodel import Session

from ayurveda_store import database
from ayurveda_store.config import settings
from ayurveda_store.models.product import Product
from ayurveda_store.models.shiprocket_order import ShiprocketOrder
from ayurveda_store.schemas.checkout_schemas import LineItem, ShipmentRequest

logger = logging.getLogger(__name__)

# Parcel defaults for a single jar/bottle shipment (cm / kg)
PARCEL_DIMENSIONS = {"length": 10, "breadth": 10, "height": 10, "weight": 0.5}


class ShiprocketError(Exception):
    pass


def _login() -> str:
    response = requests.post(
        f"{settings.shiprocket_api_url}/auth/login",
        json={
            "email": settings.shiprocket_email,
            "password": settings.shiprocket_password,
        },
        timeout=settings.shiprocket_timeout,
    )
    if not response.ok:
        raise ShiprocketError("Shiprocket authentication failed")

    token = response.json().get("token")
    if not token:
        raise ShiprocketError("Shiprocket authentication returned no token")
    return token


def _order_lines(session: Session, items: List[LineItem]) -> List[Dict[str, Any]]:
    lines = []
    for item in items:
        product = session.get(Product, item.product_id) if item.product_id else None
        lines.append({
            "name": product.name if product else f"Product {item.product_id}",
            "sku": (product.sku if product and product.sku else str(item.product_id)),
            "units": item.quantity or 1,
            "selling_price": item.price or 0,
        })
    return lines


def build_adhoc_order(session: Session, payload: ShipmentRequest) -> Dict[str, Any]:
    order_items = _order_lines(session, payload.items)
    sub_total = sum(line["selling_price"] * line["units"] for line in order_items)

    return {
        "order_id": payload.order_id,
        "order_date": datetime.utcnow().isoformat(),
        "pickup_location": settings.shiprocket_pickup_location,
        "billing_customer_name": payload.customer_name or "Customer",
        "billing_last_name": "",
        "billing_address": payload.shipping_address or "",
        "billing_address_2": "",
        "billing_city": "City",
        "billing_pincode": "000000",
        "billing_state": "State",
        "billing_country": "India",
        "billing_email": payload.customer_email or "",
        "billing_phone": payload.customer_phone or "",
        "shipping_is_billing": True,
        "order_items": order_items,
        "payment_method": "Prepaid",
        "sub_total": sub_total,
        **PARCEL_DIMENSIONS,
    }


def _as_str(value) -> Optional[str]:
    return str(value) if value is not None else None


def register_shipment(session: Session, payload: ShipmentRequest) -> Dict[str, Any]:
    """
    Register the paid order with Shiprocket and record what comes back.

    Never raises: a failed shipment must not undo a completed sale, so
    every error is logged and reported as ``success: False``.
    """
    try:
        if not settings.shiprocket_configured:
            logger.warning(
                "Shiprocket credentials not configured. Storing placeholder "
                f"shipment for order {payload.order_id}"
            )
            session.add(ShiprocketOrder(
                order_id=payload.order_id,
                shiprocket_order_id=f"SR_{int(time.time() * 1000)}",
                status="pending",
            ))
            session.commit()
            return {
                "success": True,
                "message": "Shiprocket not configured, order stored locally",
            }

        token = _login()

        response = requests.post(
            f"{settings.shiprocket_api_url}/orders/create/adhoc",
            json=build_adhoc_order(session, payload),
            headers={"Authorization": f"Bearer {token}"},
            timeout=settings.shiprocket_timeout,
        )
        if not response.ok:
            logger.error(f"Shiprocket order creation failed: {response.text}")
            raise ShiprocketError("Failed to create Shiprocket order")

        data = response.json()

        session.add(ShiprocketOrder(
            order_id=payload.order_id,
            shiprocket_order_id=_as_str(data.get("order_id") or data.get("id")),
            shiprocket_shipment_id=_as_str(data.get("shipment_id")),
            tracking_url=data.get("tracking_url") or data.get("courier_tracking_url"),
            awb_code=_as_str(data.get("awb_code")) or None,
            status=data.get("status") or "pending",
        ))
        session.commit()

        logger.info(f"Shiprocket order registered for order {payload.order_id}")
        return {"success": True, "shiprocketOrder": data}

    except Exception:
        logger.exception(f"Error creating Shiprocket order for order {payload.order_id}")
        session.rollback()
        return {
            "success": False,
            "error": "Shiprocket order creation failed, but main order is saved",
        }


def register_shipment_task(payload: ShipmentRequest) -> None:
    """Background entry point; runs after the checkout response is sent."""
    with database.open_session() as session:
        result = register_shipment(session, payload)

    if not result.get("success"):
        logger.warning(
            f"Shipment registration failed for order {payload.order_id}: "
            f"{result.get('error')}"
        )
