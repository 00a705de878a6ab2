import logging
from typing import Any, Dict, List, Optional

from sqlmodel import Session, select

from ayurveda_store.constants.order_status import OrderStatus
from ayurveda_store.models.order import Order
from ayurveda_store.models.order_item import OrderItem
from ayurveda_store.schemas.checkout_schemas import (
    LineItem,
    PaymentVerifyRequest,
    ShipmentRequest,
)
from ayurveda_store.utils.money import prices_at_purchase

logger = logging.getLogger(__name__)


def _quantity(item: LineItem) -> int:
    return item.quantity if item.quantity and item.quantity > 0 else 1


def _line_prices(order: Order, lines: List[LineItem]) -> List[int]:
    return prices_at_purchase(
        order.amount,
        [line.price for line in lines],
        [_quantity(line) for line in lines],
    )


def find_order_for_payment(session: Session, payment_id: str) -> Optional[Order]:
    return session.exec(
        select(Order).where(Order.payment_id == payment_id)
    ).first()


def record_paid_order(
    session: Session,
    payload: PaymentVerifyRequest,
    payment: Dict[str, Any],
) -> Order:
    """
    Persist the order for a captured payment.

    The gateway amount is the source of truth, never the client total.
    Errors propagate; the caller turns them into a 500.
    """
    order = Order(
        payment_id=payload.payment_id,
        razorpay_order_id=payload.order_id,
        amount=int(payment.get("amount") or 0),
        customer_name=payload.customer_name or None,
        customer_email=payload.customer_email or None,
        customer_phone=payload.customer_phone or None,
        shipping_address=payload.shipping_address or None,
        status=OrderStatus.processing.value,
    )
    session.add(order)
    session.commit()
    session.refresh(order)

    logger.info(f"Order {order.id} saved for payment {payload.payment_id}")
    return order


def record_order_items(
    session: Session,
    order: Order,
    lines: List[LineItem],
) -> List[OrderItem]:
    """
    Write the order lines in their own commit.

    A failure here leaves the order without lines; it is logged and the
    checkout still succeeds because the customer has already paid.
    """
    if not lines:
        return []

    prices = _line_prices(order, lines)
    items = [
        OrderItem(
            order_id=order.id,
            product_id=line.product_id,
            quantity=_quantity(line),
            price_at_purchase=price,
        )
        for line, price in zip(lines, prices)
    ]

    try:
        session.add_all(items)
        session.commit()
    except Exception:
        logger.exception(f"Error saving order items for order {order.id}")
        session.rollback()
        return []

    return items


def shipment_request_for(
    order: Order,
    lines: List[LineItem],
    payload: PaymentVerifyRequest,
) -> ShipmentRequest:
    prices = _line_prices(order, lines)
    shipment_lines = []
    for line, price in zip(lines, prices):
        quantity = _quantity(line)
        unit_price = line.price if line.price is not None else round(price / quantity / 100, 2)
        shipment_lines.append(
            LineItem(product_id=line.product_id, quantity=quantity, price=unit_price)
        )

    return ShipmentRequest(
        order_id=order.id,
        items=shipment_lines,
        customer_name=payload.customer_name,
        customer_email=payload.customer_email,
        customer_phone=payload.customer_phone,
        shipping_address=payload.shipping_address,
    )


def order_to_dict(order: Order) -> Dict[str, Any]:
    return {
        "id": order.id,
        "payment_id": order.payment_id,
        "razorpay_order_id": order.razorpay_order_id,
        "amount": order.amount,
        "customer_name": order.customer_name,
        "customer_email": order.customer_email,
        "customer_phone": order.customer_phone,
        "shipping_address": order.shipping_address,
        "status": order.status,
        "created_at": order.created_at,
        "updated_at": order.updated_at,
        "items": [
            {
                "id": item.id,
                "product_id": item.product_id,
                "quantity": item.quantity,
                "price_at_purchase": item.price_at_purchase,
                "product": {
                    "id": item.product.id,
                    "name": item.product.name,
                    "image_url": item.product.primary_image,
                } if item.product else None,
            }
            for item in order.items
        ],
    }
