import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import selectinload
from sqlmodel import Session, select

from ayurveda_store.database import get_session
from ayurveda_store.dependencies.admin import require_admin
from ayurveda_store.models.order import Order
from ayurveda_store.models.order_item import OrderItem
from ayurveda_store.schemas.checkout_schemas import OrderIntentRequest
from ayurveda_store.services.checkout_service import order_to_dict
from ayurveda_store.services.razorpay_gateway import create_gateway_order

logger = logging.getLogger(__name__)

router = APIRouter()


# ---------------------------------------------------------
# ORDER INTENT (CART CHECKOUT)
# ---------------------------------------------------------

@router.post("/create")
def create_order_intent(payload: OrderIntentRequest):
    if not payload.items:
        raise HTTPException(400, "Items are required")

    if not payload.total_amount or payload.total_amount <= 0:
        raise HTTPException(400, "Total amount must be greater than 0")

    # Nothing is stored until the payment is verified
    try:
        gateway_order = create_gateway_order(payload.total_amount)
    except Exception:
        logger.exception("Error creating Razorpay order")
        raise HTTPException(500, "Failed to create order")

    return {"orderId": gateway_order["id"], "amount": gateway_order["amount"]}


# ---------------------------------------------------------
# ADMIN: ALL ORDERS WITH LINES
# ---------------------------------------------------------

@router.get("")
def list_orders(
    session: Session = Depends(get_session),
    _: str = Depends(require_admin),
):
    orders = session.exec(
        select(Order)
        .options(selectinload(Order.items).selectinload(OrderItem.product))
        .order_by(Order.created_at.desc())
    ).all()

    return {"orders": [order_to_dict(o) for o in orders]}
