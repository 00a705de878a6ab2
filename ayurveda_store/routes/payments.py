import logging
import time

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException
from sqlmodel import Session

from ayurveda_store.constants.order_status import PAYMENT_CAPTURED
from ayurveda_store.database import get_session
from ayurveda_store.schemas.checkout_schemas import (
    PaymentVerifyRequest,
    SingleProductIntentRequest,
)
from ayurveda_store.services.checkout_service import (
    find_order_for_payment,
    record_order_items,
    record_paid_order,
    shipment_request_for,
)
from ayurveda_store.services.razorpay_gateway import (
    create_gateway_order,
    fetch_payment,
    verify_payment_signature,
)
from ayurveda_store.services.shiprocket_service import register_shipment_task

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/create-order")
def create_single_product_order(payload: SingleProductIntentRequest):
    if not payload.product_id or not payload.amount:
        raise HTTPException(400, "Product ID and amount are required")

    try:
        gateway_order = create_gateway_order(
            payload.amount,
            receipt=f"receipt_{payload.product_id}_{int(time.time() * 1000)}",
        )
    except Exception:
        logger.exception("Error creating Razorpay order")
        raise HTTPException(500, "Failed to create order")

    return {"orderId": gateway_order["id"], "amount": gateway_order["amount"]}


@router.post("/verify")
def verify_payment(
    payload: PaymentVerifyRequest,
    background_tasks: BackgroundTasks,
    session: Session = Depends(get_session),
):
    # 1. Required callback fields
    if not payload.order_id or not payload.payment_id or not payload.signature:
        raise HTTPException(400, "Missing required payment verification data")

    # 2. Signature
    try:
        signature_ok = verify_payment_signature(
            payload.order_id, payload.payment_id, payload.signature
        )
    except Exception:
        logger.exception("Error verifying payment signature")
        raise HTTPException(500, "Failed to verify payment")

    if not signature_ok:
        logger.warning(f"Invalid payment signature for payment {payload.payment_id}")
        raise HTTPException(400, "Invalid payment signature")

    # Replayed callback for a payment we already recorded
    try:
        existing = find_order_for_payment(session, payload.payment_id)
    except Exception:
        logger.exception(f"Error looking up order for payment {payload.payment_id}")
        raise HTTPException(500, "Failed to verify payment")

    if existing:
        logger.info(
            f"Payment {payload.payment_id} already recorded as order {existing.id}"
        )
        return {"success": True, "paymentId": payload.payment_id, "orderId": existing.id}

    # 3. Authoritative payment state
    try:
        payment = fetch_payment(payload.payment_id)
    except Exception:
        logger.exception(f"Error fetching payment {payload.payment_id} from Razorpay")
        raise HTTPException(500, "Failed to verify payment")

    # 4. Only captured payments become orders
    if payment.get("status") != PAYMENT_CAPTURED:
        logger.warning(
            f"Payment {payload.payment_id} not captured (status={payment.get('status')})"
        )
        raise HTTPException(400, "Payment not captured")

    # 5. Order row
    try:
        order = record_paid_order(session, payload, payment)
    except Exception:
        logger.exception(f"Error saving order for payment {payload.payment_id}")
        session.rollback()
        raise HTTPException(500, "Failed to save order")

    order_id = order.id
    lines = payload.line_items()
    shipment = shipment_request_for(order, lines, payload)

    # 6. Order lines, best effort
    record_order_items(session, order, lines)

    # 7. Shipment, after the response is sent
    background_tasks.add_task(register_shipment_task, shipment)

    return {
        "success": True,
        "paymentId": payment.get("id") or payload.payment_id,
        "orderId": order_id,
    }
