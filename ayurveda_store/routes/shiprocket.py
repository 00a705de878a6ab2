from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select

from ayurveda_store.database import get_session
from ayurveda_store.models.shiprocket_order import ShiprocketOrder
from ayurveda_store.schemas.checkout_schemas import ShipmentRequest
from ayurveda_store.services.shiprocket_service import register_shipment

router = APIRouter()


@router.post("/create-order")
def create_shipment(
    payload: ShipmentRequest,
    session: Session = Depends(get_session),
):
    if not payload.order_id:
        raise HTTPException(400, "Order ID is required")

    # Always 200 from here on; see register_shipment
    return register_shipment(session, payload)


@router.get("/tracking/{order_id}")
def get_tracking(
    order_id: int,
    session: Session = Depends(get_session),
):
    shipment = session.exec(
        select(ShiprocketOrder)
        .where(ShiprocketOrder.order_id == order_id)
        .order_by(ShiprocketOrder.created_at.desc())
    ).first()

    if not shipment:
        raise HTTPException(404, "Tracking information not found")

    return {
        "tracking_url": shipment.tracking_url,
        "awb_code": shipment.awb_code,
        "status": shipment.status,
        "shiprocket_order_id": shipment.shiprocket_order_id,
    }
