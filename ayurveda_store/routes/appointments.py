import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select

from ayurveda_store.constants.order_status import AppointmentStatus
from ayurveda_store.database import get_session
from ayurveda_store.dependencies.admin import require_admin
from ayurveda_store.models.appointment import Appointment
from ayurveda_store.schemas.booking_schemas import AppointmentCreate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", status_code=201)
def book_appointment(
    data: AppointmentCreate,
    session: Session = Depends(get_session),
):
    if not all([data.name, data.email, data.phone, data.service, data.date, data.time]):
        raise HTTPException(400, "All required fields must be provided")

    # Plain pre-insert check; two simultaneous bookings can still race
    taken = session.exec(
        select(Appointment).where(
            Appointment.date == data.date,
            Appointment.time == data.time,
            Appointment.status != AppointmentStatus.cancelled.value,
        )
    ).first()

    if taken:
        raise HTTPException(
            409, "This time slot is already booked. Please choose another time."
        )

    appointment = Appointment(
        name=data.name,
        email=data.email,
        phone=data.phone,
        service=data.service,
        date=data.date,
        time=data.time,
        message=data.message or None,
        status=AppointmentStatus.pending.value,
    )

    try:
        session.add(appointment)
        session.commit()
        session.refresh(appointment)
    except Exception:
        logger.exception("Error saving appointment")
        session.rollback()
        raise HTTPException(500, "Failed to save appointment")

    return {"success": True, "id": appointment.id}


@router.get("")
def list_appointments(
    session: Session = Depends(get_session),
    _: str = Depends(require_admin),
):
    appointments = session.exec(
        select(Appointment).order_by(Appointment.created_at.desc())
    ).all()
    return {"appointments": appointments}
