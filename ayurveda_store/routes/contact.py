import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select

from ayurveda_store.database import get_session
from ayurveda_store.dependencies.admin import require_admin
from ayurveda_store.models.contact_message import ContactMessage
from ayurveda_store.schemas.booking_schemas import ContactCreate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", status_code=201)
def send_message(data: ContactCreate, session: Session = Depends(get_session)):
    if not all([data.name, data.email, data.phone, data.subject, data.message]):
        raise HTTPException(400, "All fields are required")

    message = ContactMessage(
        name=data.name,
        email=data.email,
        phone=data.phone,
        subject=data.subject,
        message=data.message,
        read=False,
    )

    try:
        session.add(message)
        session.commit()
        session.refresh(message)
    except Exception:
        logger.exception("Error saving contact message")
        session.rollback()
        raise HTTPException(500, "Failed to save message")

    return {"success": True, "id": message.id}


@router.get("")
def list_messages(
    session: Session = Depends(get_session),
    _: str = Depends(require_admin),
):
    messages = session.exec(
        select(ContactMessage).order_by(ContactMessage.created_at.desc())
    ).all()
    return {"messages": messages}
