from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime

from ayurveda_store.constants.order_status import AppointmentStatus


class Appointment(SQLModel, table=True):
    __tablename__ = "appointments"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    email: str
    phone: str
    service: str

    # kept as submitted by the booking form, e.g. "2026-10-21" / "10:30"
    date: str = Field(index=True)
    time: str

    message: Optional[str] = None
    status: str = Field(default=AppointmentStatus.pending.value)

    created_at: datetime = Field(default_factory=datetime.utcnow)
