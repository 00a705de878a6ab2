from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime


class ContactMessage(SQLModel, table=True):
    __tablename__ = "contact_messages"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    email: str
    phone: str
    subject: str
    message: str
    read: bool = False
    created_at: datetime = Field(default_factory=datetime.utcnow)
