from pydantic import BaseModel, EmailStr
from typing import Optional


class ReviewCreate(BaseModel):
    user_name: Optional[str] = None
    user_email: Optional[EmailStr] = None
    rating: Optional[float] = None
    review_text: Optional[str] = None


class ReviewModerate(BaseModel):
    status: Optional[str] = None
    admin_notes: Optional[str] = None
