from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime


class GalleryImage(SQLModel, table=True):
    __tablename__ = "gallery_images"

    id: Optional[int] = Field(default=None, primary_key=True)
    image_url: str
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = Field(default=None, index=True)
    display_order: int = 0
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
