from pydantic import BaseModel
from typing import Optional


class GalleryImageCreate(BaseModel):
    image_url: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    display_order: Optional[int] = None


class GalleryImageUpdate(GalleryImageCreate):
    pass
