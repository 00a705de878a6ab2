from typing import Optional

from fastapi import APIRouter, Depends
from sqlmodel import Session, select

from ayurveda_store.database import get_session
from ayurveda_store.models.gallery_image import GalleryImage

router = APIRouter()


def gallery_query(category: Optional[str] = None):
    query = select(GalleryImage).order_by(
        GalleryImage.display_order.asc(),
        GalleryImage.created_at.desc(),
    )
    if category:
        query = query.where(GalleryImage.category == category)
    return query


@router.get("")
def list_gallery(
    category: Optional[str] = None,
    session: Session = Depends(get_session),
):
    return {"images": session.exec(gallery_query(category)).all()}
