import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from ayurveda_store.database import get_session
from ayurveda_store.dependencies.admin import require_admin
from ayurveda_store.models.gallery_image import GalleryImage
from ayurveda_store.routes.gallery import gallery_query
from ayurveda_store.schemas.gallery_schemas import GalleryImageCreate, GalleryImageUpdate

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_admin)])


def _get_or_404(session: Session, image_id: int) -> GalleryImage:
    image = session.get(GalleryImage, image_id)
    if not image:
        raise HTTPException(404, "Gallery image not found")
    return image


@router.get("")
def list_gallery_admin(
    category: Optional[str] = None,
    session: Session = Depends(get_session),
):
    return {"images": session.exec(gallery_query(category)).all()}


@router.post("", status_code=201)
def create_gallery_image(
    data: GalleryImageCreate,
    session: Session = Depends(get_session),
):
    if not data.image_url:
        raise HTTPException(400, "image_url is required")

    image = GalleryImage(
        image_url=data.image_url,
        title=data.title or None,
        description=data.description or None,
        category=data.category or None,
        display_order=data.display_order or 0,
    )

    try:
        session.add(image)
        session.commit()
        session.refresh(image)
    except Exception:
        logger.exception("Error creating gallery image")
        session.rollback()
        raise HTTPException(500, "Failed to create gallery image")

    return {"image": image, "message": "Gallery image created successfully"}


@router.get("/{image_id}")
def get_gallery_image(image_id: int, session: Session = Depends(get_session)):
    return {"image": _get_or_404(session, image_id)}


@router.put("/{image_id}")
def update_gallery_image(
    image_id: int,
    data: GalleryImageUpdate,
    session: Session = Depends(get_session),
):
    image = _get_or_404(session, image_id)
    fields = data.model_dump(exclude_unset=True)

    if fields.get("image_url"):
        image.image_url = fields["image_url"]
    for key in ("title", "description", "category"):
        if key in fields:
            setattr(image, key, fields[key] or None)
    if "display_order" in fields:
        image.display_order = fields["display_order"] or 0

    image.updated_at = datetime.utcnow()

    try:
        session.add(image)
        session.commit()
        session.refresh(image)
    except Exception:
        logger.exception(f"Error updating gallery image {image_id}")
        session.rollback()
        raise HTTPException(500, "Failed to update gallery image")

    return {"image": image, "message": "Gallery image updated successfully"}


@router.delete("/{image_id}")
def delete_gallery_image(image_id: int, session: Session = Depends(get_session)):
    image = _get_or_404(session, image_id)

    try:
        session.delete(image)
        session.commit()
    except Exception:
        logger.exception(f"Error deleting gallery image {image_id}")
        session.rollback()
        raise HTTPException(500, "Failed to delete gallery image")

    return {"message": "Gallery image deleted successfully"}
