from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select

from ayurveda_store.constants.order_status import ReviewStatus
from ayurveda_store.database import get_session
from ayurveda_store.dependencies.admin import require_admin
from ayurveda_store.models.review import ProductReview
from ayurveda_store.schemas.review_schemas import ReviewModerate

router = APIRouter(dependencies=[Depends(require_admin)])

MODERATION_STATES = {s.value for s in ReviewStatus}


@router.get("")
def list_reviews(
    status: Optional[str] = None,
    session: Session = Depends(get_session),
):
    query = select(ProductReview).order_by(ProductReview.created_at.desc())

    if status:
        query = query.where(ProductReview.status == status)

    return {"reviews": session.exec(query).all()}


@router.patch("/{review_id}")
def moderate_review(
    review_id: int,
    data: ReviewModerate,
    session: Session = Depends(get_session),
):
    if not data.status or data.status not in MODERATION_STATES:
        raise HTTPException(
            400, "Invalid status. Must be 'approved', 'rejected', or 'pending'"
        )

    review = session.get(ProductReview, review_id)
    if not review:
        raise HTTPException(404, "Review not found")

    review.status = data.status
    if data.admin_notes is not None:
        review.admin_notes = data.admin_notes
    review.updated_at = datetime.utcnow()

    session.add(review)
    session.commit()
    session.refresh(review)

    return {"review": review, "success": True}
