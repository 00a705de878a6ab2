import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select

from ayurveda_store.constants.order_status import ReviewStatus
from ayurveda_store.database import get_session
from ayurveda_store.models.product import Product
from ayurveda_store.models.review import ProductReview
from ayurveda_store.schemas.product_schemas import ProductRead
from ayurveda_store.schemas.review_schemas import ReviewCreate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
def list_products(
    category: Optional[str] = None,
    in_stock: Optional[str] = None,
    session: Session = Depends(get_session),
):
    query = select(Product).order_by(Product.created_at.desc())

    if category:
        query = query.where(Product.category == category)

    if in_stock == "true":
        query = query.where(Product.in_stock == True)  # noqa: E712

    products = session.exec(query).all()
    return {"products": [ProductRead.from_product(p) for p in products]}


@router.get("/{product_id}")
def get_product(product_id: int, session: Session = Depends(get_session)):
    product = session.get(Product, product_id)

    if not product:
        raise HTTPException(404, "Product not found")

    return ProductRead.from_product(product)


# ---------------------------------------------------------
# REVIEWS
# ---------------------------------------------------------

@router.get("/{product_id}/reviews")
def list_approved_reviews(product_id: int, session: Session = Depends(get_session)):
    reviews = session.exec(
        select(ProductReview)
        .where(
            ProductReview.product_id == product_id,
            ProductReview.status == ReviewStatus.approved.value,
        )
        .order_by(ProductReview.created_at.desc())
    ).all()

    return {"reviews": reviews}


@router.post("/{product_id}/reviews", status_code=201)
def submit_review(
    product_id: int,
    data: ReviewCreate,
    session: Session = Depends(get_session),
):
    if not data.user_name or not data.user_email or data.rating is None or not data.review_text:
        raise HTTPException(400, "All fields are required")

    if data.rating < 1 or data.rating > 5 or data.rating != int(data.rating):
        raise HTTPException(400, "Rating must be between 1 and 5")

    if not session.get(Product, product_id):
        raise HTTPException(404, "Product not found")

    # Every review waits for moderation, whatever the client sent
    review = ProductReview(
        product_id=product_id,
        user_name=data.user_name,
        user_email=data.user_email,
        rating=int(data.rating),
        review_text=data.review_text,
        status=ReviewStatus.pending.value,
    )

    session.add(review)
    session.commit()
    session.refresh(review)

    return {"review": review, "success": True}
