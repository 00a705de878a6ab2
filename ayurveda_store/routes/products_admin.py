import logging
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select

from ayurveda_store.database import get_session
from ayurveda_store.dependencies.admin import require_admin
from ayurveda_store.models.product import Product
from ayurveda_store.schemas.product_schemas import ProductCreate, ProductRead, ProductUpdate
from ayurveda_store.utils.money import to_paise

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_admin)])

REQUIRED_COLUMNS = {"name", "in_stock", "stock_quantity"}


@router.get("")
def list_all_products(session: Session = Depends(get_session)):
    products = session.exec(
        select(Product).order_by(Product.created_at.desc())
    ).all()
    return {"products": [ProductRead.from_product(p) for p in products]}


@router.post("", status_code=201)
def create_product(data: ProductCreate, session: Session = Depends(get_session)):
    if not data.name or not data.price:
        raise HTTPException(400, "Name and price are required")

    images = data.images or []
    primary_image = images[0] if images else (data.image_url or data.image)

    product = Product(
        name=data.name,
        description=data.description,
        detailed_description=data.detailed_description,
        price=to_paise(data.price),
        image_url=primary_image,
        images=images,
        in_stock=data.in_stock if data.in_stock is not None else True,
        stock_quantity=data.stock_quantity or 0,
        category=data.category,
        dosage=data.dosage,
        ingredients=data.ingredients,
        benefits=data.benefits,
        usage_instructions=data.usage_instructions,
        weight=data.weight,
        sku=data.sku,
    )

    try:
        session.add(product)
        session.commit()
        session.refresh(product)
    except Exception:
        logger.exception("Error creating product")
        session.rollback()
        raise HTTPException(500, "Failed to create product")

    return {"product": ProductRead.from_product(product), "success": True}


@router.put("/{product_id}")
def update_product(
    product_id: int,
    data: ProductUpdate,
    session: Session = Depends(get_session),
):
    product = session.get(Product, product_id)
    if not product:
        raise HTTPException(404, "Product not found")

    fields = data.model_dump(exclude_unset=True)
    price = fields.pop("price", None)
    images = fields.pop("images", None)
    image_url = fields.pop("image_url", None)
    image = fields.pop("image", None)

    if price is not None:
        product.price = to_paise(price)

    # The images list, when sent, also decides the primary image
    if images is not None:
        product.images = images
        product.image_url = images[0] if images else None
    elif image_url is not None or image is not None:
        product.image_url = image_url or image

    for key, value in fields.items():
        if value is None and key in REQUIRED_COLUMNS:
            continue
        setattr(product, key, value)

    product.updated_at = datetime.utcnow()

    try:
        session.add(product)
        session.commit()
        session.refresh(product)
    except Exception:
        logger.exception(f"Error updating product {product_id}")
        session.rollback()
        raise HTTPException(500, "Failed to update product")

    return {"product": ProductRead.from_product(product), "success": True}


@router.delete("/{product_id}")
def delete_product(product_id: int, session: Session = Depends(get_session)):
    product = session.get(Product, product_id)
    if not product:
        raise HTTPException(404, "Product not found")

    try:
        session.delete(product)
        session.commit()
    except Exception:
        logger.exception(f"Error deleting product {product_id}")
        session.rollback()
        raise HTTPException(500, "Failed to delete product")

    return {"success": True}
