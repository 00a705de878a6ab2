import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from ayurveda_store.dependencies.admin import require_admin
from ayurveda_store.services.storage_service import upload_product_image

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_admin)])


@router.post("/image")
def upload_image(file: UploadFile = File(None)):
    if not file:
        raise HTTPException(400, "No file provided")

    try:
        uploaded = upload_product_image(file)
    except Exception:
        logger.exception("Error uploading product image")
        raise HTTPException(500, "Failed to upload image")

    return {**uploaded, "success": True}
