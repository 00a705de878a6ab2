import logging
import secrets
import time
from functools import lru_cache

import boto3
from fastapi import UploadFile

from ayurveda_store.config import settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_s3_client():
    return boto3.client(
        "s3",
        endpoint_url=settings.storage_endpoint_url,
        aws_access_key_id=settings.storage_access_key_id,
        aws_secret_access_key=settings.storage_secret_access_key,
        region_name=settings.storage_region,
    )


def unique_image_name(filename: str) -> str:
    ext = filename.rsplit(".", 1)[-1] if "." in filename else "bin"
    return f"{int(time.time() * 1000)}-{secrets.token_hex(6)}.{ext}"


def public_url(key: str) -> str:
    base = settings.storage_public_base or ""
    return f"{base.rstrip('/')}/{settings.storage_bucket}/{key}"


def upload_product_image(file: UploadFile) -> dict:
    key = unique_image_name(file.filename or "upload")

    get_s3_client().upload_fileobj(
        file.file,
        settings.storage_bucket,
        key,
        ExtraArgs={"ContentType": file.content_type or "application/octet-stream"},
    )
    logger.info(f"Uploaded product image {key}")

    return {
        "url": public_url(key),
        "fileName": key,
        "path": key,
    }
