import logging
from typing import Optional

from fastapi import Header, HTTPException, status

from ayurveda_store.config import settings
from ayurveda_store.utils.token import decode_access_token

logger = logging.getLogger(__name__)

UNAUTHORIZED = "Unauthorized. Admin access required."


def require_admin(
    x_admin_email: Optional[str] = Header(default=None),
    x_admin_token: Optional[str] = Header(default=None),
) -> str:
    """
    Admin gate. The email header must match the configured admin and the
    token header must be a live session token issued to that same email.
    """
    if not settings.admin_email:
        logger.warning("ADMIN_EMAIL is not configured; rejecting admin request")
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, UNAUTHORIZED)

    if not x_admin_email or not x_admin_token:
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, UNAUTHORIZED)

    if x_admin_email.lower() != settings.admin_email.lower():
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, UNAUTHORIZED)

    payload = decode_access_token(x_admin_token)
    if payload is None or payload.get("sub", "").lower() != x_admin_email.lower():
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, UNAUTHORIZED)

    return x_admin_email
