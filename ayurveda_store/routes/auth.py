import hmac
import logging

from fastapi import APIRouter, HTTPException, status

from ayurveda_store.config import settings
from ayurveda_store.schemas.admin_schemas import AdminLogin
from ayurveda_store.utils.token import create_access_token

logger = logging.getLogger(__name__)

router = APIRouter()


def _matches(supplied: str, expected: str) -> bool:
    return hmac.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8"))


@router.post("/login")
def admin_login(data: AdminLogin):
    if not settings.admin_email or not settings.admin_password:
        logger.warning("Admin login attempted but admin credentials are not configured")
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "Invalid credentials")

    email_ok = _matches(data.email.lower(), settings.admin_email.lower())
    password_ok = _matches(data.password, settings.admin_password)

    if not (email_ok and password_ok):
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "Invalid credentials")

    token = create_access_token({"sub": settings.admin_email.lower()})

    return {
        "email": settings.admin_email,
        "token": token,
        "token_type": "bearer",
    }
