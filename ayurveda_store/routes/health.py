import logging
from datetime import datetime

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlmodel import Session, select

from ayurveda_store.database import get_session
from ayurveda_store.models.product import Product

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/keep-alive")
def keep_alive(session: Session = Depends(get_session)):
    """Pinged by a scheduler so the hosted database is never paused for inactivity."""
    try:
        session.exec(select(Product.id).limit(1)).all()
    except Exception:
        logger.exception("Keep-alive query failed")
        return JSONResponse(
            status_code=500,
            content={
                "status": "error",
                "message": "Database check failed",
                "timestamp": datetime.utcnow().isoformat(),
            },
        )

    return {
        "status": "active",
        "message": "Database is active and responsive",
        "timestamp": datetime.utcnow().isoformat(),
        "checked": True,
    }
