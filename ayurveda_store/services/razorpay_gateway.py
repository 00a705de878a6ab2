import logging
import time
from functools import lru_cache
from typing import Any, Dict, Optional

import razorpay

from ayurveda_store.config import settings

logger = logging.getLogger(__name__)


class GatewayNotConfigured(RuntimeError):
    pass


@lru_cache(maxsize=1)
def get_razorpay_client():
    """Razorpay client, built from settings on first use."""
    if not settings.razorpay_key_id or not settings.razorpay_key_secret:
        raise GatewayNotConfigured("Razorpay credentials are not configured")

    return razorpay.Client(
        auth=(settings.razorpay_key_id, settings.razorpay_key_secret)
    )


def create_gateway_order(amount: int, receipt: Optional[str] = None) -> Dict[str, Any]:
    """Open a Razorpay order for ``amount`` paise."""
    options = {
        "amount": amount,
        "currency": settings.currency,
        "receipt": receipt or f"receipt_{int(time.time() * 1000)}",
    }
    logger.info(f"Creating Razorpay order: amount={amount} receipt={options['receipt']}")
    return get_razorpay_client().order.create(options)


def fetch_payment(payment_id: str) -> Dict[str, Any]:
    return get_razorpay_client().payment.fetch(payment_id)


def _signature_utility(secret: Optional[str] = None):
    if secret is None:
        return get_razorpay_client().utility
    return razorpay.Client(auth=(settings.razorpay_key_id or "", secret)).utility


def verify_payment_signature(
    order_id: str,
    payment_id: str,
    signature: str,
    secret: Optional[str] = None,
) -> bool:
    """
    True when ``signature`` is Razorpay's checkout signature for
    ``order_id`` and ``payment_id``. Without an explicit ``secret`` the
    configured key secret is used.
    """
    try:
        return bool(_signature_utility(secret).verify_payment_signature({
            "razorpay_order_id": order_id,
            "razorpay_payment_id": payment_id,
            "razorpay_signature": signature,
        }))
    except razorpay.errors.SignatureVerificationError:
        return False
