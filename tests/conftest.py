import hashlib
import hmac
import os

# Settings are read at import time; give them a throwaway environment
os.environ.setdefault("ENV", "test")
os.environ.setdefault("POSTGRES_USER", "store")
os.environ.setdefault("POSTGRES_PASSWORD", "store")
os.environ.setdefault("POSTGRES_DB", "store_test")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("ADMIN_EMAIL", "admin@ayurclinic.in")
os.environ.setdefault("ADMIN_PASSWORD", "s3cret-pass")
os.environ.setdefault("RAZORPAY_KEY_ID", "rzp_test_key")
os.environ.setdefault("RAZORPAY_KEY_SECRET", "rzp_test_secret")

from unittest.mock import MagicMock

import pytest
import razorpay
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from ayurveda_store import database
from ayurveda_store import models  # noqa: F401
from ayurveda_store.config import settings
from ayurveda_store.main import app
from ayurveda_store.services import razorpay_gateway
from ayurveda_store.utils.token import create_access_token


@pytest.fixture
def engine(monkeypatch):
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    monkeypatch.setattr(database, "engine", engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    with TestClient(app) as client:
        yield client


@pytest.fixture(autouse=True)
def no_shiprocket(monkeypatch):
    monkeypatch.setattr(settings, "shiprocket_email", None)
    monkeypatch.setattr(settings, "shiprocket_password", None)


@pytest.fixture
def razorpay_client(monkeypatch):
    """
    Stand-in Razorpay client; tests set ``payment.fetch`` as needed.
    Signature checks go through the SDK utility of a real client.
    """
    client = MagicMock()
    client.utility = razorpay.Client(
        auth=(settings.razorpay_key_id, settings.razorpay_key_secret)
    ).utility
    client.order.create.side_effect = lambda options: {
        "id": "order_TEST123",
        "amount": options["amount"],
        "currency": options["currency"],
        "receipt": options["receipt"],
    }
    monkeypatch.setattr(razorpay_gateway, "get_razorpay_client", lambda: client)
    return client


@pytest.fixture
def admin_headers():
    return {
        "x-admin-email": settings.admin_email,
        "x-admin-token": create_access_token({"sub": settings.admin_email}),
    }


@pytest.fixture
def sign_payment():
    """Razorpay checkout signature, computed independently of the app code."""
    def sign(order_id, payment_id, secret=None):
        key = secret if secret is not None else settings.razorpay_key_secret
        return hmac.new(
            key.encode(), f"{order_id}|{payment_id}".encode(), hashlib.sha256
        ).hexdigest()
    return sign
