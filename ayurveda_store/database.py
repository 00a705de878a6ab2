from sqlmodel import SQLModel, create_engine, Session
from ayurveda_store.config import settings


engine = create_engine(
    settings.database_url,
    echo=False,
    pool_pre_ping=True,
    pool_recycle=1800
)


def create_db_and_tables():
    from ayurveda_store import models  # noqa: F401
    SQLModel.metadata.create_all(engine)


def get_session():
    with Session(engine) as session:
        yield session


def open_session() -> Session:
    """Session for work that runs outside a request, e.g. background tasks."""
    return Session(engine)
