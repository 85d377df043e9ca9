from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from portfolio.core import config


def _connect_args(database_url: str) -> dict:
    if database_url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(config.DATABASE_URL, connect_args=_connect_args(config.DATABASE_URL))

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)

Base = declarative_base()


def init_db(bind=None) -> None:
    # Imported here so every model is registered on Base before create_all.
    from portfolio.models import user  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
