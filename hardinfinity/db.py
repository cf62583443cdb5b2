import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from hardinfinity.config import settings
from hardinfinity.errors import StorageFailure

logger = logging.getLogger(__name__)


def _normalize_database_url(raw_url: str) -> str:
    url = (raw_url or "").strip()
    if url.startswith("postgres://"):
        url = "postgresql://" + url[len("postgres://") :]
    if url.startswith("postgresql://") and "+psycopg" not in url:
        url = url.replace("postgresql://", "postgresql+psycopg://", 1)
    return url


def make_engine(raw_url: str) -> Engine:
    url = _normalize_database_url(raw_url)
    if url.startswith("sqlite"):
        return create_engine(url, future=True, connect_args={"check_same_thread": False})

    connect_args = {}
    if url.startswith("postgresql") and settings.DB_STATEMENT_TIMEOUT_MS > 0:
        connect_args["options"] = f"-c statement_timeout={settings.DB_STATEMENT_TIMEOUT_MS}"
    return create_engine(
        url,
        future=True,
        pool_pre_ping=True,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        connect_args=connect_args,
    )


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine, future=True)


@contextmanager
def atomic(db: Session) -> Iterator[Session]:
    """Run a block as one transaction: commit on success, roll back on any failure.

    Storage-layer errors are logged and re-raised as an opaque ``StorageFailure``;
    domain errors propagate unchanged after the rollback.
    """
    try:
        yield db
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Transaction rolled back after storage error")
        raise StorageFailure() from exc
    except Exception:
        db.rollback()
        raise
