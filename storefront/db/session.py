import logging
import time

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError
from sqlmodel import Session, create_engine

from storefront.core.config import Settings

logger = logging.getLogger(__name__)


def build_engine(settings: Settings) -> Engine:
    # check_same_thread is needed for SQLite, pool sizing only applies to MySQL
    if settings.is_sqlite:
        return create_engine(
            settings.database_url,
            echo=settings.DB_ECHO,
            connect_args={"check_same_thread": False},
        )
    return create_engine(
        settings.database_url,
        echo=settings.DB_ECHO,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_pre_ping=True,
    )


def check_connection(engine: Engine, retries: int = 0, delay: float = 0.0) -> None:
    """Run ``SELECT 1``, retrying on connection errors; re-raises the last one."""
    attempt = 0
    while True:
        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            logger.info("Connected to the database server")
            return
        except OperationalError:
            if attempt >= retries:
                logger.exception("Error connecting to the database server")
                raise
            attempt += 1
            logger.warning(
                "Database not reachable, retrying in %.1fs (%d/%d)", delay, attempt, retries
            )
            time.sleep(delay)


def get_engine(request: Request) -> Engine:
    return request.app.state.engine


def get_session(request: Request):
    with Session(get_engine(request)) as session:
        yield session
