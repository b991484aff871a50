import logging

from sqlalchemy import create_engine               # SQLAlchemy engine
from sqlalchemy.ext.declarative import declarative_base  # base class for models
from sqlalchemy.orm import sessionmaker            # session factory

from config.settings import settings               # ✅ environment settings

logger = logging.getLogger(__name__)


def _engine_kwargs(url: str) -> dict:
    # SQLite connections are used from FastAPI's threadpool
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


# ✅ engine built from the configured URL
engine = create_engine(settings.DB_URL, **_engine_kwargs(settings.DB_URL))

# ✅ session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# ✅ declarative base for every model
Base = declarative_base()


def get_db():
    """Request-scoped session (FastAPI dependency)."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """Create every table that does not exist yet."""
    # models register themselves on Base.metadata when imported
    from models import students, teachers, classes, subjects, scores, attendance, comments  # noqa: F401

    target = bind or engine
    Base.metadata.create_all(bind=target)
    logger.info("Database tables ready (%s)", target.url.render_as_string(hide_password=True))
