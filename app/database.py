"""
Database engine and session factory.
SQLite locally, any SQLAlchemy URL via DATABASE_URL.
"""
import logging

from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import sessionmaker

from app.core.config import settings
from app.db.base import Base

logger = logging.getLogger(__name__)

DATABASE_URL = settings.DATABASE_URL

if not DATABASE_URL:
    raise ValueError("[ERROR] DATABASE_URL not found!")

engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False} if settings.is_sqlite else {"connect_timeout": 10},
    echo=settings.DATABASE_ECHO,
    pool_pre_ping=True,
)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


if settings.is_sqlite:
    event.listen(engine, "connect", _enable_sqlite_foreign_keys)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)


def get_db():
    """Dependency for getting database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def test_connection() -> bool:
    """Test database connection - NON-BLOCKING."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1")).fetchone()
        safe_url = DATABASE_URL.split("@")[-1]
        logger.info(f"[OK] Database connected: {safe_url}")
        return True
    except Exception as e:
        logger.warning(f"[WARN] Database connection failed (continuing): {e}")
        return False


def init_db(bind=None) -> bool:
    """Create all tables - NON-BLOCKING."""
    try:
        # Register every model with Base before create_all
        import app.models  # noqa: F401

        Base.metadata.create_all(bind=bind or engine)
        logger.info("[OK] Database tables initialized!")
        return True
    except Exception as e:
        logger.warning(f"[WARN] Database init warning: {e}")
        return False


def close_db_connection():
    """Close database connections."""
    engine.dispose()
    logger.info("[OK] Database connections closed")
