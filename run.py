import logging
import os

import uvicorn
from dotenv import load_dotenv

load_dotenv()

from app.core.config import settings  # noqa: E402

logger = logging.getLogger(__name__)


def run_migrations() -> bool:
    """Run Alembic migrations."""
    from alembic.config import Config
    from alembic import command

    alembic_cfg = Config("alembic.ini")
    logger.info("[STARTUP] Running database migrations...")
    command.upgrade(alembic_cfg, "head")
    logger.info("[STARTUP] Migrations complete!")
    return True


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL)

    # Tables are otherwise created by init_db() on app startup
    if os.getenv("RUN_MIGRATIONS") == "true":
        run_migrations()

    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        log_level=settings.LOG_LEVEL.lower(),
        workers=1,
    )
