"""
Shared plumbing for services bound to one request-scoped Session.
"""
import logging
from typing import Any, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import PersistenceError
from app.models.audit import AuditLogEntry

logger = logging.getLogger(__name__)


class DatabaseService:
    """A service owning no state besides the session it was built with."""

    def __init__(self, db: Session):
        self.db = db

    def _audit(self, action: str, message: str, landlord_id: Optional[str] = None, entity_id: Any = None) -> None:
        """Stage an audit log entry; it is saved by the same commit as the change it describes."""
        self.db.add(AuditLogEntry(
            action=action,
            message=message,
            landlord_id=landlord_id,
            entity_id=str(entity_id) if entity_id is not None else None,
        ))

    def _commit(self, action: str) -> None:
        """Commit the unit of work; roll back and raise PersistenceError on failure."""
        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error(f"[DB] Failed to {action}: {exc}")
            raise PersistenceError(f"Failed to {action}") from exc
