"""
Audit Log Service
Read side of the audit log; entries are written by the other services via _audit.
"""
from typing import List, Optional

from sqlalchemy import select

from app.models.audit import AuditLogEntry
from app.services.base_service import DatabaseService

DEFAULT_LIMIT = 100


class AuditService(DatabaseService):

    def list_entries(self, landlord_id: Optional[str] = None, limit: int = DEFAULT_LIMIT) -> List[AuditLogEntry]:
        """Newest first"""
        stmt = select(AuditLogEntry).order_by(AuditLogEntry.id.desc()).limit(limit)
        if landlord_id:
            stmt = stmt.where(AuditLogEntry.landlord_id == landlord_id)
        return list(self.db.scalars(stmt))
