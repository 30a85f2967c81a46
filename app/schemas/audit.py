from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class AuditLogResponse(BaseModel):
    id: int
    timestamp: datetime
    landlord_id: Optional[str] = None
    action: str
    entity_id: Optional[str] = None
    message: str

    class Config:
        from_attributes = True
