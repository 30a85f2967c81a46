"""
Domain errors raised by the service layer.

Each error carries the HTTP status it maps to; app.main turns them into
JSON error responses. Every error is scoped to the request that raised it.
"""
from typing import Any, Dict, List, Optional

from fastapi import status


class RentalFlowError(Exception):
    """Base class for all RentalFlow service errors"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(detail)
        self.detail = detail
        self.errors = errors or []


class ValidationError(RentalFlowError):
    """A required field is missing or malformed"""

    status_code = status.HTTP_400_BAD_REQUEST

    @classmethod
    def from_fields(cls, field_errors: Dict[str, str]) -> "ValidationError":
        errors = [{"field": field, "message": message} for field, message in field_errors.items()]
        fields = ", ".join(field_errors)
        return cls(f"Invalid or missing fields: {fields}", errors)


class NotFoundError(RentalFlowError):
    """A referenced record does not exist"""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity: str, entity_id: Any):
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.entity_id = entity_id


class ConflictError(RentalFlowError):
    """The record is in a state that does not allow the operation"""

    status_code = status.HTTP_409_CONFLICT


class UnitOccupiedError(ConflictError):
    """A unit is held by another tenant"""

    def __init__(self, detail: str, property_id: Any = None, unit_id: Any = None, occupant_id: Any = None):
        super().__init__(detail)
        self.property_id = property_id
        self.unit_id = unit_id
        self.occupant_id = occupant_id


class PersistenceError(RentalFlowError):
    """The database rejected or failed a write"""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
