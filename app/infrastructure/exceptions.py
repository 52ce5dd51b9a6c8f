"""
Custom exceptions for the Infrastructure layer.
"""
from enum import Enum


class ErrorCode(str, Enum):
    """Structured kind carried by store-layer errors."""
    NOT_FOUND = "NOT_FOUND"
    OTHER = "OTHER"


class InfrastructureError(Exception):
    """Base class for exceptions in the infrastructure layer."""
    code: ErrorCode = ErrorCode.OTHER


class RecordNotFoundError(InfrastructureError):
    """No row matches the id an update or delete was scoped to."""
    code = ErrorCode.NOT_FOUND

    def __init__(self, entity: str, record_id: str):
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} {record_id} not found")
