"""Error Schemas — typed view of the VernacularError.to_response() envelope."""

from datetime import datetime

from pydantic import BaseModel

from vernacular.core.errors import VernacularError


class ViolationResponse(BaseModel):
    message: str
    property_name: str | None = None
    origin: str | None = None
    cause: str | None = None


class ErrorContextResponse(BaseModel):
    entity_type: str | None = None
    entity_key: str | None = None


class ErrorBody(BaseModel):
    code: str
    message: str
    category: str
    severity: str
    timestamp: datetime
    context: ErrorContextResponse
    violations: list[ViolationResponse] = []


class ErrorResponse(BaseModel):
    """Serialized form of any VernacularError."""
    error: ErrorBody

    @classmethod
    def from_error(cls, exc: VernacularError) -> "ErrorResponse":
        return cls.model_validate(exc.to_response())
