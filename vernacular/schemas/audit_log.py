"""Audit Log Schema — read-only view of an AuditLog entry."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel

from vernacular.core.domain_types import EntryType
from vernacular.models.audit_log import AuditLog


class AuditLogResponse(BaseModel):
    """Audit entry as sent to clients. id is None while the entry is transient."""
    id: Any = None
    entry_type: EntryType | None = None
    entity_name: str | None = None
    entity_id: str | None = None
    property_name: str | None = None
    old_value: str | None = None
    new_value: str | None = None
    created_at: datetime | None = None
    created_by: str | None = None

    @classmethod
    def from_entity(cls, entry: AuditLog) -> "AuditLogResponse":
        return cls(
            id=None if entry.is_transient else entry.key,
            entry_type=entry.entry_type,
            entity_name=entry.entity_name,
            entity_id=entry.entity_id,
            property_name=entry.property_name,
            old_value=entry.old_value,
            new_value=entry.new_value,
            created_at=entry.created_at,
            created_by=entry.created_by,
        )
