"""AuditLog — one recorded change to a property of some other persistent entity.

Invariants:
    - Created wild: every field starts as None and is filled in by the auditing code
    - Civilized iff entry_type, entity_name, entity_id, created_by and a
      timezone-aware created_at are set
    - UPDATE entries also name the changed property
    - Text fields are bounded (names: AUDIT_NAME_MAX_LENGTH, values: AUDIT_TEXT_MAX_LENGTH)
    - Values of the wrong type are reported as violations, never raised

Design Decisions:
    - entity_id stored as str: audited entities may use any key type, so the
      auditing code renders the key to text before setting it
    - Generic in K so the host picks its own key type for the audit table
"""

from datetime import datetime
from typing import TypeVar

from vernacular.core.domain_types import (
    AUDIT_NAME_MAX_LENGTH, AUDIT_TEXT_MAX_LENGTH, EntryType,
)
from vernacular.core.identity import PersistentObject
from vernacular.core.violations import ViolationSet

K = TypeVar("K")


class AuditLog(PersistentObject[K]):
    """Audit trail entry — a data holder with civilized rules."""

    def __init__(self, key: K | None = None):
        super().__init__(key)
        self.entry_type: EntryType | None = None
        self.entity_name: str | None = None
        self.entity_id: str | None = None
        self.property_name: str | None = None
        self.old_value: str | None = None
        self.new_value: str | None = None
        self.created_at: datetime | None = None
        self.created_by: str | None = None

    def collect_violations(self) -> ViolationSet:
        violations = super().collect_violations()
        self._check_required(violations, "entity_name", AUDIT_NAME_MAX_LENGTH)
        self._check_required(violations, "entity_id", AUDIT_NAME_MAX_LENGTH)
        self._check_required(violations, "created_by", AUDIT_NAME_MAX_LENGTH)

        if self.entry_type is None:
            self._report(violations, "entry_type", "is required")
        elif not isinstance(self.entry_type, EntryType):
            self._report(
                violations, "entry_type", f"unknown entry type {self.entry_type!r}",
            )
        elif self.entry_type == EntryType.UPDATE and not self.property_name:
            self._report(violations, "property_name", "is required for update entries")

        self._check_optional(violations, "property_name", AUDIT_NAME_MAX_LENGTH)
        self._check_optional(violations, "old_value", AUDIT_TEXT_MAX_LENGTH)
        self._check_optional(violations, "new_value", AUDIT_TEXT_MAX_LENGTH)

        if self.created_at is None:
            self._report(violations, "created_at", "is required")
        elif not isinstance(self.created_at, datetime):
            self._report(
                violations, "created_at",
                f"must be a datetime, got {type(self.created_at).__name__}",
            )
        elif self.created_at.tzinfo is None:
            self._report(violations, "created_at", "must be timezone-aware")
        return violations

    # --- Helpers ----------------------------------------------------------

    def _check_required(self, violations: ViolationSet, name: str, max_length: int) -> None:
        value = getattr(self, name)
        if value is None or value == "":
            self._report(violations, name, "is required")
        elif not isinstance(value, str):
            self._report(violations, name, f"must be text, got {type(value).__name__}")
        elif not value.strip():
            self._report(violations, name, "is required")
        elif len(value) > max_length:
            self._report(violations, name, f"exceeds {max_length} characters")

    def _check_optional(self, violations: ViolationSet, name: str, max_length: int) -> None:
        value = getattr(self, name)
        if value is None:
            return
        if not isinstance(value, str):
            self._report(violations, name, f"must be text, got {type(value).__name__}")
        elif len(value) > max_length:
            self._report(violations, name, f"exceeds {max_length} characters")

    def _report(self, violations: ViolationSet, name: str, message: str) -> None:
        violations.add_message(message, property_name=name, origin=type(self).__name__)
