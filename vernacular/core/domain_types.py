"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - PageIndex is 1-based; PageSize is strictly positive
    - All valid audit entry kinds encoded as an Enum — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Paging Types ────────────────────────────────────────────────

PageIndex = NewType("PageIndex", int)    # >= 1
PageSize = NewType("PageSize", int)      # >= 1

FIRST_PAGE = PageIndex(1)


# ─── Audit Types ─────────────────────────────────────────────────

AUDIT_TEXT_MAX_LENGTH = 4000
AUDIT_NAME_MAX_LENGTH = 255


class EntryType(str, Enum):
    """Kind of change recorded by an audit log entry."""
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
