"""Vernacular Persistence — civilized entities, persistent identity and paged results.

Invariants:
    - Importing the package performs no IO and configures no logging

Design Decisions:
    - Public API re-exported here; submodules stay importable for finer imports
"""

from vernacular.core.civilized import Civilized, CivilizedObject, collect_violations_of
from vernacular.core.errors import (
    CompoundValidationError,
    IllegalStateError,
    InvalidArgumentError,
    VernacularError,
)
from vernacular.core.identity import UNASSIGNED, Assigned, PersistentObject, Unassigned
from vernacular.core.paging import PagedList, paginate
from vernacular.core.violations import Violation, ViolationSet

__version__ = "1.0.0"

__all__ = [
    "Assigned",
    "Civilized",
    "CivilizedObject",
    "CompoundValidationError",
    "IllegalStateError",
    "InvalidArgumentError",
    "PagedList",
    "PersistentObject",
    "UNASSIGNED",
    "Unassigned",
    "VernacularError",
    "Violation",
    "ViolationSet",
    "collect_violations_of",
    "paginate",
]
