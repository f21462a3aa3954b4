"""Civilized Objects — formalizes when a mutable entity represents a real-world object.

Entities often cannot be given semantically acceptable values at instantiation:
they start *wild*, go through a setup phase where properties are set, and only
then become *civilized*, i.e. a faithful representation of the real-world
object their type stands for. Changing properties can make them wild again,
typically before they are terminated.

Invariants:
    - collect_violations() is pure, works in any state (fully wild included)
      and returns an OPEN ViolationSet, possibly empty
    - is_civilized == collect_violations().is_empty, always (never cached)
    - enforce() changes no entity state: it returns normally iff civilized,
      otherwise closes the collected set and raises CompoundValidationError
    - An aggregate is civilized iff itself and every part it owns are

Design Decisions:
    - Protocol names the capability; CivilizedObject mixin derives is_civilized
      and enforce() so implementers only write collect_violations()
    - Subclasses fold down the hierarchy: call super().collect_violations(),
      then add local checks to the returned set
    - Aggregates merge parts with collect_violations_of(): each level returns
      its own set, no accumulator is passed by reference
"""

import logging
from typing import Protocol, runtime_checkable

from vernacular.core.violations import ViolationSet

logger = logging.getLogger(__name__)


@runtime_checkable
class Civilized(Protocol):
    """Structural contract for anything that can report its civilized state."""

    @property
    def is_civilized(self) -> bool: ...

    def collect_violations(self) -> ViolationSet: ...

    def enforce(self) -> None: ...


class CivilizedObject:
    """Mixin deriving is_civilized and enforce() from collect_violations()."""

    def collect_violations(self) -> ViolationSet:
        """Describe what keeps this instance from being civilized.

        Override in subclasses, starting from super().collect_violations().
        """
        return ViolationSet()

    @property
    def is_civilized(self) -> bool:
        return self.collect_violations().is_empty

    def enforce(self) -> None:
        """Raise CompoundValidationError unless this instance is civilized."""
        violations = self.collect_violations()
        if violations.is_empty:
            logger.debug(
                "Entity is civilized",
                extra={"entity_type": type(self).__name__},
            )
            return
        violations.close()
        logger.warning(
            f"{type(self).__name__} is not civilized ({len(violations)} violation(s))",
            extra={
                "error_code": "NOT_CIVILIZED",
                "entity_type": type(self).__name__,
                "violation_count": len(violations),
            },
        )
        violations.throw()


def collect_violations_of(*parts: Civilized | None) -> ViolationSet:
    """Union the violations of several parts into a new open set.

    None parts (unset optional associations) are skipped; a mandatory
    association that is missing should be reported by the owner itself.
    """
    merged = ViolationSet()
    for part in parts:
        if part is not None:
            merged.extend(part.collect_violations())
    return merged
