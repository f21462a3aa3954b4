"""Violation Set — accumulable, closeable collection of semantic violations.

Invariants:
    - Violations keep insertion order; nothing is ever removed
    - Once closed, a set is immutable: add(), extend() and close() raise IllegalStateError
    - throw() requires a closed, non-empty set and raises CompoundValidationError
      carrying every violation at once (never only the first)
    - A closed set is thrown at most once; a second throw() raises IllegalStateError
    - A set is never reopened

Design Decisions:
    - Collect-all over fail-fast: callers fix every problem before retrying
    - Set and raised error are separate types: the set is the open, growing
      diagnostic; CompoundValidationError is its terminal, raised form
    - No locking: validation of one entity is single-threaded, callers serialize
"""

from dataclasses import dataclass
from typing import Iterable, Iterator

from vernacular.core.errors import CompoundValidationError, IllegalStateError


@dataclass(frozen=True)
class Violation:
    """One reason why an entity is not civilized."""
    message: str
    cause: BaseException | None = None
    property_name: str | None = None
    origin: str | None = None

    def __str__(self) -> str:
        location = ".".join(p for p in (self.origin, self.property_name) if p)
        return f"{location}: {self.message}" if location else self.message

    def to_dict(self) -> dict:
        return {
            "message": self.message,
            "property_name": self.property_name,
            "origin": self.origin,
            "cause": (
                f"{type(self.cause).__name__}: {self.cause}" if self.cause else None
            ),
        }


class ViolationSet:
    """Ordered violations found by one collect_violations() call."""

    def __init__(self, violations: Iterable[Violation] = ()):
        self._violations: list[Violation] = list(violations)
        self._closed = False
        self._thrown = False

    # --- Mutation (open sets only) ----------------------------------------

    def add(self, violation: Violation) -> None:
        self._check_open("add a violation to")
        self._violations.append(violation)

    def add_message(
        self,
        message: str,
        *,
        cause: BaseException | None = None,
        property_name: str | None = None,
        origin: str | None = None,
    ) -> None:
        """Build a Violation from parts and add it."""
        self.add(Violation(message, cause, property_name, origin))

    def extend(self, other: "ViolationSet | Iterable[Violation]") -> None:
        """Append every violation of a nested set, unchanged and in order.

        The nested set itself is left untouched (it may even be closed).
        """
        self._check_open("extend")
        self._violations.extend(other)

    def close(self) -> None:
        self._check_open("close")
        self._closed = True

    def throw(self) -> None:
        """Raise this closed, non-empty set as a CompoundValidationError."""
        if not self._closed:
            raise IllegalStateError("Cannot throw an open violation set; close it first")
        if not self._violations:
            raise IllegalStateError("Cannot throw an empty violation set")
        if self._thrown:
            raise IllegalStateError("Violation set was already thrown")
        self._thrown = True
        raise CompoundValidationError(self.violations)

    # --- Queries ----------------------------------------------------------

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def is_empty(self) -> bool:
        return not self._violations

    @property
    def violations(self) -> tuple[Violation, ...]:
        return tuple(self._violations)

    def messages(self) -> list[str]:
        return [v.message for v in self._violations]

    def __len__(self) -> int:
        return len(self._violations)

    def __iter__(self) -> Iterator[Violation]:
        return iter(tuple(self._violations))

    def __contains__(self, item: object) -> bool:
        return item in self._violations

    def __bool__(self) -> bool:
        return bool(self._violations)

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"<ViolationSet {state} violations={len(self._violations)}>"

    def _check_open(self, action: str) -> None:
        if self._closed:
            raise IllegalStateError(f"Cannot {action} a closed violation set")
