"""Persistent Identity — equality for entities whose durable key may not exist yet.

Invariants:
    - A PersistentObject starts transient (UNASSIGNED) unless rehydrated with a key
    - The key moves UNASSIGNED -> Assigned(key) at most once and never changes after
    - Both transient: equal iff the same instance
    - Exactly one transient: never equal
    - Both assigned: equal iff same concrete type AND equal keys
    - hash depends on the concrete type only, so it is identical before and
      after assign_key() and consistent with __eq__ at all times

Design Decisions:
    - Tagged variant (Unassigned | Assigned) over a nullable key: equality is an
      exhaustive match and None stays available as "no key given"
    - Type-only hash: transient entities stay findable in sets/dicts across the
      save, at the price of one hash bucket per entity type
    - assign_key() is meant for the storage collaborator only; serializing
      concurrent save attempts is its job, not ours
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from vernacular.core.civilized import CivilizedObject
from vernacular.core.errors import ErrorContext, IllegalStateError, InvalidArgumentError

logger = logging.getLogger(__name__)

K = TypeVar("K")


class Unassigned(Enum):
    """Durable key of an entity that was never persisted."""
    UNASSIGNED = "unassigned"

    def __repr__(self) -> str:
        return "UNASSIGNED"


UNASSIGNED = Unassigned.UNASSIGNED


@dataclass(frozen=True)
class Assigned(Generic[K]):
    """Durable key set by the storage layer."""
    key: K


DurableKey = Unassigned | Assigned


class PersistentObject(CivilizedObject, Generic[K]):
    """Base for entities stored by a persistence layer, keyed by K."""

    def __init__(self, key: K | None = None):
        self._durable_key: DurableKey = UNASSIGNED if key is None else Assigned(key)

    @property
    def durable_key(self) -> DurableKey:
        return self._durable_key

    @property
    def is_transient(self) -> bool:
        return self._durable_key is UNASSIGNED

    @property
    def key(self) -> K:
        match self._durable_key:
            case Assigned(key):
                return key
            case _:
                raise IllegalStateError(
                    f"{type(self).__name__} is transient and has no key yet",
                    ErrorContext(entity_type=type(self).__name__),
                )

    def assign_key(self, key: K) -> None:
        """Record the key given by the first durable write. Storage layer only."""
        if key is None:
            raise InvalidArgumentError("key", "must not be None")
        match self._durable_key:
            case Assigned(current):
                raise IllegalStateError(
                    f"{type(self).__name__} already has key {current!r}; "
                    f"cannot reassign to {key!r}",
                    ErrorContext(
                        entity_type=type(self).__name__, entity_key=str(current),
                    ),
                )
            case _:
                self._durable_key = Assigned(key)
        logger.debug(
            f"Assigned key to {type(self).__name__}",
            extra={"entity_type": type(self).__name__, "entity_key": str(key)},
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PersistentObject):
            return NotImplemented
        match (self._durable_key, other._durable_key):
            case (Unassigned.UNASSIGNED, Unassigned.UNASSIGNED):
                return self is other
            case (Assigned(mine), Assigned(theirs)):
                return type(self) is type(other) and mine == theirs
            case _:
                return False

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        match self._durable_key:
            case Assigned(key):
                return f"<{type(self).__name__} key={key!r}>"
            case _:
                return f"<{type(self).__name__} transient>"
