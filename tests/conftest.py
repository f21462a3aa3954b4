"""Root conftest — shared test configuration and the civilized conformance check.

The conformance check turns the civilized protocol's contract into assertions
that every concrete implementer must pass, in whatever state it is handed over:
    - collect_violations() returns an open ViolationSet and has no side effects
    - is_civilized agrees with collect_violations().is_empty
    - enforce() ends nominally iff civilized, otherwise raises
      CompoundValidationError carrying exactly the collected violations
"""

import os

import pytest

from vernacular.config import get_settings
from vernacular.core.civilized import Civilized
from vernacular.core.errors import CompoundValidationError
from vernacular.core.violations import ViolationSet

# Keep a developer's .env or shell from leaking into tests
for _name in list(os.environ):
    if _name.startswith("VERNACULAR_"):
        del os.environ[_name]


@pytest.fixture(autouse=True)
def _fresh_settings():
    """get_settings() is lru_cached; every test starts from a clean cache."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def assert_civilized_conformance(entity: Civilized) -> None:
    assert isinstance(entity, Civilized)

    first = entity.collect_violations()
    second = entity.collect_violations()
    assert isinstance(first, ViolationSet)
    assert not first.closed
    assert first is not second
    assert first.violations == second.violations

    assert entity.is_civilized == first.is_empty

    if first.is_empty:
        assert entity.enforce() is None
    else:
        with pytest.raises(CompoundValidationError) as exc_info:
            entity.enforce()
        assert exc_info.value.violations == first.violations

    # enforce() left no trace on the entity
    assert entity.collect_violations().violations == first.violations
    assert entity.is_civilized == first.is_empty


@pytest.fixture
def civilized_conformance():
    return assert_civilized_conformance
