"""Error Schemas — ErrorResponse parses every VernacularError envelope."""

import pytest

from vernacular.core.errors import CompoundValidationError, IllegalStateError
from vernacular.core.violations import ViolationSet
from vernacular.schemas.errors import ErrorResponse


def test_illegal_state_error_round_trips_without_violations():
    response = ErrorResponse.from_error(IllegalStateError("closed"))
    assert response.error.code == "ILLEGAL_STATE"
    assert response.error.violations == []


def test_compound_validation_error_lists_violations():
    violations = ViolationSet()
    violations.add_message("is required", property_name="name", origin="Customer")
    violations.add_message("bad date", cause=ValueError("31/02"))
    violations.close()
    with pytest.raises(CompoundValidationError) as exc_info:
        violations.throw()

    response = ErrorResponse.from_error(exc_info.value)
    assert response.error.code == "NOT_CIVILIZED"
    assert response.error.severity == "warning"
    assert [v.property_name for v in response.error.violations] == ["name", None]
    assert response.error.violations[1].cause == "ValueError: 31/02"
