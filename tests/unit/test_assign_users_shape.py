"""
Unit Tests for assign-users shape rules and validation errors
"""

import pytest

from core.errors import ReferenceNotFoundError, ShapeError
from microservices.production_basin_service.models import (
    AssignUsersRequest,
    FieldError,
    ValidationResult,
)
from microservices.production_basin_service.validators import check_assign_users_shape


class TestShapeRules:
    def test_valid_body(self):
        assert check_assign_users_shape({"userIds": [1, 2, 3]}) == []

    def test_empty_list_is_valid(self):
        assert check_assign_users_shape({"userIds": []}) == []

    @pytest.mark.parametrize("body", [None, "userIds", 42, [1, 2]])
    def test_body_must_be_an_object(self, body):
        [error] = check_assign_users_shape(body)

        assert (error.field, error.rule) == ("body", "object")

    @pytest.mark.parametrize("body", [{}, {"userIds": None}, {"userids": [1]}])
    def test_user_ids_required(self, body):
        [error] = check_assign_users_shape(body)

        assert (error.field, error.rule) == ("userIds", "required")

    @pytest.mark.parametrize("value", ["1,2", 1, {"0": 1}])
    def test_user_ids_must_be_an_array(self, value):
        [error] = check_assign_users_shape({"userIds": value})

        assert (error.field, error.rule) == ("userIds", "array")

    def test_each_element_checked(self):
        errors = check_assign_users_shape({"userIds": [1, "2", 3.0, None, False, 7]})

        assert [(e.field, e.value) for e in errors] == [
            ("userIds.1", "2"),
            ("userIds.2", 3.0),
            ("userIds.3", None),
            ("userIds.4", False),
        ]
        assert {e.rule for e in errors} == {"integer"}


class TestValidationResult:
    def test_ok_returns_value(self):
        result = ValidationResult(value=AssignUsersRequest(user_ids=[1]))

        assert result.raise_for_errors().to_wire() == {"userIds": [1]}

    def test_shape_errors_win_over_existence_errors(self):
        result = ValidationResult(errors=[
            FieldError(field="userIds.0", message="m", rule="exists", value=9),
            FieldError(field="userIds.1", message="m", rule="integer", value="x"),
        ])

        with pytest.raises(ShapeError):
            result.raise_for_errors()

    def test_existence_errors(self):
        result = ValidationResult(errors=[FieldError(field="userIds.0", message="m", rule="exists", value=9)])

        with pytest.raises(ReferenceNotFoundError) as exc_info:
            result.raise_for_errors()

        body = exc_info.value.to_dict()
        assert body["success"] is False
        assert body["code"] == "VALIDATION_REFERENCE_NOT_FOUND"
        assert body["errors"] == [{"field": "userIds.0", "message": "m", "value": 9}]
