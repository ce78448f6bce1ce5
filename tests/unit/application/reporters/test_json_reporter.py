"""Tests for JsonReporter and errors_to_dict."""

import json

from paramcheck.application.reporters import JsonReporter, errors_to_dict, group_by_field
from tests.factories import make_error


class TestErrorsToDict:
    """Tests for errors_to_dict()."""

    def test_empty(self) -> None:
        assert errors_to_dict([]) == {"valid": True, "message": "", "errors": [], "by_field": {}}

    def test_schema(self) -> None:
        errors = [
            make_error("name", "must not be null"),
            make_error(None, "custom assertion failed"),
        ]
        assert errors_to_dict(errors) == {
            "valid": False,
            "message": "'name' must not be null; custom assertion failed",
            "errors": [
                {"field": "name", "message": "must not be null"},
                {"field": None, "message": "custom assertion failed"},
            ],
            "by_field": {"name": ["must not be null"]},
        }


class TestGroupByField:
    """Tests for group_by_field()."""

    def test_groups_in_order_and_skips_anonymous(self) -> None:
        errors = [
            make_error("password", "must not be blank"),
            make_error("email", "must match pattern"),
            make_error(None, "free-form"),
            make_error("password", "must have length between 8 and 64"),
        ]
        grouped = group_by_field(errors)
        assert list(grouped) == ["password", "email"]
        assert grouped["password"] == ["must not be blank", "must have length between 8 and 64"]


class TestJsonReporter:
    """Tests for JsonReporter.report()."""

    def test_output_is_valid_json(self) -> None:
        """report() returns parseable JSON matching errors_to_dict()."""
        errors = [make_error("age", "must be positive")]
        output = JsonReporter().report(errors)
        assert json.loads(output) == errors_to_dict(errors)

    def test_indent(self) -> None:
        output = JsonReporter().report([make_error()])
        assert "\n  " in output

    def test_compact(self) -> None:
        output = JsonReporter(indent=None).report([make_error()])
        assert "\n" not in output
