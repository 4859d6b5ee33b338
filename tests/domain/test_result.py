"""Tests for Result — the success/failure outcome type."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path
from uuid import UUID

import pytest
from pydantic import ValidationError

from appstate.domain.errors import AppStateError, ResultAccessError
from appstate.domain.models import Email, Theme, User
from appstate.domain.result import Result


class TestOk:
    def test_success_flags(self) -> None:
        result = Result.ok(42)
        assert result.is_success is True
        assert result.is_failure is False

    def test_value(self) -> None:
        assert Result.ok("x").value == "x"

    def test_error_is_none(self) -> None:
        assert Result.ok(1).error is None

    def test_none_is_a_valid_value(self) -> None:
        result = Result.ok(None)
        assert result.is_success
        assert result.value is None


class TestFail:
    def test_failure_flags(self) -> None:
        result = Result.fail("not found")
        assert result.is_failure is True
        assert result.is_success is False
        assert result.error == "not found"

    def test_value_access_raises(self) -> None:
        result = Result.fail("not found")
        with pytest.raises(ResultAccessError, match="not found"):
            _ = result.value

    def test_access_error_is_a_defect(self) -> None:
        assert issubclass(ResultAccessError, AppStateError)
        assert issubclass(ResultAccessError, RuntimeError)

    def test_empty_message_is_still_a_failure(self) -> None:
        result = Result.fail("")
        assert result.is_failure
        assert result.error == ""

    def test_message_less_exception(self) -> None:
        result = Result.fail(str(ValueError()))
        assert result.is_failure
        assert result.to_dict() == {"ok": False, "error": ""}


class TestConstruction:
    def test_inconsistent_construction_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Result(success=True, error="boom")
        with pytest.raises(ValidationError):
            Result(success=False)

    def test_immutable(self) -> None:
        result = Result.ok(1)
        with pytest.raises(ValidationError):
            result.data = 2  # type: ignore[misc]
        assert result.value == 1

    def test_equality(self) -> None:
        assert Result.ok(1) == Result.ok(1)
        assert Result.fail("a") == Result.fail("a")
        assert Result.ok(1) != Result.fail("a")


class TestToDict:
    def test_success_payload(self) -> None:
        assert Result.ok({"a": 1}).to_dict() == {"ok": True, "value": {"a": 1}}

    def test_failure_payload(self) -> None:
        assert Result.fail("nope").to_dict() == {"ok": False, "error": "nope"}

    def test_models_are_dumped_as_json(self) -> None:
        user = User(id="u1", email=Email("ada@example.com"), name="Ada")
        payload = Result.ok(user).to_dict()
        assert payload["value"] == {"id": "u1", "email": "ada@example.com", "name": "Ada"}
        json.dumps(payload)

    def test_non_json_types_are_converted(self) -> None:
        at = datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)
        ident = UUID("12345678-1234-5678-1234-567812345678")
        payload = Result.ok({"at": at, "path": Path("/x"), "id": ident, "tags": {"a"}}).to_dict()
        assert payload["value"] == {
            "at": "2024-01-02T03:04:05Z",
            "path": "/x",
            "id": "12345678-1234-5678-1234-567812345678",
            "tags": ["a"],
        }
        json.dumps(payload)

    def test_enum_values(self) -> None:
        assert Result.ok(Theme.DARK).to_dict() == {"ok": True, "value": "dark"}
