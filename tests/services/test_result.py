"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from timelang.grammar import parse_date
from timelang.grammar.errors import ParseError
from timelang.services.result import ErrorCode, ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="parse", data={"canonical": "now"})
        assert result.ok is True
        assert result.op == "parse"
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="PARSE_FAILED", message="expected weekday")
        result = ServiceResult(ok=False, op="parse", error=error)
        assert result.error is not None
        assert result.error.code == "PARSE_FAILED"
        assert result.error.detail == {}

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="normalize", data={"canonical": "3 days ago"})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["canonical"] == "3 days ago"

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="parse")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]

    def test_failure_helper(self) -> None:
        result = ServiceResult.failure("parse", ErrorCode.UNKNOWN_NODE, "Unknown node type: 'x'")
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "UNKNOWN_NODE"
        assert result.error.detail == {}

    def test_canonical_property(self) -> None:
        assert ServiceResult(ok=True, op="normalize", data={"canonical": "now"}).canonical == "now"
        assert ServiceResult(ok=True, op="normalize").canonical is None


class TestServiceError:
    def test_from_parse_error(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_date("30/2/2023")
        error = ServiceError.from_parse_error(exc_info.value)
        assert error.code == ErrorCode.PARSE_FAILED
        assert error.message == str(exc_info.value)
        assert error.detail["text"] == "30/2/2023"
        assert error.detail["construct"] == "date"

    def test_error_code_serializes_as_string(self) -> None:
        result = ServiceResult.failure("parse", ErrorCode.INPUT_TOO_LONG, "too long")
        assert json.loads(result.model_dump_json())["error"]["code"] == "INPUT_TOO_LONG"
