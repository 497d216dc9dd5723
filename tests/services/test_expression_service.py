"""Tests for ExpressionService."""

import pytest

from timelang.config.settings import TimelangSettings
from timelang.services.expression import ExpressionService
from timelang.services.telemetry import enable_telemetry


@pytest.fixture
def service() -> ExpressionService:
    return ExpressionService(TimelangSettings())


class TestParse:
    def test_success_payload(self, service: ExpressionService) -> None:
        result = service.parse("3 Days ago")
        assert result.ok
        assert result.op == "parse"
        assert result.data["input"] == "3 Days ago"
        assert result.data["canonical"] == "3 days ago"
        assert result.data["kind"] == "specific"
        assert result.data["node"] == "Directional"
        assert result.data["ast"]["duration"]["days"] == 3

    def test_kinds(self, service: ExpressionService) -> None:
        assert service.parse("2 hours").data["kind"] == "duration"
        assert service.parse("from now to tomorrow").data["kind"] == "range"

    def test_named_node(self, service: ExpressionService) -> None:
        result = service.parse("29/2/2024", "date")
        assert result.ok
        assert result.data["node"] == "Date"
        assert result.data["kind"] == "specific"

    def test_primitive_node_has_no_kind(self, service: ExpressionService) -> None:
        result = service.parse("Tuesday", "weekday")
        assert result.ok
        assert result.data["kind"] is None
        assert result.data["canonical"] == "Tuesday"

    def test_parse_failure(self, service: ExpressionService) -> None:
        result = service.parse("next week")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "PARSE_FAILED"
        assert result.error.detail["position"] == 5
        assert "expected weekday" in result.error.message

    def test_unknown_node(self, service: ExpressionService) -> None:
        result = service.parse("now", "fortnight")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNKNOWN_NODE"
        assert "duration" in result.error.detail["known"]

    def test_input_too_long(self) -> None:
        settings = TimelangSettings(parse={"max_length": 10})
        result = ExpressionService(settings).parse("1 year, 2 months and 3 days ago")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INPUT_TOO_LONG"
        assert result.error.detail["max_length"] == 10

    def test_empty_duration_warns(self, service: ExpressionService) -> None:
        result = service.parse("0 days")
        assert result.ok
        assert result.data["canonical"] == "0 minutes"
        assert result.warnings

    def test_default_node_from_settings(self) -> None:
        settings = TimelangSettings(parse={"default_node": "duration"})
        result = ExpressionService(settings).parse("now")
        assert not result.ok
        assert result.error is not None
        assert result.error.detail["construct"] == "duration"

    def test_telemetry_meta_when_enabled(self, service: ExpressionService) -> None:
        enable_telemetry()
        result = service.parse("now")
        assert result.meta is not None
        names = [child["name"] for child in result.meta["telemetry"]["children"]]
        assert names == ["grammar", "render"]
        grammar = result.meta["telemetry"]["children"][0]
        assert grammar["annotations"] == {"node": "expression", "length": 3}


class TestNormalize:
    def test_canonical_only(self, service: ExpressionService) -> None:
        result = service.normalize("the day after tomorrow")
        assert result.ok
        assert result.op == "normalize"
        assert result.data == {
            "input": "the day after tomorrow",
            "canonical": "the day after tomorrow",
        }

    def test_clock_override(self, service: ExpressionService) -> None:
        assert service.normalize("9:05 PM", clock="24h").data["canonical"] == "21:05"
        assert service.normalize("21:05", clock="12h").data["canonical"] == "9:05 PM"

    def test_oxford_comma_override(self, service: ExpressionService) -> None:
        result = service.normalize("3 hours, 1 year, 2 days", oxford_comma=True)
        assert result.data["canonical"] == "1 year, 2 days, and 3 hours"

    def test_settings_defaults_apply(self) -> None:
        settings = TimelangSettings(render={"clock": "24h", "oxford_comma": True})
        service = ExpressionService(settings)
        assert service.normalize("1:00 AM").data["canonical"] == "1:00"
        assert service.normalize("1:00 AM", clock="preserve").data["canonical"] == "1:00 AM"

    def test_failure_passes_through(self, service: ExpressionService) -> None:
        result = service.normalize("soon")
        assert not result.ok
        assert result.op == "normalize"
        assert result.error is not None
        assert result.error.code == "PARSE_FAILED"
