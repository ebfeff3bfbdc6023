"""Unit tests for structlog configuration and correlation IDs."""

import json
import logging
import re

import pytest
import structlog

from ballotbox.infrastructure.observability import (
    configure_structlog,
    correlation_id_processor,
    correlation_scope,
    generate_correlation_id,
    get_correlation_id,
)
from ballotbox.infrastructure.observability.logging import _get_log_level


class TestCorrelationId:
    """Tests for correlation ID management."""

    def test_generate_returns_uuid4(self) -> None:
        """Generated IDs are UUID4 strings."""
        uuid_pattern = re.compile(
            r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$"
        )
        assert uuid_pattern.match(generate_correlation_id()) is not None

    def test_unset_outside_scope(self) -> None:
        """No ID is in effect outside a scope."""
        assert get_correlation_id() == ""

    def test_scope_uses_given_id(self) -> None:
        """A supplied ID is in effect inside the block and cleared after."""
        with correlation_scope("script-42") as correlation_id:
            assert correlation_id == "script-42"
            assert get_correlation_id() == "script-42"

        assert get_correlation_id() == ""

    @pytest.mark.parametrize("given", [None, ""])
    def test_scope_generates_missing_id(self, given: str | None) -> None:
        """Without an ID the scope generates one."""
        with correlation_scope(given) as correlation_id:
            assert correlation_id
            assert get_correlation_id() == correlation_id

    def test_nested_scope_restores_outer(self) -> None:
        """Leaving an inner scope brings back the outer ID."""
        with correlation_scope("outer"):
            with correlation_scope("inner"):
                assert get_correlation_id() == "inner"
            assert get_correlation_id() == "outer"

    def test_scope_cleared_on_error(self) -> None:
        """An exception inside the block still closes the scope."""
        with pytest.raises(RuntimeError):
            with correlation_scope("failing"):
                raise RuntimeError("boom")

        assert get_correlation_id() == ""

    def test_processor_adds_id(self) -> None:
        """The processor tags entries with the current ID."""
        with correlation_scope("abc"):
            event_dict = correlation_id_processor(None, "info", {"event": "x"})

        assert event_dict["correlation_id"] == "abc"

    def test_processor_skips_when_unset(self) -> None:
        """Entries are left alone without an ID."""
        assert correlation_id_processor(None, "info", {"event": "x"}) == {"event": "x"}

    def test_processor_keeps_explicit_id(self) -> None:
        """An entry that already carries an ID keeps it."""
        with correlation_scope("context"):
            event_dict = correlation_id_processor(
                None, "info", {"event": "x", "correlation_id": "explicit"}
            )

        assert event_dict["correlation_id"] == "explicit"


class TestConfigureStructlog:
    """Tests for configure_structlog."""

    def test_production_renders_json(self) -> None:
        """Production mode ends the chain with the JSON renderer."""
        configure_structlog(environment="production")

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_development_renders_console(self) -> None:
        """Development mode ends the chain with the console renderer."""
        configure_structlog(environment="development")

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_json_entry_goes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Entries are JSON lines on stderr carrying the correlation ID."""
        configure_structlog(environment="production")

        with correlation_scope("json-output"):
            structlog.get_logger().info("vote_cast", proposal_id=2)

        captured = capsys.readouterr()
        assert captured.out == ""
        entry = json.loads(captured.err.strip())
        assert entry["event"] == "vote_cast"
        assert entry["level"] == "info"
        assert entry["proposal_id"] == 2
        assert entry["correlation_id"] == "json-output"
        assert "timestamp" in entry


    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("nonsense", logging.INFO),
        ],
    )
    def test_log_level_from_environment(
        self, monkeypatch: pytest.MonkeyPatch, value: str, expected: int
    ) -> None:
        """LOG_LEVEL selects the level; unknown names fall back to INFO."""
        monkeypatch.setenv("LOG_LEVEL", value)

        assert _get_log_level() == expected

    def test_log_level_defaults_to_info(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without LOG_LEVEL the level is INFO."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        assert _get_log_level() == logging.INFO

    def test_log_level_filters_entries(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Entries below the configured level are dropped."""
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        configure_structlog(environment="production")

        log = structlog.get_logger()
        log.info("tally_computed")
        log.warning("event_emission_failed")

        lines = capsys.readouterr().err.splitlines()
        assert [json.loads(line)["event"] for line in lines] == ["event_emission_failed"]
