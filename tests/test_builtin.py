"""Tests for the stock filters."""
from __future__ import annotations

import logging
import re
from types import SimpleNamespace
from typing import Any

import pytest

from action_filters.core.interfaces import ActionLike
from action_filters.dispatch.hosts import Controller, Module
from action_filters.filters import builtin
from action_filters.filters.builtin import AccessFilter, CallbackFilter, LoggingFilter


class ReportController(Controller):
    def action_index(self) -> list[int]:
        return [1, 2, 3]

    def action_export(self) -> str:
        return "csv"


@pytest.fixture()
def reports() -> ReportController:
    return ReportController("report", Module("app"))


class TestCallbackFilter:
    """Inline before/after callables."""

    def test_defaults_are_transparent(self, reports: ReportController) -> None:
        reports.attach_filter("cb", CallbackFilter())
        assert reports.run_action("index") == [1, 2, 3]

    def test_after_transforms(self, reports: ReportController) -> None:
        reports.attach_filter("cb", CallbackFilter(after=lambda action, result: sum(result)))
        assert reports.run_action("index") == 6

    def test_before_vetoes(self, reports: ReportController) -> None:
        seen: list[str] = []

        def _before(action: ActionLike) -> bool:
            seen.append(action.id)
            return action.id != "export"

        reports.attach_filter("cb", CallbackFilter(before=_before))
        assert reports.run_action("index") == [1, 2, 3]
        assert reports.run_action_context("export").valid is False
        assert seen == ["index", "export"]

    def test_truthy_before_result(self, reports: ReportController) -> None:
        reports.attach_filter("cb", CallbackFilter(before=lambda action: 1))
        assert reports.run_action("export") == "csv"


class TestAccessFilter:
    """Predicate-based vetoes."""

    def test_allows(self, reports: ReportController) -> None:
        access = reports.attach_filter("access", AccessFilter(lambda action: True))
        assert reports.run_action("export") == "csv"
        assert access.denied == []

    def test_denies_and_records(
        self, reports: ReportController, caplog: pytest.LogCaptureFixture
    ) -> None:
        access = reports.attach_filter(
            "access", AccessFilter(lambda action: False, only=["export"])
        )
        with caplog.at_level(logging.WARNING, logger="action_filters.filters.builtin"):
            context = reports.run_action_context("export")
        assert context.valid is False
        assert access.denied == ["report/export"]
        assert "Access denied to action 'report/export'" in caplog.text

    def test_except_bypasses_predicate(self, reports: ReportController) -> None:
        access = reports.attach_filter(
            "access", AccessFilter(lambda action: False, except_=["index"])
        )
        assert reports.run_action("index") == [1, 2, 3]
        assert access.denied == []


class TestLoggingFilter:
    """Entry/exit records with elapsed time."""

    def test_logs_entry_and_exit(
        self, reports: ReportController, caplog: pytest.LogCaptureFixture
    ) -> None:
        reports.attach_filter("log", LoggingFilter())
        with caplog.at_level(logging.INFO, logger="action_filters.filters.builtin"):
            assert reports.run_action("index") == [1, 2, 3]
        messages = [record.getMessage() for record in caplog.records]
        assert messages[0] == "Running action 'report/index'"
        assert re.fullmatch(r"Finished action 'report/index' in \d+\.\d{3} ms", messages[1])
        assert len(messages) == 2

    def test_elapsed_time(
        self,
        reports: ReportController,
        caplog: pytest.LogCaptureFixture,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        ticks = iter([10.0, 10.25])
        monkeypatch.setattr(builtin, "time", SimpleNamespace(perf_counter=lambda: next(ticks)))
        reports.attach_filter("log", LoggingFilter())
        with caplog.at_level(logging.INFO, logger="action_filters.filters.builtin"):
            reports.run_action("export")
        assert caplog.records[-1].getMessage() == "Finished action 'report/export' in 250.000 ms"

    def test_custom_logger_and_level(
        self, reports: ReportController, caplog: pytest.LogCaptureFixture
    ) -> None:
        audit = logging.getLogger("tests.audit")
        reports.attach_filter("log", LoggingFilter(logger=audit, level=logging.DEBUG))
        with caplog.at_level(logging.DEBUG, logger="tests.audit"):
            reports.run_action("export")
        records: list[Any] = [r for r in caplog.records if r.name == "tests.audit"]
        assert len(records) == 2
        assert all(record.levelno == logging.DEBUG for record in records)

    def test_vetoed_by_later_filter(
        self, reports: ReportController, caplog: pytest.LogCaptureFixture
    ) -> None:
        reports.attach_filter("log", LoggingFilter())
        reports.attach_filter("deny", AccessFilter(lambda action: action.id != "export"))
        with caplog.at_level(logging.INFO, logger="action_filters.filters.builtin"):
            assert reports.run_action_context("export").valid is False
            reports.run_action("index")
        messages = [record.getMessage() for record in caplog.records]
        assert messages[:2] == [
            "Running action 'report/export'",
            "Access denied to action 'report/export'",
        ]
        assert messages[2] == "Running action 'report/index'"
        assert messages[3].startswith("Finished action 'report/index' in ")

    def test_not_logged_when_excluded(
        self, reports: ReportController, caplog: pytest.LogCaptureFixture
    ) -> None:
        reports.attach_filter("log", LoggingFilter(except_=["*"]))
        with caplog.at_level(logging.INFO, logger="action_filters.filters.builtin"):
            reports.run_action("index")
        assert caplog.records == []
