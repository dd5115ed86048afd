"""
Tests for the formattable-widget logging system

Run with: pytest tests/test_logging.py -v
"""

import logging

from formattable_widget.utils.logging import (
    WidgetFormatter,
    clear_widget_context,
    get_logger,
    set_widget_context,
    setup_logging,
    timer,
    CURRENT_WIDGET,
)


def _record(name="formattable_widget.widgets.converter", msg="hello", level=logging.INFO):
    return logging.LogRecord(name, level, __file__, 1, msg, None, None)


class TestLoggers:
    """Test logger naming and setup"""

    def test_get_logger_namespaces(self):
        assert get_logger("widgets.converter").name == "formattable_widget.widgets.converter"
        assert get_logger("formattable_widget.x").name == "formattable_widget.x"

    def test_widget_context_unset_by_default(self):
        assert CURRENT_WIDGET.get() is None

    def test_setup_logging(self, isolated_logging, tmp_path):
        log_file = tmp_path / "widgets.log"
        setup_logging("debug", log_file=str(log_file))
        assert isolated_logging.level == logging.DEBUG
        assert isolated_logging.propagate is False
        assert len(isolated_logging.handlers) == 2
        assert isinstance(isolated_logging.handlers[0].formatter, WidgetFormatter)

        get_logger("widgets.test").info("written to file")
        for handler in isolated_logging.handlers:
            handler.flush()
        assert "written to file" in log_file.read_text()
        isolated_logging.handlers[1].close()

    def test_setup_logging_unknown_level(self, isolated_logging):
        setup_logging("chatty")
        assert isolated_logging.level == logging.INFO


class TestWidgetFormatter:
    """Test the colour formatter output"""

    def test_format_contains_component_and_message(self):
        line = WidgetFormatter().format(_record())
        assert "converter" in line
        assert "hello" in line
        assert "INFO" in line

    def test_widget_context(self):
        token = set_widget_context("formattable_widget")
        try:
            line = WidgetFormatter().format(_record())
        finally:
            clear_widget_context(token)
        assert "[widget=formattable_widget]" in line
        assert CURRENT_WIDGET.get() is None


class TestTimer:
    """Test LogTimer"""

    def test_timer_logs_completion(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="formattable_widget"):
            with timer("conversion") as t:
                pass
        messages = [r.getMessage() for r in caplog.records]
        assert "Starting conversion" in messages
        assert any(m.startswith("conversion completed") for m in messages)
        assert t.duration_ms is not None

    def test_timer_logs_failure_and_reraises(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="formattable_widget"):
            try:
                with timer("conversion"):
                    raise KeyError("boom")
            except KeyError:
                pass
            else:
                raise AssertionError("exception was swallowed")
        assert any("conversion FAILED" in r.getMessage() for r in caplog.records)
