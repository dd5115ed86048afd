"""
Shared fixtures for formattable-widget tests

- StaticTable: duck-typed formatted table returning fixed text
- sample tables built with SimpleFormattedTable
- logger isolation for tests that call setup_logging()
"""

import logging
import pytest

from formattable_widget.tables import SimpleFormattedTable


class StaticTable:
    """Formatted table whose serialization is a fixed string

    Does not inherit from FormattedTable on purpose: the capability check is
    structural.
    """

    def __init__(self, text: str):
        self.text = text
        self.calls = 0

    def to_markdown(self) -> str:
        self.calls += 1
        return self.text


@pytest.fixture
def static_table():
    """Factory for StaticTable instances"""
    return StaticTable


@pytest.fixture
def cars_table():
    """Small mtcars-like table with a coloured mpg column"""
    return SimpleFormattedTable(
        columns=["model", "mpg", "cyl"],
        rows=[
            ["Mazda RX4", 21.0, 6],
            ["Datsun 710", 22.8, 4],
            ["Hornet Sportabout", 18.7, 8],
        ],
        formatters={
            "mpg": lambda v: f'<span style="color: {"red" if v > 20 else "gray"}">{v}</span>',
        },
        caption="Motor Trend cars",
    )


@pytest.fixture
def isolated_logging():
    """Restore the package root logger after setup_logging() calls"""
    root = logging.getLogger("formattable_widget")
    handlers = list(root.handlers)
    level = root.level
    propagate = root.propagate
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
    root.propagate = propagate
