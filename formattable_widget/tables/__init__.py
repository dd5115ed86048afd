"""Formatted table capability and a minimal in-memory implementation"""

from .base import FormattedTable, is_formattable
from .simple import SimpleFormattedTable

__all__ = [
    "FormattedTable",
    "is_formattable",
    "SimpleFormattedTable",
]
