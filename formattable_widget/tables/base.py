"""FormattedTable capability shared by every table the converter accepts"""

from abc import ABC, abstractmethod
from typing import Any


# Libraries whose to_markdown() emits pipe tables; flattened to one line
# those collapse into a single paragraph, so they are not formatted tables
PIPE_TABLE_MODULES = ("pandas",)


class FormattedTable(ABC):
    """A tabular value that carries its own presentation metadata

    The converter only needs the textual serialization of the table. Any
    object with a callable ``to_markdown`` returning ``str`` counts as a
    formatted table, so foreign table types satisfy the capability without
    inheriting from it. Setting ``to_markdown = None`` opts a class out.

    The serialization is flattened to a single line before conversion, so it
    must not depend on line breaks: HTML tables survive, markdown pipe tables
    do not. pandas objects are excluded for that reason even though they
    expose ``to_markdown``.
    """

    @abstractmethod
    def to_markdown(self) -> str:
        """Return the markdown-flavoured serialization of the table"""

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is FormattedTable:
            if _emits_pipe_tables(subclass):
                return False
            if callable(getattr(subclass, "to_markdown", None)):
                return True
        return NotImplemented


def _emits_pipe_tables(klass: type) -> bool:
    module = getattr(klass, "__module__", None) or ""
    return module.split(".")[0] in PIPE_TABLE_MODULES


def is_formattable(x: Any) -> bool:
    """Check whether ``x`` satisfies the FormattedTable capability"""
    if _emits_pipe_tables(type(x)):
        return False
    return callable(getattr(x, "to_markdown", None))
