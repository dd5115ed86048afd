"""Minimal in-memory formatted table rendered with Jinja2"""

import numbers
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

from jinja2 import Environment
from markupsafe import Markup

from .base import FormattedTable
from ..widgets.exceptions import TableFormatError


ALIGNMENTS = {
    'l': 'left',
    'left': 'left',
    'r': 'right',
    'right': 'right',
    'c': 'center',
    'center': 'center',
}

# Cells carry align="..." the same way markdown table renderers emit column
# alignment, so the converter's class rewrite applies to them.
TABLE_TEMPLATE = """<table>
{% if caption %}<caption>{{ caption }}</caption>
{% endif %}<thead>
<tr>
{% for column in header %}<th align="{{ column.align }}">{{ column.name }}</th>
{% endfor %}</tr>
</thead>
<tbody>
{% for row in body %}<tr>
{% for cell in row %}<td align="{{ cell.align }}">{{ cell.value }}</td>
{% endfor %}</tr>
{% endfor %}</tbody>
</table>
"""

_env = Environment(autoescape=True, keep_trailing_newline=True)
_table_template = _env.from_string(TABLE_TEMPLATE)

AlignSpec = Union[None, str, Sequence[str], Mapping[str, str]]
Formatter = Callable[[Any], str]


def _normalize_alignment(value: Any, column: str) -> str:
    key = str(value).strip().lower() if value is not None else ''
    if key not in ALIGNMENTS:
        raise TableFormatError(
            f"Invalid alignment {value!r} for column '{column}' "
            f"(expected one of left, right, center)",
            column=column
        )
    return ALIGNMENTS[key]


def _is_numeric(value: Any) -> bool:
    return isinstance(value, numbers.Number) and not isinstance(value, bool)


class SimpleFormattedTable(FormattedTable):
    """A list-of-rows table with per-column alignment and formatters

    Formatters are plain callables turning a cell value into markup; their
    output is inserted as-is. Cells without a formatter are HTML-escaped.

    Example:
        table = SimpleFormattedTable(
            columns=["name", "score"],
            rows=[["alice", 91], ["bob", 78]],
            formatters={"score": lambda v: f'<span style="color: red">{v}</span>'},
        )
        table.to_markdown()
    """

    def __init__(self,
                 columns: Sequence[str],
                 rows: Sequence[Sequence[Any]],
                 align: AlignSpec = None,
                 formatters: Optional[Mapping[str, Formatter]] = None,
                 caption: Optional[str] = None):
        self.columns: List[str] = [str(c) for c in columns]
        self.rows: List[List[Any]] = [list(row) for row in rows]
        self.caption = caption
        self.formatters: Dict[str, Formatter] = dict(formatters or {})

        for index, row in enumerate(self.rows):
            if len(row) != len(self.columns):
                raise TableFormatError(
                    f"Row {index} has {len(row)} cells, expected {len(self.columns)}"
                )

        unknown = [name for name in self.formatters if name not in self.columns]
        if unknown:
            raise TableFormatError(
                f"Formatter given for unknown column '{unknown[0]}'",
                column=unknown[0]
            )

        self.align: List[str] = self._resolve_alignment(align)

    @classmethod
    def from_records(cls, records: Sequence[Mapping[str, Any]], **kwargs) -> "SimpleFormattedTable":
        """Build a table from a list of dicts, columns in first-seen key order"""
        columns: List[str] = []
        for record in records:
            for key in record:
                if key not in columns:
                    columns.append(key)
        rows = [[record.get(column, '') for column in columns] for record in records]
        return cls(columns, rows, **kwargs)

    def _column_values(self, position: int) -> List[Any]:
        return [row[position] for row in self.rows]

    def _default_alignment(self, position: int) -> str:
        values = [v for v in self._column_values(position) if v is not None and v != '']
        if values and all(_is_numeric(v) for v in values):
            return 'right'
        return 'left'

    def _resolve_alignment(self, align: AlignSpec) -> List[str]:
        if align is None:
            return [self._default_alignment(i) for i in range(len(self.columns))]

        if isinstance(align, str):
            return [_normalize_alignment(align, c) for c in self.columns]

        if isinstance(align, Mapping):
            unknown = [name for name in align if name not in self.columns]
            if unknown:
                raise TableFormatError(
                    f"Alignment given for unknown column '{unknown[0]}'",
                    column=unknown[0]
                )
            return [
                _normalize_alignment(align[c], c) if c in align else self._default_alignment(i)
                for i, c in enumerate(self.columns)
            ]

        align = list(align)
        if len(align) != len(self.columns):
            raise TableFormatError(
                f"Got {len(align)} alignments for {len(self.columns)} columns"
            )
        return [_normalize_alignment(a, c) for a, c in zip(align, self.columns)]

    def _render_cell(self, column: str, value: Any) -> Any:
        formatter = self.formatters.get(column)
        if formatter is not None:
            return Markup(formatter(value))
        if value is None:
            return ''
        return value

    def to_markdown(self) -> str:
        header = [
            {'name': name, 'align': align}
            for name, align in zip(self.columns, self.align)
        ]
        body = [
            [
                {'value': self._render_cell(name, value), 'align': align}
                for name, value, align in zip(self.columns, row, self.align)
            ]
            for row in self.rows
        ]
        return _table_template.render(header=header, body=body, caption=self.caption)

    def __len__(self) -> int:
        return len(self.rows)

    def __repr__(self) -> str:
        return f"SimpleFormattedTable(columns={self.columns!r}, rows={len(self.rows)})"
