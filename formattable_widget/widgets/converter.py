"""
Formattable Widget Converter

Turns a formatted table into a WidgetDescriptor: the table's markdown
serialization is flattened to one line, converted to an HTML fragment with
Python-Markdown, and every alignment attribute is rewritten into a Bootstrap
``text-*`` class.
"""

from typing import Any, Dict, List, Optional

import markdown
from markdown.extensions.tables import TableExtension

from .exceptions import InvalidInputError
from .models import WidgetDescriptor, WIDGET_NAME, WIDGET_PACKAGE
from ..tables.base import is_formattable
from ..utils.logging import get_logger, set_widget_context, clear_widget_context, timer, log_conversion


ALIGN_ATTRIBUTE = 'align="'
ALIGN_CLASS = 'class="text-'

DEFAULT_CONFIG: Dict[str, Any] = {
    'width': "100%",
    'height': None,
    'markdown_extensions': (),
}

_UNSET = object()


def strip_line_breaks(text: str) -> str:
    """Remove line breaks so markdown does not split table cells into blocks"""
    return text.replace("\r", "").replace("\n", "")


def markdown_to_fragment(text: str, extensions: Optional[List[Any]] = None) -> str:
    """Convert markdown to an HTML fragment, emitting table alignment as align="..." """
    return markdown.markdown(
        text,
        extensions=[TableExtension(use_align_attribute=True), *(extensions or [])],
        output_format="html",
    )


def align_to_class(html: str) -> str:
    """Rewrite align="x" into class="text-x"

    Plain text substitution: the pattern is replaced wherever it occurs,
    including inside text or other attribute values.
    """
    return html.replace(ALIGN_ATTRIBUTE, ALIGN_CLASS)


class FormattableWidgetConverter:
    """Converts formatted tables into widget descriptors

    Args:
        config: Optional dict with ``width`` and ``height`` defaults and
            ``markdown_extensions`` (extra Python-Markdown extensions)
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = {**DEFAULT_CONFIG, **(config or {})}
        self.default_width = self.config['width']
        self.default_height = self.config['height']
        self.markdown_extensions = list(self.config['markdown_extensions'] or [])
        self.config['markdown_extensions'] = self.markdown_extensions
        self.logger = get_logger('widgets.converter')

    def convert(self,
                table: Any,
                width: Any = _UNSET,
                height: Any = _UNSET,
                element_id: Optional[str] = None) -> WidgetDescriptor:
        """Convert ``table`` into a WidgetDescriptor

        Raises:
            InvalidInputError: If ``table`` is not a formatted table
            TypeError: If ``table.to_markdown()`` does not return ``str``
        """
        if not is_formattable(table):
            self.logger.warning(f"Rejected non-formattable input of type {type(table).__name__}")
            raise InvalidInputError(table)

        width = self.default_width if width is _UNSET else width
        height = self.default_height if height is _UNSET else height

        token = set_widget_context(WIDGET_NAME)
        try:
            with timer(f"{WIDGET_NAME} conversion"):
                text = table.to_markdown()
                if not isinstance(text, str):
                    raise TypeError(
                        f"{type(table).__name__}.to_markdown() must return str, "
                        f"got {type(text).__name__}"
                    )
                md = strip_line_breaks(text)
                html = align_to_class(markdown_to_fragment(md, self.markdown_extensions))
        finally:
            clear_widget_context(token)

        log_conversion(WIDGET_NAME, {
            "source": type(table).__name__,
            "markdown_chars": len(md),
            "html_chars": len(html),
            "width": width,
            "height": height,
        })

        return WidgetDescriptor(
            html=html,
            markdown=md,
            width=width,
            height=height,
            name=WIDGET_NAME,
            package=WIDGET_PACKAGE,
            element_id=element_id,
        )

    __call__ = convert


_default_converter = FormattableWidgetConverter()


def as_htmlwidget(table: Any,
                  width: Optional[str] = "100%",
                  height: Optional[str] = None,
                  element_id: Optional[str] = None) -> WidgetDescriptor:
    """Convert a formatted table to a widget descriptor

    Example:
        table = SimpleFormattedTable(["mpg"], [[21.0], [22.8]])
        widget = as_htmlwidget(table, width="50%")
    """
    return _default_converter.convert(table, width=width, height=height, element_id=element_id)
