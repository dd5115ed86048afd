"""
formattable-widget

Converts formatted tables into HTML widgets that display the same way in
notebooks, web pages and interactive viewers.
"""

__version__ = "0.1.0"

# Main exports for easy imports
from .tables import FormattedTable, SimpleFormattedTable, is_formattable
from .widgets import (
    WidgetDescriptor,
    FormattableWidgetConverter,
    WidgetTemplateRenderer,
    WidgetRegistry,
    InvalidInputError,
    as_htmlwidget,
    as_widget,
    widget_converter,
    render_container,
)

__all__ = [
    "FormattedTable",
    "SimpleFormattedTable",
    "is_formattable",
    "WidgetDescriptor",
    "FormattableWidgetConverter",
    "WidgetTemplateRenderer",
    "WidgetRegistry",
    "InvalidInputError",
    "as_htmlwidget",
    "as_widget",
    "widget_converter",
    "render_container",
    "__version__",
]
