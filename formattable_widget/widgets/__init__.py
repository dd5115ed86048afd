"""Widget system: conversion of formatted tables into renderable HTML widgets"""

from .exceptions import (
    WidgetError,
    InvalidInputError,
    ConverterNotFoundError,
    ConverterRegistrationError,
    TableFormatError,
)
from .models import WidgetDescriptor, WIDGET_NAME, WIDGET_PACKAGE
from .converter import FormattableWidgetConverter, as_htmlwidget
from .renderer import WidgetTemplateRenderer, render_container
from .registry import WidgetRegistry, widget_converter, default_registry, as_widget

__all__ = [
    'WidgetError',
    'InvalidInputError',
    'ConverterNotFoundError',
    'ConverterRegistrationError',
    'TableFormatError',
    'WidgetDescriptor',
    'WIDGET_NAME',
    'WIDGET_PACKAGE',
    'FormattableWidgetConverter',
    'as_htmlwidget',
    'WidgetTemplateRenderer',
    'render_container',
    'WidgetRegistry',
    'widget_converter',
    'default_registry',
    'as_widget',
]
