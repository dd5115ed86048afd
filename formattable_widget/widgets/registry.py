"""
Widget Converter Registry

Explicit replacement for generic ``as.htmlwidget``-style dispatch: converters
are plain functions marked with @widget_converter and collected in a
WidgetRegistry. Callers either name the converter they want or let the
registry pick the first one whose ``accepts`` predicate matches.
"""

import functools
from typing import Any, Callable, Dict, List, Optional

from .converter import as_htmlwidget
from .exceptions import ConverterNotFoundError, ConverterRegistrationError, InvalidInputError
from .models import WidgetDescriptor, WIDGET_NAME
from ..tables.base import is_formattable
from ..utils.logging import get_logger


def widget_converter(func: Optional[Callable] = None, *, name: Optional[str] = None, accepts: Optional[Callable[[Any], bool]] = None):
    """Decorator to mark functions as widget converters for registration

    Can be used as:
        @widget_converter
        def my_widget(obj, **kwargs) -> WidgetDescriptor: ...

    Or:
        @widget_converter(name="custom", accepts=lambda obj: isinstance(obj, MyTable))
        def my_widget(obj, **kwargs) -> WidgetDescriptor: ...

    Args:
        name: Registry name (defaults to the function name)
        accepts: Predicate telling whether the converter handles an object.
                 Converters without one are only reachable by name.
    """
    def decorator(f: Callable) -> Callable:
        @functools.wraps(f)
        def wrapper(*args, **kwargs):
            return f(*args, **kwargs)

        wrapper._fw_is_converter = True
        wrapper._fw_converter_name = name or f.__name__
        wrapper._fw_converter_accepts = accepts
        wrapper._fw_converter_description = f.__doc__ or f"Widget converter: {f.__name__}"
        return wrapper

    # Support both @widget_converter and @widget_converter()
    if func is not None:
        return decorator(func)
    return decorator


class WidgetRegistry:
    """Named collection of widget converters"""

    def __init__(self):
        self._converters: Dict[str, Callable] = {}
        self.logger = get_logger('widgets.registry')

    def register(self, func: Callable) -> Callable:
        """Add a @widget_converter function; returns it so it can stack as a decorator"""
        if not getattr(func, '_fw_is_converter', False):
            raise ConverterRegistrationError(
                f"{getattr(func, '__name__', func)!r} is not decorated with @widget_converter"
            )

        name = func._fw_converter_name
        if name in self._converters:
            raise ConverterRegistrationError(
                f"A converter named '{name}' is already registered", name=name
            )

        self._converters[name] = func
        self.logger.debug(f"Registered widget converter '{name}'")
        return func

    def unregister(self, name: str) -> None:
        if name not in self._converters:
            raise ConverterNotFoundError(name, self.names())
        del self._converters[name]

    def get(self, name: str) -> Callable:
        try:
            return self._converters[name]
        except KeyError:
            raise ConverterNotFoundError(name, self.names()) from None

    def names(self) -> List[str]:
        return list(self._converters)

    def find(self, obj: Any) -> Optional[Callable]:
        """First converter whose predicate accepts ``obj``, in registration order"""
        for func in self._converters.values():
            accepts = func._fw_converter_accepts
            if accepts is not None and accepts(obj):
                return func
        return None

    def convert(self, obj: Any, *, kind: Optional[str] = None, **kwargs) -> WidgetDescriptor:
        """Convert ``obj`` with the converter named ``kind`` or the first that accepts it

        Raises:
            ConverterNotFoundError: If ``kind`` is not registered
            InvalidInputError: If no converter accepts ``obj``
        """
        if kind is not None:
            func = self.get(kind)
        else:
            func = self.find(obj)
            if func is None:
                self.logger.warning(f"No widget converter accepts {type(obj).__name__}")
                raise InvalidInputError(
                    obj,
                    expected="convertible",
                    requirement=f"accepted by one of the registered converters {self.names()}"
                )
        return func(obj, **kwargs)

    def __contains__(self, name: str) -> bool:
        return name in self._converters

    def __len__(self) -> int:
        return len(self._converters)


@widget_converter(name=WIDGET_NAME, accepts=is_formattable)
def convert_formattable(table: Any, width: Optional[str] = "100%", height: Optional[str] = None, **kwargs) -> WidgetDescriptor:
    """Convert a formatted table to an HTML widget"""
    return as_htmlwidget(table, width=width, height=height, **kwargs)


default_registry = WidgetRegistry()
default_registry.register(convert_formattable)


def as_widget(obj: Any, kind: Optional[str] = None, **kwargs) -> WidgetDescriptor:
    """Convert ``obj`` with the default registry"""
    return default_registry.convert(obj, kind=kind, **kwargs)
