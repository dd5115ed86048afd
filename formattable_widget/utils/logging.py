"""
formattable-widget Logging System

Colour-coded, structured console logging for the converter, registry and
renderer. Handlers are only installed by an explicit setup_logging() call;
until then records go wherever the host application routes them.
"""

import logging
import sys
import time
from typing import Optional, Dict, Any
from colorama import Fore, Back, Style, just_fix_windows_console
from datetime import datetime
from contextvars import ContextVar

ROOT_LOGGER_NAME = 'formattable_widget'

# Widget being converted, picked up by the formatter when set
CURRENT_WIDGET: ContextVar[Optional[str]] = ContextVar('current_widget', default=None)

COMPONENT_COLORS = {
    'converter': Fore.CYAN,
    'registry': Fore.MAGENTA,
    'renderer': Fore.BLUE,
    'default': Fore.GREEN,
}


def get_component_color(component: str) -> str:
    """Get consistent color for a component name"""
    if component in COMPONENT_COLORS:
        return COMPONENT_COLORS[component]

    colors = [
        Fore.GREEN,
        Fore.CYAN,
        Fore.YELLOW,
        Fore.BLUE,
        Fore.MAGENTA,
        Fore.LIGHTGREEN_EX,
        Fore.LIGHTCYAN_EX,
        Fore.LIGHTBLUE_EX,
    ]
    return colors[sum(map(ord, component)) % len(colors)]


class WidgetFormatter(logging.Formatter):
    """Custom formatter with color-coded components and widget context"""

    level_colors = {
        'DEBUG': Fore.WHITE,
        'INFO': Fore.GREEN,
        'WARNING': Fore.YELLOW,
        'ERROR': Fore.RED,
        'CRITICAL': Fore.RED + Back.WHITE
    }

    def format(self, record):
        timestamp = datetime.fromtimestamp(record.created).strftime('%H:%M:%S.%f')[:-3]

        level_color = self.level_colors.get(record.levelname, Fore.WHITE)
        colored_level = f"{level_color}{record.levelname:8s}{Style.RESET_ALL}"

        component = record.name.split('.')[-1] if '.' in record.name else record.name
        if len(component) > 12:
            component = component[:12]
        colored_component = f"{get_component_color(component)}{component:12s}{Style.RESET_ALL}"

        widget_name = CURRENT_WIDGET.get() or getattr(record, 'widget_name', None)
        context_str = f" [widget={widget_name}]" if widget_name else ""

        log_line = f"{Fore.WHITE}{timestamp}{Style.RESET_ALL} {colored_level} {colored_component}{context_str} {record.getMessage()}"

        if record.exc_info:
            log_line += '\n' + self.formatException(record.exc_info)

        return log_line


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Setup the formattable-widget logging system"""

    numeric_level = getattr(logging, level.upper(), logging.INFO)

    # ANSI colours on legacy Windows consoles; no-op elsewhere
    just_fix_windows_console()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(numeric_level)

    # Clear any existing handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(WidgetFormatter())
    root_logger.addHandler(console_handler)

    # File handler if specified (without colors)
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)-8s %(name)-32s %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        root_logger.addHandler(file_handler)

    # Disable propagation to avoid duplicate logs
    root_logger.propagate = False

    # Python-Markdown logs extension loading at DEBUG
    logging.getLogger('MARKDOWN').setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a specific component"""
    logger_name = f"{ROOT_LOGGER_NAME}.{name}" if not name.startswith(ROOT_LOGGER_NAME) else name
    return logging.getLogger(logger_name)


def set_widget_context(widget_name: Optional[str]):
    """Set the widget name shown in log lines; returns a token for reset"""
    return CURRENT_WIDGET.set(widget_name)


def clear_widget_context(token=None):
    """Clear the widget name set by set_widget_context"""
    if token is not None:
        CURRENT_WIDGET.reset(token)
    else:
        CURRENT_WIDGET.set(None)


class LogTimer:
    """Context manager for timing operations with automatic logging"""

    def __init__(self, operation_name: str, logger: logging.Logger, level: int = logging.DEBUG):
        self.operation_name = operation_name
        self.logger = logger
        self.level = level
        self.start_time = None
        self.duration_ms: Optional[int] = None

    def __enter__(self):
        self.start_time = time.time()
        self.logger.log(self.level, f"Starting {self.operation_name}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration_ms = int((time.time() - self.start_time) * 1000)
        if exc_type:
            self.logger.error(f"{self.operation_name} FAILED ({self.duration_ms}ms): {exc_val}")
        else:
            self.logger.log(self.level, f"{self.operation_name} completed ({self.duration_ms}ms)")
        return False


def timer(operation_name: str, level: int = logging.DEBUG) -> LogTimer:
    """Create a timing context manager"""
    return LogTimer(operation_name, get_logger('performance'), level)


def log_conversion(widget_name: str, details: Optional[Dict[str, Any]] = None):
    """Log a finished widget conversion with structured data"""
    logger = get_logger('widgets.converter')
    details_str = f" {details}" if details else ""
    logger.debug(f"Converted {widget_name}{details_str}")
