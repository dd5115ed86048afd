"""
Widget Exceptions - formattable-widget

Error hierarchy for widget conversion. Only input validation is checked here;
failures from the markdown engine or from caller-supplied formatters are not
wrapped and reach the caller unchanged.
"""

from typing import Dict, Any, Optional


class WidgetError(Exception):
    """Base widget error with an error code and structured context"""

    def __init__(self,
                 message: str,
                 error_code: str,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_code = error_code
        self.context = context or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for display layers"""
        return {
            'error': self.error_code,
            'message': super().__str__(),
            'context': self.context
        }

    def __str__(self) -> str:
        return f"{self.error_code}: {super().__str__()}"


class InvalidInputError(WidgetError):
    """Raised when the input is not a formatted table"""

    def __init__(self,
                 received: Any = None,
                 expected: str = "formattable",
                 requirement: str = "exposing to_markdown()"):
        received_type = type(received).__name__
        super().__init__(
            message=f"expected a {expected} object {requirement}, got {received_type}",
            error_code="INVALID_INPUT",
            context={'expected': expected, 'received_type': received_type}
        )


class ConverterNotFoundError(WidgetError):
    """Raised when a converter is requested by a name nobody registered"""

    def __init__(self, kind: str, available: Optional[list] = None):
        super().__init__(
            message=f"No widget converter registered under '{kind}'",
            error_code="CONVERTER_NOT_FOUND",
            context={'kind': kind, 'available': list(available or [])}
        )


class ConverterRegistrationError(WidgetError):
    """Raised when a converter cannot be added to a registry"""

    def __init__(self, message: str, name: Optional[str] = None):
        context = {}
        if name:
            context['name'] = name
        super().__init__(
            message=message,
            error_code="CONVERTER_REGISTRATION",
            context=context
        )


class TableFormatError(WidgetError):
    """Raised when a SimpleFormattedTable is built from inconsistent data"""

    def __init__(self, message: str, column: Optional[str] = None):
        context = {}
        if column is not None:
            context['column'] = column
        super().__init__(
            message=message,
            error_code="TABLE_FORMAT",
            context=context
        )
