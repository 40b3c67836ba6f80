"""Exceptions thrown by the color decoders."""

from typing import Any, Optional


class ColorParserError(RuntimeError):
    """Base class for all errors thrown by the color decoders."""

    pass


class InvalidColorError(ColorParserError):
    """Exception thrown when a color token cannot be decoded."""

    def __init__(self, color: Any, message: Optional[str] = None):
        self.color = color
        message = message or "Invalid color: {0!r}".format(color)
        super().__init__(message)


class InvalidHexColorError(InvalidColorError):
    """Exception thrown when a token looks like a hexadecimal color but is
    not one of the accepted ``rgb``, ``rrggbb`` or ``rrggbbaa`` forms.
    """

    def __init__(self, color: Any, message: Optional[str] = None):
        message = message or "Invalid hexadecimal color: {0!r}".format(color)
        super().__init__(color, message)


class InvalidNumericListError(InvalidColorError):
    """Exception thrown when a separated list of color components contains
    a component that is not a non-negative decimal integer.
    """

    def __init__(self, color: Any, component: Any, message: Optional[str] = None):
        self.component = component
        message = message or "Invalid component {0!r} in color {1!r}".format(
            component, color
        )
        super().__init__(color, message)


class ByteOutOfRangeError(InvalidNumericListError):
    """Exception thrown when a component of a separated list of color
    components does not fit in an unsigned byte.
    """

    def __init__(self, color: Any, component: Any, message: Optional[str] = None):
        message = message or (
            "Component {0!r} in color {1!r} must be between 0 and 255 "
            "(inclusive)".format(component, color)
        )
        super().__init__(color, component, message)
