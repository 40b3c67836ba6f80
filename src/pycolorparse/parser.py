"""Color parser that accepts numeric, hexadecimal and named colors.

The parser classifies its input as follows; the first branch that applies
decides the result:

1. Empty or whitespace-only input yields the default color.
2. Input containing the list separator is a list of decimal channels,
   ``r,g,b`` or ``r,g,b,a``. Anything else containing the separator yields
   the default color.
3. Input containing a run of three or six hexadecimal digits is decoded as
   ``rgb``, ``rrggbb`` or ``rrggbbaa`` with an optional leading ``#``. If
   the decoding fails, the input is tried as a color name.
4. Input is looked up in the table of named colors, ignoring case. Unknown
   names yield the default color.
"""

import re

from typing import Optional

from .colors import Color
from .config import get_list_separator
from .errors import InvalidColorError, InvalidHexColorError
from .logger import log
from .named import get_named_color_table
from .numeric import NumericListDecoder

__all__ = ("ColorParser", "parse_color")


class ColorParser:
    """Parser that turns user-supplied color tokens into RGBA colors.

    The parser never raises an exception for malformed input; it returns
    ``Color.DEFAULT`` instead. Instances hold no mutable state and can be
    shared freely between threads.
    """

    _hex_regex = re.compile(r"([0-9a-fA-F]{3}){1,2}")

    def __init__(self):
        """Constructor."""
        self._numeric_decoder = NumericListDecoder()

    def parse(self, value: Optional[str], list_separator: str) -> Color:
        """Parses a color token.

        Parameters:
            value: the token to parse
            list_separator: the list separator character of the active
                locale, used to recognize colors given as a list of numbers

        Returns:
            the parsed color, or ``Color.DEFAULT`` if the token is empty or
            cannot be parsed

        Raises:
            ValueError: if the list separator is not a single character
        """
        if len(list_separator) != 1:
            raise ValueError("list separator must be a single character")

        if value is None or not value.strip():
            return Color.DEFAULT

        try:
            if list_separator in value:
                return self._parse_numeric_list(value, list_separator)

            if self._hex_regex.search(value):
                try:
                    return Color.from_hex(value)
                except InvalidHexColorError as ex:
                    log.debug("%s; trying it as a color name", ex)

            return self._parse_name(value)
        except InvalidColorError as ex:
            log.debug("%s; using the default color", ex)
            return Color.DEFAULT

    def _parse_name(self, value: str) -> Color:
        color = get_named_color_table().lookup(value, None)
        if color is None:
            raise InvalidColorError(value, "Unknown color name: {0!r}".format(value))
        return color

    def _parse_numeric_list(self, value: str, separator: str) -> Color:
        rgba = self._numeric_decoder.decode(value, separator)
        if len(rgba) == 4:
            return Color.from_rgba(*rgba)
        elif len(rgba) == 3:
            return Color.from_rgb(*rgba)
        else:
            raise InvalidColorError(
                value,
                "Expected 3 or 4 components in color {0!r}, got {1}".format(
                    value, len(rgba)
                ),
            )


_default_parser = ColorParser()


def parse_color(value: Optional[str], list_separator: Optional[str] = None) -> Color:
    """Parses a color token with a shared parser instance.

    Parameters:
        value: the token to parse
        list_separator: the list separator character to use; ``None`` means
            the separator of the active locale

    Returns:
        the parsed color, or ``Color.DEFAULT`` if the token is empty or
        cannot be parsed
    """
    if list_separator is None:
        list_separator = get_list_separator()
    return _default_parser.parse(value, list_separator)
