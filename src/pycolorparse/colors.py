"""RGBA color value type used throughout PyColorParse."""

import re

from typing import NamedTuple, Optional

from .errors import InvalidHexColorError

__all__ = ("Color",)


_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


def _ensure_byte(value: int, channel: str) -> int:
    value = int(value)
    if value < 0 or value > 255:
        raise ValueError(
            "{0} channel must be between 0 and 255 (inclusive)".format(channel)
        )
    return value


class Color(NamedTuple):
    """Immutable 32-bit RGBA color.

    Two colors are equal if and only if all four of their channels are equal.
    The default color (all channels zero) is available as ``Color.DEFAULT``
    and stands for "no color specified".

    Direct construction does not validate the channels; use
    ``Color.from_rgb()`` or ``Color.from_rgba()`` when the channels come
    from an untrusted source.
    """

    red: int = 0
    green: int = 0
    blue: int = 0
    alpha: int = 0

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> "Color":
        """Creates a fully opaque color from its red, green and blue channels.

        Raises:
            ValueError: if any of the channels is not between 0 and 255
        """
        return cls.from_rgba(red, green, blue, 255)

    @classmethod
    def from_rgba(cls, red: int, green: int, blue: int, alpha: int) -> "Color":
        """Creates a color from its red, green, blue and alpha channels.

        Raises:
            ValueError: if any of the channels is not between 0 and 255
        """
        return cls(
            _ensure_byte(red, "red"),
            _ensure_byte(green, "green"),
            _ensure_byte(blue, "blue"),
            _ensure_byte(alpha, "alpha"),
        )

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Decodes a color given in web-style hexadecimal notation.

        The accepted forms are ``rgb``, ``rrggbb`` and ``rrggbbaa``, with an
        optional leading ``#``. Each digit of the short form is doubled. The
        alpha channel is 255 unless the eight-digit form specifies it.

        Raises:
            InvalidHexColorError: if the value is not in one of the accepted
                forms
        """
        digits = value.strip()
        if digits.startswith("#"):
            digits = digits[1:]

        if not _HEX_DIGITS.fullmatch(digits):
            raise InvalidHexColorError(value)

        if len(digits) == 3:
            digits = "".join(digit * 2 for digit in digits) + "ff"
        elif len(digits) == 6:
            digits += "ff"
        elif len(digits) != 8:
            raise InvalidHexColorError(value)

        return cls(*(int(digits[i : i + 2], 16) for i in range(0, 8, 2)))

    @property
    def is_default(self) -> bool:
        """Returns ``True`` if the color is the default color."""
        return self == Color.DEFAULT

    def to_hex(self, alpha: Optional[bool] = None) -> str:
        """Returns the lowercase hexadecimal representation of the color
        without a leading ``#``.

        Parameters:
            alpha: whether to include the alpha channel. ``None`` means that
                the alpha channel is included only if the color is not fully
                opaque.
        """
        if alpha is None:
            alpha = self.alpha != 255
        if alpha:
            return "{0:02x}{1:02x}{2:02x}{3:02x}".format(*self)
        else:
            return "{0:02x}{1:02x}{2:02x}".format(self.red, self.green, self.blue)

    def to_rgba_string(self, separator: str = ",") -> str:
        """Returns the channels of the color as a list of decimal numbers
        joined by the given separator.
        """
        return separator.join(str(channel) for channel in self)


Color.DEFAULT = Color(0, 0, 0, 0)  # type: ignore
