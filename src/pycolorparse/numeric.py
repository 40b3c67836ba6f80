"""Decoder for colors given as a separated list of decimal channel values,
such as ``255,128,0`` or ``255;128;0;64``.
"""

import re

from typing import List

from .errors import ByteOutOfRangeError, InvalidNumericListError

__all__ = ("NumericListDecoder",)


class NumericListDecoder:
    """Turns a separated list of non-negative decimal integers into a list
    of unsigned bytes.
    """

    _component_regex = re.compile(r"[0-9]+")

    def decode(self, value: str, separator: str) -> List[int]:
        """Splits the given value on the separator and converts each
        component into an unsigned byte.

        Whitespace around the components is ignored.

        Parameters:
            value: the value to decode
            separator: the list separator character

        Returns:
            the decoded bytes, in the order they appeared in the input

        Raises:
            InvalidNumericListError: if a component is not a non-negative
                decimal integer
            ByteOutOfRangeError: if a component is larger than 255
        """
        result = []
        for component in value.split(separator):
            component = component.strip()
            if not self._component_regex.fullmatch(component):
                raise InvalidNumericListError(value, component)

            # leading zeros are fine but anything longer is out of range
            digits = component.lstrip("0")
            byte = int(digits) if digits and len(digits) <= 3 else 0
            if len(digits) > 3 or byte > 255:
                raise ByteOutOfRangeError(value, component)

            result.append(byte)

        return result
