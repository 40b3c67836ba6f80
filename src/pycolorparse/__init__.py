"""
=============
PyColorParse
=============
---------------------------------------------------------
Parser for numeric, hexadecimal and named color tokens
---------------------------------------------------------
"""

from .colors import Color
from .named import NamedColorTable, get_named_color_table
from .parser import ColorParser, parse_color
from .version import __author__, __email__, __version_info__, __version__

__all__ = (
    "__author__",
    "__email__",
    "__version_info__",
    "__version__",
    "Color",
    "ColorParser",
    "NamedColorTable",
    "get_named_color_table",
    "parse_color",
)
