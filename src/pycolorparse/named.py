"""Table of the well-known named colors.

The table is built lazily from an explicit list of names and colors the
first time it is needed and it is never modified afterwards. Name lookups
are case insensitive for ASCII letters only.
"""

from threading import Lock
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping, Optional, Tuple

from .colors import Color
from .logger import log

__all__ = ("NAMED_COLORS", "NamedColorTable", "get_named_color_table")


#: Names and hexadecimal values of the named colors, in alphabetical order
NAMED_COLORS: Tuple[Tuple[str, str], ...] = (
    ("AliceBlue", "f0f8ff"),
    ("AntiqueWhite", "faebd7"),
    ("Aqua", "00ffff"),
    ("Aquamarine", "7fffd4"),
    ("Azure", "f0ffff"),
    ("Beige", "f5f5dc"),
    ("Bisque", "ffe4c4"),
    ("Black", "000000"),
    ("BlanchedAlmond", "ffebcd"),
    ("Blue", "0000ff"),
    ("BlueViolet", "8a2be2"),
    ("Brown", "a52a2a"),
    ("BurlyWood", "deb887"),
    ("CadetBlue", "5f9ea0"),
    ("Chartreuse", "7fff00"),
    ("Chocolate", "d2691e"),
    ("Coral", "ff7f50"),
    ("CornflowerBlue", "6495ed"),
    ("Cornsilk", "fff8dc"),
    ("Crimson", "dc143c"),
    ("Cyan", "00ffff"),
    ("DarkBlue", "00008b"),
    ("DarkCyan", "008b8b"),
    ("DarkGoldenrod", "b8860b"),
    ("DarkGray", "a9a9a9"),
    ("DarkGreen", "006400"),
    ("DarkGrey", "a9a9a9"),
    ("DarkKhaki", "bdb76b"),
    ("DarkMagenta", "8b008b"),
    ("DarkOliveGreen", "556b2f"),
    ("DarkOrange", "ff8c00"),
    ("DarkOrchid", "9932cc"),
    ("DarkRed", "8b0000"),
    ("DarkSalmon", "e9967a"),
    ("DarkSeaGreen", "8fbc8f"),
    ("DarkSlateBlue", "483d8b"),
    ("DarkSlateGray", "2f4f4f"),
    ("DarkSlateGrey", "2f4f4f"),
    ("DarkTurquoise", "00ced1"),
    ("DarkViolet", "9400d3"),
    ("DeepPink", "ff1493"),
    ("DeepSkyBlue", "00bfff"),
    ("DimGray", "696969"),
    ("DimGrey", "696969"),
    ("DodgerBlue", "1e90ff"),
    ("Firebrick", "b22222"),
    ("FloralWhite", "fffaf0"),
    ("ForestGreen", "228b22"),
    ("Fuchsia", "ff00ff"),
    ("Gainsboro", "dcdcdc"),
    ("GhostWhite", "f8f8ff"),
    ("Gold", "ffd700"),
    ("Goldenrod", "daa520"),
    ("Gray", "808080"),
    ("Green", "008000"),
    ("GreenYellow", "adff2f"),
    ("Grey", "808080"),
    ("Honeydew", "f0fff0"),
    ("HotPink", "ff69b4"),
    ("IndianRed", "cd5c5c"),
    ("Indigo", "4b0082"),
    ("Ivory", "fffff0"),
    ("Khaki", "f0e68c"),
    ("Lavender", "e6e6fa"),
    ("LavenderBlush", "fff0f5"),
    ("LawnGreen", "7cfc00"),
    ("LemonChiffon", "fffacd"),
    ("LightBlue", "add8e6"),
    ("LightCoral", "f08080"),
    ("LightCyan", "e0ffff"),
    ("LightGoldenrodYellow", "fafad2"),
    ("LightGray", "d3d3d3"),
    ("LightGreen", "90ee90"),
    ("LightGrey", "d3d3d3"),
    ("LightPink", "ffb6c1"),
    ("LightSalmon", "ffa07a"),
    ("LightSeaGreen", "20b2aa"),
    ("LightSkyBlue", "87cefa"),
    ("LightSlateGray", "778899"),
    ("LightSlateGrey", "778899"),
    ("LightSteelBlue", "b0c4de"),
    ("LightYellow", "ffffe0"),
    ("Lime", "00ff00"),
    ("LimeGreen", "32cd32"),
    ("Linen", "faf0e6"),
    ("Magenta", "ff00ff"),
    ("Maroon", "800000"),
    ("MediumAquamarine", "66cdaa"),
    ("MediumBlue", "0000cd"),
    ("MediumOrchid", "ba55d3"),
    ("MediumPurple", "9370db"),
    ("MediumSeaGreen", "3cb371"),
    ("MediumSlateBlue", "7b68ee"),
    ("MediumSpringGreen", "00fa9a"),
    ("MediumTurquoise", "48d1cc"),
    ("MediumVioletRed", "c71585"),
    ("MidnightBlue", "191970"),
    ("MintCream", "f5fffa"),
    ("MistyRose", "ffe4e1"),
    ("Moccasin", "ffe4b5"),
    ("NavajoWhite", "ffdead"),
    ("Navy", "000080"),
    ("OldLace", "fdf5e6"),
    ("Olive", "808000"),
    ("OliveDrab", "6b8e23"),
    ("Orange", "ffa500"),
    ("OrangeRed", "ff4500"),
    ("Orchid", "da70d6"),
    ("PaleGoldenrod", "eee8aa"),
    ("PaleGreen", "98fb98"),
    ("PaleTurquoise", "afeeee"),
    ("PaleVioletRed", "db7093"),
    ("PapayaWhip", "ffefd5"),
    ("PeachPuff", "ffdab9"),
    ("Peru", "cd853f"),
    ("Pink", "ffc0cb"),
    ("Plum", "dda0dd"),
    ("PowderBlue", "b0e0e6"),
    ("Purple", "800080"),
    ("RebeccaPurple", "663399"),
    ("Red", "ff0000"),
    ("RosyBrown", "bc8f8f"),
    ("RoyalBlue", "4169e1"),
    ("SaddleBrown", "8b4513"),
    ("Salmon", "fa8072"),
    ("SandyBrown", "f4a460"),
    ("SeaGreen", "2e8b57"),
    ("SeaShell", "fff5ee"),
    ("Sienna", "a0522d"),
    ("Silver", "c0c0c0"),
    ("SkyBlue", "87ceeb"),
    ("SlateBlue", "6a5acd"),
    ("SlateGray", "708090"),
    ("SlateGrey", "708090"),
    ("Snow", "fffafa"),
    ("SpringGreen", "00ff7f"),
    ("SteelBlue", "4682b4"),
    ("Tan", "d2b48c"),
    ("Teal", "008080"),
    ("Thistle", "d8bfd8"),
    ("Tomato", "ff6347"),
    ("Transparent", "00000000"),
    ("Turquoise", "40e0d0"),
    ("Violet", "ee82ee"),
    ("Wheat", "f5deb3"),
    ("White", "ffffff"),
    ("WhiteSmoke", "f5f5f5"),
    ("Yellow", "ffff00"),
    ("YellowGreen", "9acd32"),
)


def _fold(name: Any) -> Optional[str]:
    """Returns the lookup key of the given name, or ``None`` if the name
    cannot be the name of any color in the table.
    """
    if not isinstance(name, str) or not name.isascii():
        return None
    return name.lower()


class NamedColorTable(Mapping[str, Color]):
    """Read-only, case insensitive mapping from color names to colors."""

    def __init__(self, entries: Iterable[Tuple[str, Color]]):
        """Constructor.

        Parameters:
            entries: the names and colors to store in the table. When two
                names are equal after case folding, the one that comes later
                wins.
        """
        table = {}
        for name, color in entries:
            key = _fold(name)
            if key is not None:
                table[key] = color
        self._table = MappingProxyType(table)

    @classmethod
    def from_hex_entries(cls, entries: Iterable[Tuple[str, str]]):
        """Creates a table from names and hexadecimal color specifications."""
        return cls((name, Color.from_hex(spec)) for name, spec in entries)

    def __contains__(self, name) -> bool:
        key = _fold(name)
        return key is not None and key in self._table

    def __getitem__(self, name: str) -> Color:
        key = _fold(name)
        if key is None:
            raise KeyError(name)
        return self._table[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def lookup(self, name: str, default: Color = Color.DEFAULT) -> Color:  # type: ignore
        """Returns the color with the given name or the given default color
        if there is no such color.
        """
        key = _fold(name)
        return self._table.get(key, default) if key is not None else default

    def names(self) -> Tuple[str, ...]:
        """Returns the lowercase names of all the colors, sorted."""
        return tuple(sorted(self._table))


_table: Optional[NamedColorTable] = None
_table_lock = Lock()


def get_named_color_table() -> NamedColorTable:
    """Returns the process-wide table of named colors, building it on the
    first call.

    Safe to call from multiple threads; the table is built at most once and
    every caller receives the same instance.
    """
    global _table

    table = _table
    if table is None:
        with _table_lock:
            if _table is None:
                _table = NamedColorTable.from_hex_entries(NAMED_COLORS)
                log.debug("Named color table built with %d entries", len(_table))
            table = _table

    return table
