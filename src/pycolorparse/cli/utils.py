import csv

from typing import IO, Iterable

from tqdm import tqdm

from pycolorparse.colors import Color
from pycolorparse.parser import ColorParser

__all__ = ("parse_and_write_tabular",)


def parse_and_write_tabular(
    tokens: Iterable[str],
    output: IO[str],
    list_separator: str,
    *,
    format: str = "rgba",
    progress: bool = False,
    total: int = None,
) -> int:
    """Parses color tokens and dumps the parsed colors in human-readable
    format to a stream.

    Parameters:
        tokens: the color tokens to parse
        output: stream to dump the result to
        list_separator: the list separator character to use when parsing
        format: ``rgba`` to write the four channels in separate columns,
            ``hex`` to write the eight-digit hexadecimal form in a single
            column
        progress: whether to show a progress bar
        total: the number of tokens, for the progress bar

    Returns:
        the number of tokens that resolved to the default color, i.e. the
        tokens that were empty, malformed or unknown (or spelled out the
        default color itself)
    """
    writer = csv.writer(output, dialect="excel-tab")
    parser = ColorParser()
    num_default = 0

    def color_to_row(token: str, color: Color):
        """Converts a parsed color to the row that we want to write into the
        output file.
        """
        if format == "hex":
            return [token, color.to_hex(alpha=True)]
        else:
            return [token, color.red, color.green, color.blue, color.alpha]

    with tqdm(tokens, total=total, disable=not progress, unit="color") as bar:
        for token in bar:
            color = parser.parse(token, list_separator)
            if color.is_default:
                num_default += 1
            writer.writerow(color_to_row(token, color))

    return num_default
