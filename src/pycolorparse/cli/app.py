"""Main application class for PyColorParse"""

import sys

import click
import click_log

from pycolorparse.config import get_list_separator
from pycolorparse.logger import log
from pycolorparse.named import get_named_color_table

from .utils import parse_and_write_tabular


separator_option = click.option(
    "-s",
    "--separator",
    metavar="CHAR",
    help="the list separator to use for colors given as numbers. When "
    "omitted, it is derived from the locale.",
    default=None,
)

format_option = click.option(
    "-f",
    "--format",
    type=click.Choice(["rgba", "hex"]),
    help="the output format; separate columns for the red, green, blue and "
    "alpha channels (default) or a single hexadecimal column.",
    default="rgba",
)


def _validate_separator(separator):
    if separator is None:
        return get_list_separator()
    if len(separator) != 1:
        raise click.BadParameter(
            "must be a single character", param_hint="'-s' / '--separator'"
        )
    return separator


@click.group()
@click_log.simple_verbosity_option(log)
def cli():
    pass


@cli.command()
@separator_option
@format_option
@click.argument("values", nargs=-1, required=True)
def parse(values, separator, format):
    """Parses colors given on the command line.

    Prints one tab-separated line per color: the color as it was given,
    followed by its red, green, blue and alpha channels (between 0 and 255,
    inclusive). Colors that cannot be parsed are printed as all zeros.
    """
    separator = _validate_separator(separator)
    parse_and_write_tabular(values, sys.stdout, separator, format=format)


@cli.command()
@click.option(
    "-o",
    "--output",
    type=click.File("w"),
    help="name of the output file",
    default="-",
)
@click.option(
    "-p",
    "--progress",
    default=False,
    is_flag=True,
    help="Show the progress of the conversion with a progress bar.",
)
@separator_option
@format_option
@click.argument("input", type=click.File("r"), required=True)
def convert(input, output, progress, separator, format):
    """Parses a file containing one color per line.

    The output has the same format as the output of the `parse` command.
    Empty lines are skipped.
    """
    separator = _validate_separator(separator)
    tokens = [line.strip() for line in input]
    tokens = [token for token in tokens if token]

    num_default = parse_and_write_tabular(
        tokens,
        output,
        separator,
        format=format,
        progress=progress,
        total=len(tokens),
    )
    log.info("%d of %d colors resolved to the default color", num_default, len(tokens))


@cli.command()
def names():
    """Lists the known color names and their hexadecimal values."""
    table = get_named_color_table()
    for name in table.names():
        click.echo("{0}\t{1}".format(name, table[name].to_hex(alpha=True)))


def main():
    """Main entry point of the color parser."""
    click_log.basic_config(log)
    cli()
