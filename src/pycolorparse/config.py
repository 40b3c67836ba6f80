"""Default settings of the color parser."""

import locale

__all__ = ("DEFAULT_LIST_SEPARATOR", "get_list_separator")

#: List separator used when the caller does not supply one
DEFAULT_LIST_SEPARATOR = ","


def get_list_separator() -> str:
    """Returns the list separator character that belongs to the active
    ``LC_NUMERIC`` locale.

    Locales that use a comma as their decimal point separate list items with
    a semicolon; all other locales use a comma.
    """
    conventions = locale.localeconv()
    if conventions.get("decimal_point") == ",":
        return ";"
    else:
        return DEFAULT_LIST_SEPARATOR
