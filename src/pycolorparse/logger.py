"""Logger shared by the modules of PyColorParse."""

import logging

__all__ = ("log",)

log = logging.getLogger("pycolorparse")
