"""Convert between integers and Roman numerals."""

import importlib.metadata

from numeral_converter.constants import *  # noqa: F403
from numeral_converter.exceptions import *  # noqa: F403
from numeral_converter.roman import *  # noqa: F403

__version__ = importlib.metadata.version("numeral-converter")


def _get_version() -> str:
    return __version__
