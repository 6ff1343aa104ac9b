"""
Small, dependable string primitives: tokenize, search, trim, reflow and
recognize numbers.
"""

# std
from importlib.metadata import version

# third-party
from loguru import logger

# silence logging by default
logger.disable('textops')

# relative
from .config import CONFIG
from .io import ResourceUnavailable, count_file_lines, count_lines, read_text
from .trim import remove_whitespace, trim, trim_whitespace
from .split import contains, find_all, iter_find, iter_separate, sep, separate
from .reflow import InvalidArgument, wrap_to_width
from .casing import bool_to_string, capitalize_first, string_to_bool, upper
from .mapping import mapify, stringify
from .numeric import is_float, is_integer, is_number, parse_float, parse_int
from .locales import (Locale, get_locale, register_locale, whitespace_set,
                      whitespace_string)
from .utils import (char_to_string, circular_index, digits_only,
                    erase_from_end, is_palindrome, reverse)


# ---------------------------------------------------------------------------- #

# version
__version__ = version('textops')
