"""
Recognize integer and floating point literals.

The `parse_*` functions are checked parsers: they raise `ValueError` for text
that is not a literal of the requested kind, and `OverflowError` for literals
whose value does not fit the configured numeric type. The `is_*` predicates
wrap them and never raise for bad input.
"""


# std
import re
import functools as ftl

# third-party
import numpy as np

# relative
from .config import CONFIG
from .locales import decimal_point as _decimal_point


# ---------------------------------------------------------------------------- #
# optional minus sign, followed by ascii digits only
REGEX_INTEGER = re.compile(r'-?[0-9]+')
REGEX_NONZERO = re.compile(r'[1-9]')


@ftl.lru_cache()
def _float_regex(point):
    # exactly one decimal point, with at least one digit on either side of it
    point = re.escape(point)
    return re.compile(rf'-?(?:[0-9]+{point}[0-9]*|{point}[0-9]+)')


# ---------------------------------------------------------------------------- #
# Checked parsers

def parse_int(string, bits=None):
    """
    Parse a decimal integer literal, checking that it fits in a signed integer
    of size `bits`.

    Parameters
    ----------
    string : str
        Text to parse. Only an optional leading '-' and the ascii digits 0-9
        are allowed.
    bits : int, optional
        Size of the integer type in bits, by default the configured value
        (32).

    Returns
    -------
    int

    Raises
    ------
    ValueError
        If `string` is not an integer literal.
    OverflowError
        If the value is outside the range of the integer type.
    """
    if not REGEX_INTEGER.fullmatch(string):
        raise ValueError(f'Invalid integer literal: {string!r}.')

    info = np.iinfo(np.dtype(f'int{bits or CONFIG.integer_bits}'))

    # avoid converting very long digit strings
    if len(string.lstrip('-').lstrip('0')) > len(str(info.max)):
        raise OverflowError(f'Integer literal out of range for {info.dtype}: '
                            f'{string!r}.')

    value = int(string)
    if info.min <= value <= info.max:
        return value

    raise OverflowError(f'Integer literal out of range for {info.dtype}: '
                        f'{string!r}.')


def parse_float(string, decimal_point=None, bits=None):
    """
    Parse a decimal floating point literal containing exactly one decimal
    point.

    Parameters
    ----------
    string : str
        Text to parse, eg. '-1.5', '.2' or '3.'. Exponents, a leading '+',
        whitespace and special values like 'nan' or 'inf' are not accepted.
    decimal_point : str, optional
        The decimal point character, by default the one of the configured
        locale.
    bits : int, optional
        Size of the floating point type in bits, by default the configured
        value (64).

    Returns
    -------
    float

    Raises
    ------
    ValueError
        If `string` is not a floating point literal.
    OverflowError
        If the value overflows, or underflows to zero, in the floating point
        type.
    """
    point = decimal_point or _decimal_point()
    if not _float_regex(point).fullmatch(string):
        raise ValueError(f'Invalid floating point literal: {string!r}.')

    dtype = np.dtype(f'float{bits or CONFIG.float_bits}')
    with np.errstate(over='ignore', under='ignore'):
        value = dtype.type(float(string.replace(point, '.')))

    if not np.isfinite(value):
        raise OverflowError(f'Floating point literal overflows {dtype}: '
                            f'{string!r}.')

    if value == 0 and REGEX_NONZERO.search(string):
        raise OverflowError(f'Floating point literal underflows {dtype}: '
                            f'{string!r}.')

    return float(value)


# ---------------------------------------------------------------------------- #
# Predicates

def is_integer(string, bits=None):
    """
    Check whether `string` is a decimal integer literal in range.

    Examples
    --------
    >>> is_integer('-100')
    True
    >>> is_integer('999999999999999999999')
    False
    """
    try:
        parse_int(string, bits)
    except (ValueError, OverflowError):
        return False
    return True


def is_float(string, decimal_point=None, bits=None):
    """
    Check whether `string` is a floating point literal with exactly one
    decimal point. Integer literals (no decimal point) and exponent notation
    are not considered floats.

    Examples
    --------
    >>> is_float('.2')
    True
    >>> is_float('7.0.0')
    False
    >>> is_float('1e3')
    False
    """
    try:
        parse_float(string, decimal_point, bits)
    except (ValueError, OverflowError):
        return False
    return True


def is_number(string, decimal_point=None, integer_bits=None, float_bits=None):
    """
    Check whether `string` is either an integer or a floating point literal.
    See `is_integer` and `is_float` for the parameters.

    Examples
    --------
    >>> is_number('1,5'), is_number('1,5', ',')
    (False, True)
    """
    return (is_integer(string, integer_bits)
            or is_float(string, decimal_point, float_bits))
