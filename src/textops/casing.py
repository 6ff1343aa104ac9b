"""
Case conversion and boolean coercion.
"""

# relative
from .numeric import parse_float, parse_int


# ---------------------------------------------------------------------------- #
TRUE, FALSE = 'true', 'false'


def capitalize_first(string):
    """
    Upper case the first character of `string`, leaving the rest untouched.

    Examples
    --------
    >>> capitalize_first('hello World')
    'Hello World'
    """
    return string[:1].upper() + string[1:]


def upper(string):
    return string.upper()


def string_to_bool(string):
    """
    Convert a string to a boolean.

    Any casing of the word 'true' converts to True, as does any numeric string
    (see `is_number`) with a non-zero value. Everything else is False.

    Examples
    --------
    >>> string_to_bool('TRUE'), string_to_bool('0.5'), string_to_bool('0')
    (True, True, False)
    """
    if string.upper() == TRUE.upper():
        return True

    for parse in (parse_int, parse_float):
        try:
            return parse(string) != 0
        except (ValueError, OverflowError):
            continue

    return False


def bool_to_string(value):
    return TRUE if value else FALSE
