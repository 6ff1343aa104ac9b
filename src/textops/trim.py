"""
Trim whitespace or a fixed number of characters from strings.
"""


# relative
from .locales import whitespace_set, whitespace_string


# ---------------------------------------------------------------------------- #

def _resolve_chars(whitespace, locale):
    if whitespace is None:
        return whitespace_string(locale)
    return ''.join(whitespace)


def trim_whitespace(string, whitespace=None, locale=None):
    """
    Remove all leading and trailing whitespace from a string.

    Parameters
    ----------
    string : str
        The text to trim.
    whitespace : collection of str, optional
        The characters to consider as whitespace. By default, the whitespace
        set of `locale` is used.
    locale : str or Locale, optional
        Locale used for classifying whitespace characters when `whitespace` is
        not given. Defaults to the configured locale.

    Examples
    --------
    >>> trim_whitespace(' \\t\\n Hello, world! \\t\\n ')
    'Hello, world!'

    Returns
    -------
    str
        The trimmed string, which is empty if `string` contains nothing but
        whitespace.
    """
    return string.strip(_resolve_chars(whitespace, locale))


def remove_whitespace(string, whitespace=None, locale=None):
    """Remove all whitespace characters anywhere in `string`."""
    if whitespace is None:
        whitespace = whitespace_set(locale)

    return ''.join(char for char in string if char not in whitespace)


def trim(string, n):
    """
    Remove `n` characters from both the start and the end of `string`.

    Negative `n` leaves the string unchanged. If the two trimmed ends would
    meet (or overlap) in the middle, the result is empty.

    Examples
    --------
    >>> trim('[[[ok]]]', 3)
    'ok'
    >>> trim('[1st half][2nd half]', 10)
    ''
    """
    n = int(n)
    if n < 0:
        return string

    if 2 * n >= len(string):
        return ''

    return string[n:len(string) - n]
