"""
Miscellaneous small string utilities.
"""


# std
import string as _string


# ---------------------------------------------------------------------------- #

def reverse(string):
    return string[::-1]


def is_palindrome(string):
    """
    Check if `string` reads the same backwards. The comparison is exact:
    casing, spacing and punctuation all count.

    Examples
    --------
    >>> is_palindrome('racecar'), is_palindrome('Racecar')
    (True, False)
    """
    half = len(string) // 2
    return string[:half] == string[::-1][:half]


def circular_index(string, index):
    """
    Index into `string` as if it was repeated indefinitely.

    Examples
    --------
    >>> circular_index('resonance!', 15)
    'a'

    Raises
    ------
    IndexError
        If `string` is empty.
    """
    if not string:
        raise IndexError('Cannot index into an empty string.')

    return string[index % len(string)]


def erase_from_end(string, n):
    """Remove the last `n` characters of `string`."""
    if n <= 0:
        return string

    return string[:max(len(string) - n, 0)]


def digits_only(string):
    """Remove all characters that are not ascii digits."""
    return ''.join(char for char in string if char in _string.digits)


def char_to_string(char):
    """
    Convert a single character, given as a one-character string or as an
    integer code point, to a string.

    Examples
    --------
    >>> char_to_string('a'), char_to_string(10)
    ('a', '\\n')

    Raises
    ------
    ValueError
        If `char` is a string that is not exactly one character long, or an
        integer outside the unicode range.
    TypeError
        If `char` is neither a string nor an integer.
    """
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f'Expected a single character, not {char!r}.')
        return char

    if isinstance(char, int):
        return chr(char)

    raise TypeError(f'Cannot convert object of type {type(char).__name__!r} '
                    f'to a character.')
