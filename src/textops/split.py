"""
Tokenize strings on separators and search for (overlapping) substrings.
"""


# relative
from .config import CONFIG


# ---------------------------------------------------------------------------- #

def contains(string, substring):
    """Check whether `substring` occurs anywhere in `string`."""
    return substring in string


# ---------------------------------------------------------------------------- #
# Separation

def separate(string, separator=None, omit_empty=True):
    """
    Split `string` at every (non-overlapping) occurrence of `separator`,
    scanning from left to right.

    Parameters
    ----------
    string : str
        The text to split.
    separator : str, optional
        The separator. By default the configured separator (',') is used. An
        empty separator splits the string into its individual characters.
    omit_empty : bool, optional
        Whether to drop empty tokens from the result, by default True.

    Examples
    --------
    >>> separate('Charmander,Squirtle,Bulbasaur')
    ['Charmander', 'Squirtle', 'Bulbasaur']
    >>> separate('a<>b<><>c', '<>', omit_empty=False)
    ['a', 'b', '', 'c']
    >>> separate('abc', '')
    ['a', 'b', 'c']

    Returns
    -------
    list of str
        The tokens, in the order they appear in `string`.
    """
    if separator is None:
        separator = CONFIG.separator

    if len(separator) == 1:
        # single pass over the characters
        tokens = string.split(separator)
    else:
        tokens = list(iter_separate(string, separator))

    if omit_empty:
        return list(filter(None, tokens))

    return tokens


# alias
sep = separate


def iter_separate(string, separator=None):
    """
    Generator that yields the segments of `string` between occurrences of
    `separator`. Empty segments are yielded. An empty separator yields each
    character of `string` in turn.
    """
    if separator is None:
        separator = CONFIG.separator

    if not separator:
        yield from string
        return

    size = len(separator)
    start = 0
    while (index := string.find(separator, start)) != -1:
        yield string[start:index]
        start = index + size

    # remainder (possibly empty) is the last token
    yield string[start:]


# ---------------------------------------------------------------------------- #
# Search

def find_all(string, substring):
    """
    Find the start offsets of all occurrences of `substring`, including
    overlapping ones.

    Parameters
    ----------
    string : str
        The string to search.
    substring : str
        The string to search for. The empty string matches once at every
        character position of `string`, ie. `len(string)` times.

    Examples
    --------
    >>> find_all('xxxx', 'xx')
    [0, 1, 2]

    Returns
    -------
    list of int
        Strictly increasing offsets.
    """
    return list(iter_find(string, substring))


def iter_find(string, substring):
    """Yield offsets of overlapping occurrences of `substring` in `string`."""
    if not substring:
        # one match per position, excluding the end of the string
        yield from range(len(string))
        return

    index = string.find(substring)
    while index != -1:
        yield index
        index = string.find(substring, index + 1)
