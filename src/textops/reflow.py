"""
Greedy reflow of text to a fixed line width.
"""


# std
from warnings import warn

# third-party
import more_itertools as mit

# relative
from .config import CONFIG
from .split import separate
from .locales import whitespace_set


# ---------------------------------------------------------------------------- #

class InvalidArgument(ValueError):
    """Raised when an argument lies outside the domain of a function."""


# ---------------------------------------------------------------------------- #

def wrap_to_width(string, width, whitespace=None, locale=None, newline=None):
    """
    Wrap text so that no line is longer than `width` characters.

    Existing line breaks are treated as paragraph boundaries and are kept one
    for one. Each line is broken greedily at the last whitespace character
    that fits, or hard-broken at `width` if it contains no such character. The
    whitespace character at a break is consumed. No terminating newline is
    added, except when the final line of the text ends in a hard break whose
    remainder fills the width exactly.

    Parameters
    ----------
    string : str
        Text to wrap.
    width : int
        Maximal line width. A width of 0 fits no characters, so the result is
        empty (a warning is issued for non-empty input).
    whitespace : collection of str, optional
        Characters at which lines may be broken. By default the whitespace set
        of `locale` is used.
    locale : str or Locale, optional
        Locale used for classifying whitespace when `whitespace` is not given.
    newline : str, optional
        Line terminator, by default the configured one ('\\n').

    Examples
    --------
    >>> wrap_to_width('111222333', 3)
    '111\\n222\\n333\\n'
    >>> wrap_to_width('111112', 5)
    '11111\\n2'
    >>> wrap_to_width('the quick brown fox', 10)
    'the quick\\nbrown fox'
    >>> wrap_to_width('aaa bbb', 3)
    'aaa\\nbbb'

    Returns
    -------
    str
        The wrapped text.

    Raises
    ------
    InvalidArgument
        If `width` is negative or `newline` is empty.
    """
    width = int(width)
    if width < 0:
        raise InvalidArgument(
            f'Line width should be a non-negative integer, not {width}.'
        )

    if width == 0:
        if string:
            warn('Cannot fit any characters on a line of width 0. Returning an'
                 ' empty string.')
        return ''

    if newline is None:
        newline = CONFIG.newline

    if not newline:
        raise InvalidArgument('Line terminator should be a non-empty string.')

    if whitespace is None:
        whitespace = whitespace_set(locale)

    lines = separate(string, newline, omit_empty=False)
    paragraphs = [_wrap(line, width, whitespace) for line in lines]
    text = newline.join(newline.join(segments) for segments, _ in paragraphs)

    # a full-width remainder of a hard-broken line closes its row
    segments, hard = paragraphs[-1]
    if hard and len(segments[-1]) == width:
        text += newline

    return text


def _wrap(line, width, whitespace):
    # Returns the segments of `line`, and whether the last break was a hard one
    segments, hard = [], False
    while len(line) > width:
        # rightmost break point that fits. Offset 0 is excluded so that we
        # always make progress without emitting an empty line
        breaks = (i for i in range(width, 0, -1) if line[i] in whitespace)
        index = mit.first(breaks, None)
        hard = index is None
        if hard:
            segments.append(line[:width])
            line = line[width:]
        else:
            segments.append(line[:index])
            line = line[index + 1:]

    # whitespace consumed by the last break leaves nothing behind
    if line or not segments:
        segments.append(line)

    return segments, hard
