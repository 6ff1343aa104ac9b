"""
Obtain text from files and streams, and count lines.
"""


# std
import io
import contextlib as ctx
from pathlib import Path

# third-party
from loguru import logger

# relative
from .config import CONFIG
from .split import separate


# ---------------------------------------------------------------------------- #

class ResourceUnavailable(OSError):
    """Raised when the text source cannot be read."""


# ---------------------------------------------------------------------------- #

def open_any(filelike, mode='r', **kws):
    # handle stream
    if isinstance(filelike, io.IOBase):
        return ctx.nullcontext(filelike)

    if isinstance(filelike, (str, Path)):
        return open(str(filelike), mode, **kws)

    raise TypeError(f'Invalid file-like object of type {type(filelike)}.')


def read_text(filelike, encoding='utf-8'):
    """
    Read the full content of a text file or stream into memory.

    Parameters
    ----------
    filelike : str or Path or io.IOBase
        File system location of the file to read, or an open text stream.
    encoding : str, optional
        Text encoding for files, by default 'utf-8'. Ignored for streams.

    Returns
    -------
    str

    Raises
    ------
    ResourceUnavailable
        If the file does not exist or cannot be read.
    """
    kws = {} if isinstance(filelike, io.IOBase) else {'encoding': encoding}
    try:
        with open_any(filelike, **kws) as stream:
            text = stream.read()
    except (OSError, UnicodeDecodeError) as err:
        raise ResourceUnavailable(f'Could not read text from {filelike!s}: '
                                  f'{err}') from err

    logger.debug('Read {} characters from {!s}.', len(text), filelike)
    return text


def count_lines(string, newline=None):
    """
    Count the lines in `string` the way a line reader would: a trailing line
    terminator does not start a new line.

    Examples
    --------
    >>> count_lines('first\\nsecond\\nthird\\n')
    3
    >>> count_lines('')
    0
    """
    newline = newline or CONFIG.newline
    lines = separate(string, newline, omit_empty=False)
    return len(lines) - (not lines[-1])


def count_file_lines(filelike, encoding='utf-8'):
    """Count the lines in a text file or stream. See `count_lines`."""
    return count_lines(read_text(filelike, encoding))
