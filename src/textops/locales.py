"""
Locale provider and whitespace classification.

A locale here is a plain value object that bundles the few properties the
text functions need: which characters count as whitespace, how many code
units the character space spans, and the decimal point character. Nothing in
this module touches the process-wide state of the standard library `locale`
module.
"""


# std
import sys
import string
import functools as ftl

# third-party
from loguru import logger

# relative
from .config import CONFIG


# ---------------------------------------------------------------------------- #
BYTE_UNITS = 256
UNICODE_UNITS = sys.maxunicode + 1

# registry of known locales
LOCALES = {}


# ---------------------------------------------------------------------------- #

def c_isspace(char):
    """Whitespace predicate of the C locale: space, \\t, \\n, \\v, \\f, \\r."""
    return char in string.whitespace


class Locale:
    """
    Immutable description of the character classification for a named locale.
    """

    __slots__ = ('name', 'isspace', 'units', 'decimal_point')

    def __init__(self, name, isspace=c_isspace, units=BYTE_UNITS,
                 decimal_point='.'):

        if len(decimal_point) != 1:
            raise ValueError(f'Decimal point should be a single character, not '
                             f'{decimal_point!r}.')

        for attr, value in dict(name=str(name), isspace=isspace,
                                units=int(units),
                                decimal_point=decimal_point).items():
            object.__setattr__(self, attr, value)

    def __setattr__(self, key, value):
        raise AttributeError(f'{type(self).__name__} objects are immutable.')

    def __repr__(self):
        return f'{type(self).__name__}({self.name!r})'

    def __eq__(self, other):
        if isinstance(other, Locale):
            return self._key() == other._key()
        return NotImplemented

    def __hash__(self):
        return hash(self._key())

    def _key(self):
        return (self.name, self.isspace, self.units, self.decimal_point)

    def code_units(self):
        """Iterate through every representable character in this locale."""
        return map(chr, range(self.units))


def register_locale(name, isspace=c_isspace, units=BYTE_UNITS,
                    decimal_point='.'):
    """
    Add a locale to the registry, replacing any existing locale with the same
    name.

    Parameters
    ----------
    name : str
        Locale name, eg. 'de_DE.UTF-8'.
    isspace : callable
        Predicate that returns True for whitespace characters.
    units : int, optional
        Size of the code space to classify, by default 256 (single bytes).
    decimal_point : str, optional
        Character separating the integer and fractional part of numbers, by
        default '.'.

    Returns
    -------
    Locale
    """
    LOCALES[name] = locale = Locale(name, isspace, units, decimal_point)
    logger.debug('Registered locale {!r}.', name)
    return locale


def get_locale(name=None):
    """
    Resolve a locale name. If `name` is None, the locale from the package
    configuration is used. `Locale` instances are passed through.

    Raises
    ------
    ValueError
        If the locale is not known.
    """
    if isinstance(name, Locale):
        return name

    if name is None:
        name = CONFIG.locale

    if name in LOCALES:
        return LOCALES[name]

    raise ValueError(f'Unknown locale {name!r}. Known locales are: '
                     f'{", ".join(map(repr, LOCALES))}. Use `register_locale`'
                     ' to add new ones.')


# ---------------------------------------------------------------------------- #

def whitespace_set(locale=None):
    """
    The set of all characters that `locale` considers to be whitespace.

    The table is built by testing every code unit in the locale's code space
    once. Results are cached per locale, so repeated calls are cheap and
    always return the same (immutable) set.

    Parameters
    ----------
    locale : str or Locale, optional
        The locale, by default the one from the package configuration.

    Examples
    --------
    >>> sorted(whitespace_set('C'))
    ['\\t', '\\n', '\\x0b', '\\x0c', '\\r', ' ']

    Returns
    -------
    frozenset of str
    """
    return _whitespace_set(get_locale(locale))


@ftl.lru_cache()
def _whitespace_set(locale):
    chars = frozenset(filter(locale.isspace, locale.code_units()))
    logger.debug('Built whitespace table for {}: {} of {} code units.',
                 locale, len(chars), locale.units)
    return chars


def whitespace_string(locale=None):
    """All whitespace characters of `locale`, in code point order, as a str."""
    return _whitespace_string(get_locale(locale))


@ftl.lru_cache()
def _whitespace_string(locale):
    return ''.join(sorted(_whitespace_set(locale)))


def decimal_point(locale=None):
    return get_locale(locale).decimal_point


# ---------------------------------------------------------------------------- #
# Built-in locales

for _name in ('C', 'POSIX'):
    register_locale(_name)

for _name in ('C.UTF-8', 'unicode'):
    register_locale(_name, str.isspace, UNICODE_UNITS)
