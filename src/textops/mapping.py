"""
Convert between delimited key-value strings and dictionaries.
"""

# relative
from .split import separate
from .trim import remove_whitespace


# ---------------------------------------------------------------------------- #

def mapify(string, key_value_separator=':', pair_separator=',',
           ignore_whitespace=True):
    """
    Parse a string of delimited key-value pairs into a dictionary.

    Parameters
    ----------
    string : str
        Text like 'a:1,b:2'.
    key_value_separator : str, optional
        Separates each key from its value, by default ':'.
    pair_separator : str, optional
        Separates the key-value pairs, by default ','.
    ignore_whitespace : bool, optional
        Remove all whitespace from `string` before parsing, by default True.

    Examples
    --------
    >>> mapify('Warsim: Huw Milward, CultGame: Jeff Stevens')
    {'Warsim': 'HuwMilward', 'CultGame': 'JeffStevens'}
    >>> mapify('x=1;y;z=3=4', '=', ';')
    {'x': '1', 'y': '', 'z': '3'}

    Returns
    -------
    dict
        Keys without a value map to the empty string. Fields following the
        value are ignored, and later duplicate keys replace earlier ones.
    """
    if ignore_whitespace:
        string = remove_whitespace(string)

    mapping = {}
    for pair in separate(string, pair_separator):
        if fields := separate(pair, key_value_separator):
            key, *value = fields
            mapping[key] = value[0] if value else ''

    return mapping


def stringify(mapping, key_value_separator=':', pair_separator=','):
    """
    Render a mapping as a string of delimited key-value pairs. The inverse of
    `mapify`.

    Examples
    --------
    >>> stringify({'a': 1, 'b': 2})
    'a:1,b:2'
    """
    return pair_separator.join(f'{key}{key_value_separator}{value}'
                               for key, value in dict(mapping).items())
