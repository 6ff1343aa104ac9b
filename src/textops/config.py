"""
Package configuration: defaults shipped with the source, optionally overridden
by a user config file.
"""


# std
from pathlib import Path
from warnings import warn

# third-party
from loguru import logger
from platformdirs import user_config_path


# ---------------------------------------------------------------------------- #
CACHE = {}
FILENAME = 'config.yaml'
DEFAULTS = Path(__file__).parent / FILENAME


# Load
# ---------------------------------------------------------------------------- #

def load_yaml(filename):
    import yaml

    with filename.open('r') as file:
        return yaml.safe_load(file) or {}


CONFIG_PARSERS = {
    'yaml': load_yaml,
    'yml': load_yaml,
}


def load(filename):
    filename = Path(filename)
    if filename not in CACHE:
        CACHE[filename] = _load(filename)

    return CACHE[filename]


def _load(filename):
    if (path := Path(filename)).exists():
        return CONFIG_PARSERS[path.suffix.lstrip('.')](path)

    raise FileNotFoundError(f"Non-existent file: '{filename!s}'")


def user_config_file(pkg='textops', filename=FILENAME):
    """
    Location of the (optional) user config file for package `pkg`.

    Returns
    -------
    Path
        The path to the file, which need not exist.
    """
    return user_config_path(pkg) / filename


# Node
# ---------------------------------------------------------------------------- #

class ConfigNode(dict):
    """
    Dictionary with attribute access to its (string) keys.
    """

    @classmethod
    def load(cls, filename=None, defaults=DEFAULTS):
        """
        Load the `defaults` file and merge the (optional) user config file
        `filename` on top. A user file whose content is not a mapping is
        ignored with a warning.
        """
        if not (filename or defaults):
            raise ValueError('Need at least one of `filename` or `defaults`.')

        config = dict(load(defaults)) if defaults else {}
        if filename and Path(filename).exists():
            logger.info("Found user config file at '{}'.", filename)
            user = load(filename)
            if isinstance(user, dict):
                config.update(user)
            else:
                warn(f"Ignoring user config file '{filename!s}': expected a "
                     f"mapping of settings, found {type(user).__name__!r}.")
        return cls(config)

    def __getattr__(self, key):
        """
        Try to get the value in the dict associated with key `key`. If `key`
        is not a key in the dict, try get the attribute from the parent class.
        """
        return self[key] if key in self else super().__getattribute__(key)


# ---------------------------------------------------------------------------- #
CONFIG = ConfigNode.load(user_config_file())
