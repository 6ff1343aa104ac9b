
# std
from pathlib import Path

# third-party
import pytest

# local
from textops import config
from textops.config import CONFIG, ConfigNode


# ---------------------------------------------------------------------------- #

def test_defaults():
    defaults = config.load(config.DEFAULTS)
    assert defaults['locale'] == 'C'
    assert defaults['separator'] == ','
    assert defaults['newline'] == '\n'
    assert defaults['integer_bits'] == 32
    assert defaults['float_bits'] == 64


def test_config_attribute_access():
    assert CONFIG.separator == CONFIG['separator']
    with pytest.raises(AttributeError):
        CONFIG.no_such_key


def test_load_cached():
    assert config.load(config.DEFAULTS) is config.load(str(config.DEFAULTS))


def test_load_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        config.load(tmp_path / 'missing.yaml')


def test_user_override(tmp_path):
    user = tmp_path / 'config.yaml'
    user.write_text('locale: unicode\nseparator: ";"\n')

    node = ConfigNode.load(user)
    assert node.locale == 'unicode'
    assert node.separator == ';'
    # untouched defaults
    assert node.newline == '\n'
    # defaults are not modified by the override
    assert config.load(config.DEFAULTS)['locale'] == 'C'


def test_user_config_file():
    path = config.user_config_file()
    assert isinstance(path, Path)
    assert path.name == 'config.yaml'
    assert 'textops' in path.parts


def test_load_needs_a_file():
    with pytest.raises(ValueError):
        ConfigNode.load(None, defaults=None)


@pytest.mark.parametrize('content', ['- C\n- unicode\n', 'just text\n'])
def test_user_config_not_a_mapping(tmp_path, content):
    user = tmp_path / 'config.yaml'
    user.write_text(content)

    with pytest.warns(UserWarning, match='Ignoring user config file'):
        node = ConfigNode.load(user)

    # defaults survive
    assert node.locale == 'C'
    assert node.separator == ','


def test_user_config_empty(tmp_path):
    user = tmp_path / 'config.yaml'
    user.write_text('')
    assert ConfigNode.load(user) == config.load(config.DEFAULTS)
