
# std
import io as _io

# third-party
import pytest

# local
from textops import io
from textops.testing import Expected, mock


# ---------------------------------------------------------------------------- #
# Fixtures


@pytest.fixture(scope='session')
def filename(tmp_path_factory):
    """Generate a file with 10 numbered lines for testing"""
    filename = tmp_path_factory.getbasetemp() / 'testfile.txt'
    with filename.open('w') as fp:
        for i in range(10):
            fp.write(f'{i}\n')
    return filename


# ---------------------------------------------------------------------------- #

test_count_lines = Expected(io.count_lines)({
    mock.count_lines('firstline\nsecondline\nthirdline\n'):     3,
    mock.count_lines('firstline\nsecondline\nthirdline'):       3,
    mock.count_lines(''):                                       0,
    mock.count_lines('\n'):                                     1,
    mock.count_lines('\n\n'):                                   2,
    mock.count_lines('one line'):                               1,
    mock.count_lines('a\r\nb\r\n', '\r\n'):                     2,
})


def test_read_text(filename):
    assert io.read_text(filename) == ''.join(f'{i}\n' for i in range(10))
    assert io.read_text(str(filename)).startswith('0\n1\n')


def test_read_text_stream():
    assert io.read_text(_io.StringIO('streamed\ntext')) == 'streamed\ntext'


def test_count_file_lines(filename):
    assert io.count_file_lines(filename) == 10
    assert io.count_file_lines(_io.StringIO('a\nb')) == 2


def test_missing_file(tmp_path):
    path = tmp_path / 'loonymcfloonyloo.txt'
    with pytest.raises(io.ResourceUnavailable) as info:
        io.read_text(path)

    assert isinstance(info.value.__cause__, FileNotFoundError)

    with pytest.raises(OSError):
        io.count_file_lines(path)


def test_undecodable_file(tmp_path):
    path = tmp_path / 'binary.dat'
    path.write_bytes(b'\xff\xfe\xfa')
    with pytest.raises(io.ResourceUnavailable):
        io.read_text(path)


def test_invalid_source():
    with pytest.raises(TypeError):
        io.read_text(42)
