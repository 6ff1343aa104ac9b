
# third-party
import pytest

# local
from textops.testing import Expected, Throws, expected, mock
from textops.numeric import (is_float, is_integer, is_number, parse_float,
                             parse_int)


# ---------------------------------------------------------------------------- #

test_is_integer = Expected(is_integer)({
    mock.is_integer('0'):                           True,
    mock.is_integer('42'):                          True,
    mock.is_integer('-100'):                        True,
    mock.is_integer('007'):                         True,
    mock.is_integer('2147483647'):                  True,
    mock.is_integer('-2147483648'):                 True,
    mock.is_integer('2147483648'):                  False,
    mock.is_integer('-2147483649'):                 False,
    mock.is_integer('999999999999999999999'):       False,
    mock.is_integer('9' * 5000):                    False,
    mock.is_integer('2147483648', 64):              True,
    mock.is_integer('128', 8):                      False,
    mock.is_integer(''):                            False,
    mock.is_integer('-'):                           False,
    mock.is_integer('+1'):                          False,
    mock.is_integer('--1'):                         False,
    mock.is_integer('1-'):                          False,
    mock.is_integer(' 1'):                          False,
    mock.is_integer('1 '):                          False,
    mock.is_integer('1.0'):                         False,
    mock.is_integer('1e3'):                         False,
    mock.is_integer('0x10'):                        False,
    mock.is_integer('1_000'):                       False,
    mock.is_integer('١٢٣'):                         False,
})


test_is_float = Expected(is_float)({
    mock.is_float('1.5'):                           True,
    mock.is_float('-1.5'):                          True,
    mock.is_float('.2'):                            True,
    mock.is_float('-.2'):                           True,
    mock.is_float('5.'):                            True,
    mock.is_float('-0.0'):                          True,
    mock.is_float('1' * 300 + '.0'):                True,
    mock.is_float('1' * 400 + '.0'):                False,
    mock.is_float('0.' + '0' * 400 + '1'):          False,
    mock.is_float('1' * 40 + '.0', bits=32):        False,
    mock.is_float('7.0.0'):                         False,
    mock.is_float('7'):                             False,
    mock.is_float('1e3'):                           False,
    mock.is_float('1.0e3'):                         False,
    mock.is_float('.'):                             False,
    mock.is_float('-.'):                            False,
    mock.is_float('-'):                             False,
    mock.is_float(''):                              False,
    mock.is_float('+1.5'):                          False,
    mock.is_float(' 1.5'):                          False,
    mock.is_float('1. 5'):                          False,
    mock.is_float('nan'):                           False,
    mock.is_float('inf'):                           False,
    mock.is_float('1,5'):                           False,
    mock.is_float('1,5', ','):                      True,
    mock.is_float('1.5', ','):                      False,
})


@expected({
    # string        # result
    '-100':         True,
    '1.5':          True,
    '.2':           True,
    '7.0.0':        False,
    'abc':          False,
    '':             False,
})
def test_is_number(string, expected):
    assert is_number(string) is expected


# ---------------------------------------------------------------------------- #

test_parse_int = Expected(parse_int)({
    mock.parse_int('-100'):                 -100,
    mock.parse_int('007'):                  7,
    mock.parse_int('1.0'):                  Throws(ValueError),
    mock.parse_int('99999999999'):          Throws(OverflowError),
})


test_parse_float = Expected(parse_float)({
    mock.parse_float('-1.5'):               -1.5,
    mock.parse_float('.25'):                0.25,
    mock.parse_float('2,5', ','):           2.5,
    mock.parse_float('1'):                  Throws(ValueError),
    mock.parse_float('1' * 400 + '.0'):     Throws(OverflowError),
})


@pytest.mark.parametrize('string', ['1', '-3', '2.5', '.2'])
def test_is_number_any(string):
    assert is_number(string) == (is_integer(string) or is_float(string))


test_is_number_settings = Expected(is_number)({
    mock.is_number('1,5'):                          False,
    mock.is_number('1,5', ','):                     True,
    mock.is_number('1.5', ','):                     False,
    mock.is_number('3000000000'):                   False,
    mock.is_number('3000000000', integer_bits=64):  True,
    mock.is_number('1' * 40 + '.0'):                True,
    mock.is_number('1' * 40 + '.0', float_bits=32): False,
})
