"""
Table driven tests.

`Expected` turns a table of calls and their expected results into a single
parametrized pytest test:

>>> from textops.testing import ECHO, Expected, Throws, mock
>>> test_trim = Expected(trim)({
...     mock.trim('[[ok]]', 2):     'ok',
...     mock.trim('[[ok]]', -1):    ECHO,
...     mock.trim('[[ok]]', 'x'):   Throws(ValueError)
... })

Each row runs as its own test case, identified by its call arguments. Assign
the result to a name starting with 'test_' so that pytest collects it.
"""

# std
import difflib
from inspect import signature
from collections import abc
from contextlib import nullcontext

# third-party
import pytest
from loguru import logger


# ---------------------------------------------------------------------------- #
MAX_ID_SIZE = 60


# ---------------------------------------------------------------------------- #
# Recording calls

class Call:
    """The positional and keyword arguments of a single call."""

    __slots__ = ('args', 'kws')

    def __init__(self, *args, **kws):
        self.args = args
        self.kws = kws

    def __iter__(self):
        yield self.args
        yield self.kws

    def __repr__(self):
        params = [*map(repr, self.args),
                  *(f'{key}={val!r}' for key, val in self.kws.items())]
        return f'({", ".join(params)})'


class Mock:
    """
    Records call arguments. Any attribute records a call, so that table rows
    can be written as `mock.func(1, key=2)` to read like the call under test.
    """

    def __getattr__(self, _):
        return Call

    def __call__(self, *args, **kws):
        return Call(*args, **kws)


mock = Mock()


# ---------------------------------------------------------------------------- #
# Expected outcomes

class Throws:
    def __init__(self, error=Exception):
        self.error = error


class Warns:
    def __init__(self, warning=UserWarning):
        self.warning = warning


class ECHO:
    """The call should return its first argument."""


class PASS:
    """Any result is accepted, as long as the call does not raise."""


def _outcome(result):
    if isinstance(result, Throws):
        return pytest.raises(result.error)

    if isinstance(result, Warns):
        return pytest.warns(result.warning)

    return nullcontext()


# ---------------------------------------------------------------------------- #

def _as_call(spec):
    if isinstance(spec, Call):
        return spec

    # a tuple holds positional arguments, anything else is the only one
    return Call(*spec) if isinstance(spec, tuple) else Call(spec)


def iter_cases(cases):
    """
    Yield `(Call, result)` pairs from a mapping of calls to results, or from a
    sequence of `(arguments, result)` pairs.
    """
    items = cases.items() if isinstance(cases, abc.Mapping) else cases
    for item in items:
        if not (isinstance(item, tuple) and len(item) == 2):
            raise ValueError(f'Require an expected result to test against, '
                             f'not only the arguments {item!r}.')

        spec, result = item
        yield _as_call(spec), result


def _case_id(call):
    text = repr(call)
    if len(text) > MAX_ID_SIZE:
        return text[:MAX_ID_SIZE - 3] + '...'
    return text


def _mismatch(name, answer, expected):
    message = (f'Result from {name!r} differs from the expected value.'
               f'\nRESULT:   {answer!r}'
               f'\nEXPECTED: {expected!r}')

    if isinstance(answer, str) and isinstance(expected, str):
        diff = difflib.ndiff([repr(answer)], [repr(expected)])
        message += '\nDIFF:\n' + '\n'.join(diff)

    return message


# ---------------------------------------------------------------------------- #

class Expected:
    """
    Build a parametrized test for `func` from a table of cases.

    Parameters
    ----------
    func : callable
        The function under test.
    left_transform, right_transform : callable, optional
        Applied to the actual and the expected result before comparing.
    transform : callable, optional
        Applied to both results. Overrides the individual transforms.
    """

    def __init__(self, func, left_transform=None, right_transform=None,
                 transform=None):
        self.func = func
        self.sig = signature(func)
        self.left = transform or left_transform
        self.right = transform or right_transform

    def __call__(self, cases, **kws):
        """
        Create the test for `cases`.

        Parameters
        ----------
        cases : dict or iterable
            Mapping from calls (constructed with `mock`, or plain argument
            tuples) to expected results, or a sequence of (arguments,
            expected) pairs.
        **kws
            Passed to `pytest.mark.parametrize`.

        Returns
        -------
        function
            The parametrized test.
        """
        calls, rows = [], []
        for call, result in iter_cases(cases):
            calls.append(call)
            rows.append(self.bind(call, result))

        if not rows:
            raise ValueError(f'No test cases given for {self.func.__name__!r}.')

        kws.setdefault('ids', list(map(_case_id, calls)))
        logger.debug('Parametrizing test for {!r} with {} cases.',
                     self.func.__name__, len(rows))
        return pytest.mark.parametrize('args, kws, expected', rows, **kws)(
            self.make_test()
        )

    def bind(self, call, result):
        # check the call against the signature before any test runs
        bound = self.sig.bind(*call.args, **call.kws)
        if result is ECHO:
            bound.apply_defaults()
            result = next(iter(bound.arguments.values()))

        return bound.args, bound.kwargs, result

    def make_test(self):
        func = self.func
        left, right = self.left, self.right

        def test(args, kws, expected):
            with _outcome(expected) as outcome:
                answer = func(*args, **kws)

            if expected is PASS or outcome is not None:
                return

            if left:
                answer = left(answer)
            if right:
                expected = right(expected)

            assert answer == expected, \
                _mismatch(func.__name__, answer, expected)

        test.__doc__ = f'Table driven test for {func.__name__!r}.'
        return test


def expected(cases, **kws):
    """
    Decorator that parametrizes an existing test function from a table. The
    test receives the call arguments by name, and the result as `expected`.

    Examples
    --------
    >>> @expected({
    ...      # string   # point     # result
    ...      ('1.5',    '.'):       True,
    ...      ('1,5',    ','):       True,
    ...      ('1,5',    '.'):       False
    ... })
    ... def test_is_float(string, point, expected):
    ...     assert is_float(string, point) is expected
    """

    def decorator(test):
        sig = signature(test)
        names = list(sig.parameters)
        rows = []
        for call, result in iter_cases(cases):
            bound = sig.bind(*call.args, **call.kws, expected=result)
            bound.apply_defaults()
            rows.append([bound.arguments[name] for name in names])

        return pytest.mark.parametrize(names, rows, **kws)(test)

    return decorator
