# Flexibly parametrize functional tests

"""
Tools to help building parametrized unit tests

Examples
--------
To generate a bunch of tests with various call signatures of the function
`trim`, use
>>> from xstring.testing import Expected, mock
>>> test_trim = Expected(trim)(
...     {mock.trim('  hi  '):               'hi',
...      mock.trim('xxhixx', 'left', 'x'):  'hixx',
...      mock.trim('  hi  ', mode='r'):     '  hi'}
... )

This will generate the same tests as the following code block, but is arguably
much neater
>>> @pytest.mark.parametrize(
...     'args, kws, expected',
...     [(('  hi  ',), {}, 'hi'),
...      (('xxhixx', 'left', 'x'), {}, 'hixx'),
...      (('  hi  ',), {'mode': 'r'}, '  hi')]
... )
... def test_trim(args, kws, expected):
...     assert trim(*args, **kws) == expected
"""

# std
import difflib
from contextlib import nullcontext
from collections import abc

# third-party
import pytest

# relative
from .logging import LoggingMixin


# ---------------------------------------------------------------------------- #

def to_tuple(obj):
    return obj if isinstance(obj, tuple) else (obj, )


def get_hashable_args(*args, **kws):
    return args, tuple(kws.items())


def echo(obj):
    return obj


def show_diff(actual, expected):
    """
    Diff helper function. Returns a string containing the unified diff of two
    multiline strings.
    """

    return '\n'.join(difflib.ndiff(actual.splitlines(True),
                                   expected.splitlines(True)))


# ---------------------------------------------------------------------------- #

class WrapArgs:
    def __init__(self, *args, **kws):
        self.args, self.kws = get_hashable_args(*args, **kws)

    def __iter__(self):
        return iter((self.args, self.kws))

    def __str__(self):
        args = ', '.join((*map(repr, self.args),
                          *(f'{key}={val!r}' for key, val in self.kws)))
        return f'({args})'


class Mock:
    def __getattr__(self, _):
        return WrapArgs

    def __call__(self, *args, **kws):
        return WrapArgs(*args, **kws)


mock = Mock()


class Throws:
    def __init__(self, error=Exception):
        self.error = error


class PASS:
    """
    Signify that any result from a test is permissable, as long as it passes
    without exception.
    """


# ---------------------------------------------------------------------------- #

class Expected(LoggingMixin):
    """
    Testing helper for checking expected return values for functions. Allows
    one to build simple paramertized tests from a mapping of call signatures
    to expected results.

    >>> from xstring.testing import Expected, mock
    >>> test_split = Expected(split)(
    ...     {mock.split('a b'):         ['a', 'b'],
    ...      mock.split('a,,b', ','):   ['a', 'b']}
    ... )

    Assigning the output to a variable name starting with 'test_' is important
    for pytest test discovery to work correctly. Expected exceptions are
    specified with `Throws(ExceptionType)` in place of a result.
    """

    def __init__(self, func, transform=echo):
        self.func = func
        self.transform = transform

    def __call__(self, cases, transform=None, **kws):
        """
        Create the test function and parametrize it.

        Parameters
        ----------
        cases : dict or iterable of 2-tuples
            Mapping from call signatures (`mock.func(*args, **kws)` or plain
            tuples of positional arguments) to expected results.
        transform : callable, optional
            Applied to the result of the function before comparison.

        Returns
        -------
        function
            The parametrized test.
        """
        transform = transform or self.transform

        if isinstance(cases, abc.Mapping):
            cases = cases.items()

        argspecs, values = [], []
        for spec, expected in cases:
            if not isinstance(spec, WrapArgs):
                # simple construction without use of mock function.
                spec = WrapArgs(*to_tuple(spec))

            args, kws_ = spec
            argspecs.append(str(spec))
            values.append((args, dict(kws_), expected))

        test = self.make_test(transform)
        return pytest.mark.parametrize('args, kws, expected', values,
                                       ids=argspecs, **kws)(test)

    def run(self, items, **kws):
        """
        For simple tests, merely check if the function succeeds.
        """
        return self(zip(items, [PASS] * len(items)), **kws)

    def make_test(self, transform):
        # -------------------------------------------------------------------- #
        def test(args, kws, expected):
            #
            self.logger.debug('passing to {:s}: {!s}; {!s}',
                              self.func.__name__, args, kws)

            ctx = nullcontext()
            if isinstance(expected, Throws):
                ctx = pytest.raises(expected.error)

            with ctx:
                answer = transform(self.func(*args, **kws))

            if (expected is PASS) or not isinstance(ctx, nullcontext):
                return

            # NOTE: explicitly assigning answer here so that pytest
            # introspection of locals in this scope works when producing the
            # failure report
            if answer == expected:
                return

            message = (f'Result from function {self.func.__name__} is not '
                       f'equal to expected answer!'
                       f'\nRESULT:  \n{answer!r}'
                       f'\nEXPECTED:\n{expected!r}')
            if isinstance(answer, str) and isinstance(expected, str):
                diff_string = show_diff(repr(answer), repr(expected))
                message += f'\nDIFF\n{diff_string}'

            raise AssertionError(message)

        # -------------------------------------------------------------------- #
        test.__name__ = f'test_{self.func.__name__}'
        return test
