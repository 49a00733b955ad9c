"""
Search, compare and replace, with optional case folding and windowing.

Every search accepts a window `(offset, length)` restricting the part of the
text that is searched, where `length=None` means "to the end of the text".
Reported offsets are relative to the start of the window, not the start of the
text:

>>> find('Hello World', 'o', offset=5)
2

A search that finds nothing returns the sentinel `NPOS` rather than raising.
Case insensitive searches lower case both the window and the needle (ASCII
only) before matching.
"""

# std
import numbers
from collections import namedtuple

# third-party
import more_itertools as mit
from loguru import logger

# relative
from .casing import to_lower
from .charclass import opposite_case, resolve_charset
from .errors import OutOfRange, check_char, check_type


# ---------------------------------------------------------------------------- #
# sentinel offset for failed searches
NPOS = -1


# ---------------------------------------------------------------------------- #
class Window(namedtuple('Window', ('offset', 'length'), defaults=(0, None))):
    """
    Sub-range of a string identified by an offset and a length. A `length` of
    None extends the window to the end of the string.
    """

    __slots__ = ()

    def apply(self, text):
        """
        Slice the window out of `text`.

        Raises
        ------
        OutOfRange
            If the offset lies past the end of the string.
        """
        offset, length = self
        check_type(text, str)
        check_type(offset, numbers.Integral, 'offset')

        size = len(text)
        if not 0 <= offset <= size:
            raise OutOfRange(offset, size, 'offset')

        if length is None:
            return text[offset:]

        check_type(length, numbers.Integral, 'length')
        if length < 0:
            raise ValueError(f'Window length should be non-negative, not '
                             f'{length}.')

        # lengths that run past the end are clamped by slicing
        return text[offset:offset + length]


def window(text, offset=0, length=None):
    return Window(offset, length).apply(text)


def _prepare(text, needle, case_sensitive, offset, length):
    haystack = window(text, offset, length)
    if case_sensitive:
        return haystack, needle
    return to_lower(haystack), to_lower(needle)


def _prepare_set(text, chars, case_sensitive, offset, length):
    chars = resolve_charset(chars)
    haystack = window(text, offset, length)
    if case_sensitive:
        return haystack, chars
    return to_lower(haystack), frozenset(map(to_lower, chars))


# ---------------------------------------------------------------------------- #
# Substring search

def find(text, needle, case_sensitive=True, offset=0, length=None):
    """
    Offset of the first occurrence of `needle` in the window of `text`.

    Parameters
    ----------
    text : str
        The string to search.
    needle : str
        The substring (or character) to find.
    case_sensitive : bool, optional
        Whether matching is case sensitive, by default True.
    offset : int, optional
        Start of the search window, by default 0.
    length : int, optional
        Length of the search window, by default None (to the end).

    Examples
    --------
    >>> find('Hello World', 'WORLD', False)
    6
    >>> find('Hello World', 'WORLD')
    -1

    Returns
    -------
    int
        Offset relative to the start of the window, or `NPOS`.
    """
    check_type(needle, str, 'needle')
    haystack, needle = _prepare(text, needle, case_sensitive, offset, length)
    return haystack.find(needle)


def rfind(text, needle, case_sensitive=True, offset=0, length=None):
    """Offset of the last occurrence of `needle` in the window of `text`."""
    check_type(needle, str, 'needle')
    haystack, needle = _prepare(text, needle, case_sensitive, offset, length)
    return haystack.rfind(needle)


# alias
r_find = rfind


# ---------------------------------------------------------------------------- #
# Character set search

def find_first_of(text, chars, case_sensitive=True, offset=0, length=None):
    """
    Offset of the first character in the window of `text` that is in the set
    `chars`.

    >>> find_first_of('hello world', 'ow')
    4
    """
    haystack, chars = _prepare_set(text, chars, case_sensitive, offset, length)
    return next(mit.locate(haystack, chars.__contains__), NPOS)


def find_last_of(text, chars, case_sensitive=True, offset=0, length=None):
    """
    Offset of the last character in the window of `text` that is in the set
    `chars`.
    """
    haystack, chars = _prepare_set(text, chars, case_sensitive, offset, length)
    return next(mit.rlocate(haystack, chars.__contains__), NPOS)


def find_first_not_of(text, chars, case_sensitive=True, offset=0, length=None):
    """
    Offset of the first character in the window of `text` that is not in the
    set `chars`.

    >>> find_first_not_of('  hi', ' ')
    2
    """
    haystack, chars = _prepare_set(text, chars, case_sensitive, offset, length)
    return next(mit.locate(haystack, lambda char: char not in chars), NPOS)


def find_last_not_of(text, chars, case_sensitive=True, offset=0, length=None):
    haystack, chars = _prepare_set(text, chars, case_sensitive, offset, length)
    return next(mit.rlocate(haystack, lambda char: char not in chars), NPOS)


# ---------------------------------------------------------------------------- #
# Comparison

def compare(a, b, case_sensitive=True,
            offset_a=0, length_a=None, offset_b=0, length_b=None):
    """
    Three-way lexicographic comparison of a window of `a` with a window of `b`.

    Parameters
    ----------
    a, b : str
        Strings to compare.
    case_sensitive : bool, optional
        Whether the comparison is case sensitive, by default True.
    offset_a, length_a : int, optional
        Window of `a` to compare. By default the whole string.
    offset_b, length_b : int, optional
        Window of `b` to compare. By default the whole string.

    Examples
    --------
    >>> compare('abc', 'abd'), compare('abc', 'ab'), compare('abc', 'abc')
    (-1, 1, 0)
    >>> compare('ABC', 'abc', False)
    0

    Returns
    -------
    int
        -1, 0 or 1 if the window of `a` sorts before, equal to, or after the
        window of `b`. A window that is a proper prefix of the other sorts
        first.
    """
    a = window(a, offset_a, length_a)
    b = window(b, offset_b, length_b)
    if not case_sensitive:
        a, b = to_lower(a), to_lower(b)

    return (a > b) - (a < b)


# ---------------------------------------------------------------------------- #
# Counting and replacement

def count(text, char, case_sensitive=True):
    """
    Count the occurrences of the character `char` in `text`. Case insensitive
    counts include the opposite case of ASCII letters.

    >>> count('Banana', 'b', False)
    1
    """
    check_type(text, str)
    check_char(char)

    n = text.count(char)
    if case_sensitive or (other := opposite_case(char)) == char:
        return n

    return n + text.count(other)


def find_and_replace(text, needle, replacement, case_sensitive=True):
    """
    Replace every occurrence of `needle` in `text` with `replacement`.

    The text is scanned left to right. After each replacement the scan resumes
    immediately after the inserted replacement, so the replacement is never
    rescanned. This bounds the number of replacements by the length of the
    text even when `replacement` contains `needle`:

    >>> find_and_replace('aaa', 'a', 'aa')
    'aaaaaa'

    Parameters
    ----------
    text : str
        Source string.
    needle : str
        Substring to replace. If empty, `text` is returned unchanged.
    replacement : str
        Substituted for each occurrence of `needle`.
    case_sensitive : bool, optional
        Whether matching `needle` is case sensitive, by default True.

    Examples
    --------
    >>> find_and_replace('Hello hello', 'HELLO', 'bye', False)
    'bye bye'

    Returns
    -------
    str
    """
    check_type(text, str)
    check_type(needle, str, 'needle')
    check_type(replacement, str, 'replacement')

    if not needle:
        return text

    haystack, target = (text, needle) if case_sensitive else \
        (to_lower(text), to_lower(needle))

    parts = []
    start = 0
    while (pos := haystack.find(target, start)) != NPOS:
        parts.extend((text[start:pos], replacement))
        start = pos + len(needle)

    parts.append(text[start:])
    logger.debug('Replaced {} occurrence(s) of {!r} with {!r}.',
                 len(parts) // 2, needle, replacement)
    return ''.join(parts)
