"""
Trim characters from the ends of a string.
"""

# std
from enum import IntEnum

# relative
from .errors import check_type
from .charclass import PUNCTUATION, WHITESPACE, resolve_charset


# ---------------------------------------------------------------------------- #
class Trim(IntEnum):
    """Which end(s) of the string to trim."""

    LEFT = L = -1
    BOTH = ALL = 0
    RIGHT = R = 1

    @classmethod
    def _missing_(cls, mode):

        if mode is None:
            return cls.BOTH

        if isinstance(mode, str):
            return cls.__members__.get(mode.upper())


# ---------------------------------------------------------------------------- #

def ltrim(text, chars=WHITESPACE):
    """Remove leading characters in the set `chars` from `text`."""
    return check_type(text, str).lstrip(''.join(resolve_charset(chars)))


def rtrim(text, chars=WHITESPACE):
    """Remove trailing characters in the set `chars` from `text`."""
    return check_type(text, str).rstrip(''.join(resolve_charset(chars)))


def trim(text, mode=Trim.BOTH, chars=WHITESPACE):
    """
    Remove leading and/or trailing characters that belong to the set `chars`.

    Parameters
    ----------
    text : str
        String to trim.
    mode : Trim or str, optional
        One of `Trim.LEFT`, `Trim.RIGHT` or `Trim.BOTH` (the default). The
        strings 'left', 'right', 'both' (or 'l', 'r', 'all') are also accepted.
    chars : str or collection of str, optional
        The characters to remove, by default ASCII whitespace. The order of
        the characters is irrelevant.

    Examples
    --------
    >>> trim('  hello  ')
    'hello'
    >>> trim('xxhixx', 'left', 'x')
    'hixx'

    Returns
    -------
    str
        A new string. A string made up entirely of trimmable characters trims
        to the empty string.
    """
    mode = Trim(mode)
    if mode is Trim.LEFT:
        return ltrim(text, chars)

    if mode is Trim.RIGHT:
        return rtrim(text, chars)

    return rtrim(ltrim(text, chars), chars)


def depunctuate(text):
    """Remove all ASCII punctuation characters from `text`."""
    return ''.join(char for char in check_type(text, str)
                   if char not in PUNCTUATION)


# alias
remove_punct = depunctuate
