"""
ASCII character classification.

Case and whitespace are defined over ASCII only. Characters outside the ASCII
letters are never case mapped, so `to_upper('é')` is `'é'`.
"""

# std
import string as _string
from collections import abc

# third-party
import more_itertools as mit

# relative
from .config import CONFIG
from .errors import check_char


# ---------------------------------------------------------------------------- #
UPPERCASE = _string.ascii_uppercase
LOWERCASE = _string.ascii_lowercase
PUNCTUATION = frozenset(_string.punctuation)

# whitespace according to the default C locale
WHITESPACE = frozenset(CONFIG.whitespace)
VOWELS = frozenset(CONFIG.vowels.letters)

# translation tables for `str.translate`
UPPER = str.maketrans(LOWERCASE, UPPERCASE)
LOWER = str.maketrans(UPPERCASE, LOWERCASE)
SWAP = str.maketrans(LOWERCASE + UPPERCASE, UPPERCASE + LOWERCASE)


# ---------------------------------------------------------------------------- #
# Predicates

def is_upper(char):
    return len(char) == 1 and char in UPPERCASE


def is_lower(char):
    return len(char) == 1 and char in LOWERCASE


def is_alpha(char):
    return is_upper(char) or is_lower(char)


def is_vowel(char, include_y=CONFIG.vowels.include_y):
    """
    Whether a character is an English vowel (a, e, i, o, u in either case).

    Parameters
    ----------
    char : str
        Single character.
    include_y : bool, optional
        Whether the letter 'y' counts as a vowel, by default False.

    Examples
    --------
    >>> is_vowel('E')
    True
    >>> is_vowel('y'), is_vowel('y', True)
    (False, True)
    """
    char = lower(char)
    return char in VOWELS or (include_y and char == 'y')


def is_consonant(char, y_is_vowel=CONFIG.vowels.include_y):
    # Anything that is not a vowel. Non-letters count as consonants.
    return not is_vowel(char, y_is_vowel)


def is_delimiter(char, delimiters=WHITESPACE):
    return char in delimiters


def resolve_charset(chars):
    """
    Convert `chars` to a frozenset of characters. Strings are treated as the
    set of their characters.

    Raises
    ------
    TypeError
        If `chars` is not iterable, or has items that are not strings.
    ValueError
        If any item is not a single character.
    """
    if isinstance(chars, str):
        return frozenset(chars)

    if not isinstance(chars, abc.Iterable):
        raise TypeError(
            f'Invalid object type {type(chars).__name__!r} for character set: '
            f'{chars!r}.'
        )

    if not isinstance(chars, frozenset):
        chars = frozenset(chars)

    for char in chars:
        check_char(char, 'delimiter')

    return chars


# ---------------------------------------------------------------------------- #
# Character case mapping

def upper(char):
    return char.translate(UPPER)


def lower(char):
    return char.translate(LOWER)


def opposite_case(char):
    return char.translate(SWAP)


# ---------------------------------------------------------------------------- #
# Counting

def uppercase_count(text):
    """Count the ASCII capital letters in `text`."""
    return mit.ilen(filter(is_upper, text))


def lowercase_count(text):
    """Count the ASCII small letters in `text`."""
    return mit.ilen(filter(is_lower, text))


def vowel_count(text, include_y=CONFIG.vowels.include_y):
    return sum(is_vowel(char, include_y) for char in text)


def consonant_count(text, y_is_vowel=CONFIG.vowels.include_y):
    # every character that is not a vowel, including non-letters
    return len(text) - vowel_count(text, y_is_vowel)
