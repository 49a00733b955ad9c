"""
Case transformations, including those that depend on word boundaries.

Words are maximal runs of characters that are not in the delimiter set (ASCII
whitespace by default). Only ASCII letters are case mapped.
"""

# relative
from .config import CONFIG
from .errors import check_type
from .charclass import (LOWER, SWAP, UPPER, WHITESPACE, lower, resolve_charset,
                        upper)


# ---------------------------------------------------------------------------- #
# Whole string

def to_upper(text):
    return check_type(text, str).translate(UPPER)


def to_lower(text):
    return check_type(text, str).translate(LOWER)


def swap_case(text):
    return check_type(text, str).translate(SWAP)


def reverse(text):
    return check_type(text, str)[::-1]


# ---------------------------------------------------------------------------- #
# Front character

def capitalize_front(text, lower_rest=True):
    """
    Upper case the first character of `text`, and lower case the rest of the
    characters if `lower_rest` is True.

    Examples
    --------
    >>> capitalize_front('hELLO wORLD')
    'Hello world'
    >>> capitalize_front('hELLO', False)
    'HELLO'
    >>> capitalize_front('')
    ''
    """
    return _front(text, upper, to_lower if lower_rest else None)


def uncapitalize_front(text, upper_rest=True):
    """
    Lower case the first character of `text`, and upper case the rest of the
    characters if `upper_rest` is True.
    """
    return _front(text, lower, to_upper if upper_rest else None)


def _front(text, first, rest=None):
    if not check_type(text, str):
        return text

    tail = text[1:]
    return first(text[0]) + (rest(tail) if rest else tail)


# aliases
cap_f = capitalize_front
uncap_f = uncapitalize_front


# ---------------------------------------------------------------------------- #
# Word boundaries

def _iter_initials(text, delimiters):
    """
    Yield `(char, initial)` pairs for each character in `text`, where `initial`
    flags the first character of every run of non-delimiter characters.
    """
    delimiters = resolve_charset(delimiters)
    at_start = True
    for char in check_type(text, str):
        is_delim = char in delimiters
        yield char, (at_start and not is_delim)
        at_start = is_delim


def _map_initials(text, func, delimiters):
    return ''.join(func(char) if initial else char
                   for char, initial in _iter_initials(text, delimiters))


def capitalize(text, delimiters=WHITESPACE):
    """
    Upper case the first character of each word in `text`. Characters other
    than the initials are left as they are.

    Parameters
    ----------
    text : str
        The string to capitalize.
    delimiters : str or collection of str, optional
        Set of characters that separate words, by default ASCII whitespace.

    Examples
    --------
    >>> capitalize('the  quick-brown fOX')
    'The  Quick-brown FOX'
    >>> capitalize('the quick-brown fox', ' -')
    'The Quick-Brown Fox'

    Returns
    -------
    str
    """
    return _map_initials(text, upper, delimiters)


# alias
title = capitalize


def uncapitalize(text, delimiters=WHITESPACE):
    """Lower case the first character of each word in `text`."""
    return _map_initials(text, lower, delimiters)


def initials(text, capitalize=False, delim=CONFIG.initials.delimiter,
             delimiters=WHITESPACE):
    """
    Collect the first character of each word in `text`.

    Parameters
    ----------
    text : str
        Source string.
    capitalize : bool, optional
        Whether to upper case the initials, by default False.
    delim : str, optional
        String placed between the initials, by default a space.
    delimiters : str or collection of str, optional
        Set of characters that separate words, by default ASCII whitespace.

    Examples
    --------
    >>> initials('the Quick Brown Fox', True)
    'T Q B F'
    >>> initials('portable network graphics', True, '')
    'PNG'

    Returns
    -------
    str
    """
    check_type(delim, str, 'delim')
    letters = (char for char, initial in _iter_initials(text, delimiters)
               if initial)
    return delim.join(map(upper, letters) if capitalize else letters)


def word_count(text, delimiters=WHITESPACE):
    """
    Count the words (maximal runs of non-delimiter characters) in `text`.

    >>> word_count('  foo   bar ')
    2
    """
    return sum(initial for _, initial in _iter_initials(text, delimiters))
