"""
Build strings by repeating a unit.
"""

# std
import numbers

# relative
from .errors import check_type


# ---------------------------------------------------------------------------- #

def repeat(unit, count, sep='', wrapper=''):
    """
    Repeat `unit` `count` times, placing `sep` between each two consecutive
    occurrences, and append `wrapper` once at the very end.

    Note that `wrapper` is a trailing delimiter only: nothing is prepended.

    Parameters
    ----------
    unit : str
        Character or string to repeat.
    count : int
        Number of repetitions. Zero yields `wrapper` alone.
    sep : str, optional
        Separator inserted between occurrences, never before the first or
        after the last.
    wrapper : str, optional
        Appended once after the last occurrence.

    Examples
    --------
    >>> repeat('ab', 3, '-', '!')
    'ab-ab-ab!'
    >>> repeat('x', 0, ',', ';')
    ';'

    Returns
    -------
    str

    Raises
    ------
    TypeError
        If `count` is not an integer.
    ValueError
        If `count` is negative.
    """
    check_type(unit, str, 'unit')
    check_type(count, numbers.Integral, 'count')
    if count < 0:
        raise ValueError(f'Repeat count should be non-negative, not {count}.')

    return sep.join([unit] * count) + wrapper
