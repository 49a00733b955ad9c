"""
Split strings into tokens and join them back.

Splitting discards empty tokens, so the round trip

    join(split(text, d), d) == text

only holds when `text` has no leading, trailing or doubled occurrences of the
delimiter `d`:

>>> split(' a  b ')
['a', 'b']
>>> join(split(' a  b '))
'a b'
"""

# relative
from .config import CONFIG
from .errors import check_type


# ---------------------------------------------------------------------------- #

def split(text, delimiter=CONFIG.split.delimiter):
    """
    Split `text` on non-overlapping occurrences of `delimiter`, scanning left
    to right. Empty tokens are suppressed, so leading, trailing and consecutive
    delimiters produce no empty strings.

    Parameters
    ----------
    text : str
        String to split.
    delimiter : str, optional
        Delimiter string, by default a single space. If empty, no splitting is
        attempted and the result is `[text]`.

    Examples
    --------
    >>> split('a,,b,', ',')
    ['a', 'b']
    >>> split('a b', '')
    ['a b']

    Returns
    -------
    list of str
    """
    check_type(text, str)
    check_type(delimiter, str, 'delimiter')

    if not delimiter:
        return [text]

    return list(filter(None, text.split(delimiter)))


def join(tokens, delimiter=CONFIG.join.delimiter):
    """
    Join `tokens` with `delimiter` between each two consecutive tokens. Items
    are converted with `str`. Joining nothing yields the empty string.
    """
    check_type(delimiter, str, 'delimiter')
    return delimiter.join(map(str, tokens))


def reverse_words(text, delimiter=CONFIG.split.delimiter):
    """
    Reverse the order of the `delimiter` separated words in `text`.

    >>> reverse_words('one two  three')
    'three two one'
    """
    return join(reversed(split(text, delimiter)), delimiter)
