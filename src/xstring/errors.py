"""
Exceptions raised by xstring.

Searches never raise on a failed match, they return the sentinel offset
`xstring.search.NPOS` instead. Exceptions are reserved for invalid access.
"""


class XStringError(Exception):
    """Base class for all xstring errors."""


class OutOfRange(XStringError, IndexError):
    """
    Checked access beyond the end of a text value, or a window whose offset
    lies past the end of the text.
    """

    def __init__(self, index, size, what='index'):
        self.index = index
        self.size = size
        super().__init__(f'{what.capitalize()} {index} out of range for text '
                         f'of size {size}.')


def check_type(obj, kind, name='text'):
    # shared guard for the public functions
    if not isinstance(obj, kind):
        raise TypeError(f'Invalid object type {type(obj).__name__!r} for '
                        f'`{name}`: {obj!r}.')
    return obj


def check_char(obj, name='char'):
    check_type(obj, str, name)
    if len(obj) != 1:
        raise ValueError(f'`{name}` should be a single character, not {obj!r}.')
    return obj
