"""
Mutable text value object exposing the full xstring API as methods.
"""

# std
import numbers
import functools as ftl

# relative
from . import casing, charclass, io, search, tokens, trimming
from .config import CONFIG
from .repetition import repeat
from .logging import LoggingMixin
from .errors import OutOfRange, check_char, check_type


# ---------------------------------------------------------------------------- #
# null character returned by safe indexing out of range
NULL = '\0'


def _unwrap(obj):
    return obj.data if isinstance(obj, Text) else obj


def _unwrap_all(args, kws):
    return tuple(map(_unwrap, args)), {key: _unwrap(val) for key, val in kws.items()}


def _transform(func):
    # method returning a new Text from `func(self.data, ...)`
    @ftl.wraps(func)
    def method(self, *args, **kws):
        args, kws = _unwrap_all(args, kws)
        return type(self)(func(self.data, *args, **kws))
    return method


def _query(func):
    # method returning `func(self.data, ...)` as is
    @ftl.wraps(func)
    def method(self, *args, **kws):
        args, kws = _unwrap_all(args, kws)
        return func(self.data, *args, **kws)
    return method


# ---------------------------------------------------------------------------- #
@ftl.total_ordering
class Text(LoggingMixin):
    """
    A mutable sequence of characters.

    Transformation methods (`upper`, `trim`, `capitalize`, ...) return new
    `Text` objects and leave this one untouched. Mutating methods (`append`,
    `push`, `pop`, `insert`, `erase`, `find_and_replace`, `read_line`, item
    assignment) build the new content first and then swap it in, so a failed
    mutation leaves the value unchanged.

    Indexing comes in two tiers: `text[i]` returns the null character '\\0'
    when `i` is out of range and `text[i] = c` ignores out of range writes,
    while `at(i)` and `set_at(i, c)` raise `OutOfRange`.

    Examples
    --------
    >>> text = Text('hello world')
    >>> text.capitalize()
    Text('Hello World')
    >>> text[100]
    '\\x00'
    """

    __hash__ = None

    def __init__(self, content=''):
        self.data = _unwrap(content)
        if not isinstance(self.data, str):
            self.data = str(content)

    # Alternative constructors
    # ------------------------------------------------------------------------ #
    @classmethod
    def repeated(cls, unit, count, sep='', wrapper=''):
        """Construct by repeating `unit`. See `xstring.repetition.repeat`."""
        return cls(repeat(str(_unwrap(unit)), count, sep, wrapper))

    @classmethod
    def joined(cls, items, delimiter=CONFIG.join.delimiter):
        """Construct by joining `items` with `delimiter`."""
        return cls(tokens.join(items, delimiter))

    @classmethod
    def from_number(cls, number, trim_zeros=True):
        """
        Decimal representation of `number`. Real numbers are written with six
        decimal places, and by default the trailing zeros (and a dangling
        decimal point) are removed.

        >>> Text.from_number(2.5), Text.from_number(2.5, False)
        (Text('2.5'), Text('2.500000'))
        """
        check_type(number, numbers.Real, 'number')
        if isinstance(number, numbers.Integral):
            return cls(str(int(number)))

        string = f'{number:f}'
        if trim_zeros and '.' in string:
            string = trimming.rtrim(string, '0').rstrip('.')
        return cls(string)

    # Representation
    # ------------------------------------------------------------------------ #
    def __str__(self):
        return self.data

    def __repr__(self):
        return f'{type(self).__name__}({self.data!r})'

    def __format__(self, spec):
        return format(self.data, spec)

    # Container
    # ------------------------------------------------------------------------ #
    def __len__(self):
        return len(self.data)

    def __iter__(self):
        return iter(self.data)

    def __reversed__(self):
        return reversed(self.data)

    def __contains__(self, item):
        return _unwrap(item) in self.data

    def __getitem__(self, index):
        if isinstance(index, slice):
            return type(self)(self.data[index])

        if self._in_range(index):
            return self.data[index]

        return NULL

    def __setitem__(self, index, char):
        check_char(char)
        if self._in_range(index):
            self.set_at(index, char)
        else:
            self.logger.debug('Ignoring out of range write at index {} for '
                              'text of size {}.', index, len(self))

    def _in_range(self, index):
        check_type(index, numbers.Integral, 'index')
        return -len(self.data) <= index < len(self.data)

    def at(self, index):
        """Character at `index`. Raises `OutOfRange` if there is none."""
        if self._in_range(index):
            return self.data[index]

        raise OutOfRange(index, len(self))

    def set_at(self, index, char):
        """Replace the character at `index`. Raises `OutOfRange` if there is none."""
        check_char(char)
        if not self._in_range(index):
            raise OutOfRange(index, len(self))

        index %= len(self.data)
        return self._swap(self.data[:index] + char + self.data[index + 1:])

    def front(self):
        return self.at(0)

    def back(self):
        return self.at(-1)

    # Comparison
    # ------------------------------------------------------------------------ #
    def __eq__(self, other):
        if isinstance(other, (Text, str)):
            return self.data == _unwrap(other)
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, (Text, str)):
            return self.data < _unwrap(other)
        return NotImplemented

    # Arithmetic
    # ------------------------------------------------------------------------ #
    def __add__(self, other):
        if isinstance(other, (Text, str)):
            return type(self)(self.data + _unwrap(other))
        return NotImplemented

    def __radd__(self, other):
        if isinstance(other, str):
            return type(self)(other + self.data)
        return NotImplemented

    def __iadd__(self, other):
        if isinstance(other, (Text, str)):
            return self.append(other)
        return NotImplemented

    def __mul__(self, count):
        if isinstance(count, numbers.Integral):
            return self.repeat(count)
        return NotImplemented

    __rmul__ = __mul__

    def __imul__(self, count):
        if isinstance(count, numbers.Integral):
            return self._swap(repeat(self.data, count))
        return NotImplemented

    # Buffer
    # ------------------------------------------------------------------------ #
    def _swap(self, new):
        self.data = new
        return self

    def size(self):
        return len(self.data)

    # alias
    length = size

    def empty(self):
        return not self.data

    def clear(self):
        return self._swap('')

    def substr(self, offset=0, length=None):
        return type(self)(search.window(self.data, offset, length))

    def append(self, other, offset=0, length=None):
        """
        Append `other`, or the window `(offset, length)` of `other`. Returns
        this object.
        """
        other = search.window(str(_unwrap(other)), offset, length)
        return self._swap(self.data + other)

    def push(self, char, count=1, front=False):
        """Add `count` copies of the character `char` to the back (or front)."""
        check_char(char)
        chars = repeat(char, count)
        return self._swap(chars + self.data if front else self.data + chars)

    def pop(self, count=1, front=False):
        """
        Remove `count` characters from the back (or front) and return them.

        Raises
        ------
        OutOfRange
            If there are fewer than `count` characters.
        """
        check_type(count, numbers.Integral, 'count')
        if not 0 <= count <= len(self.data):
            raise OutOfRange(count, len(self), 'pop count')

        if front:
            removed, kept = self.data[:count], self.data[count:]
        else:
            cut = len(self.data) - count
            kept, removed = self.data[:cut], self.data[cut:]

        self._swap(kept)
        return removed

    def insert(self, pos, other):
        """Insert `other` immediately before position `pos`."""
        check_type(pos, numbers.Integral, 'position')
        if not 0 <= pos <= len(self.data):
            raise OutOfRange(pos, len(self), 'position')

        return self._swap(self.data[:pos] + str(_unwrap(other)) + self.data[pos:])

    def erase(self, offset=0, length=None):
        """Remove the window `(offset, length)`. By default, erase everything."""
        removed = search.window(self.data, offset, length)
        return self._swap(self.data[:offset] + self.data[offset + len(removed):])

    def replace(self, other, offset=0, length=None, other_offset=0,
                other_length=None):
        """
        Replace the window `(offset, length)` of this text with the window
        `(other_offset, other_length)` of `other`. Returns this object.

        Examples
        --------
        >>> Text('hello world').replace('there', 6)
        Text('hello there')
        >>> Text('hello world').replace('a big cat', 0, 5, 2, 3)
        Text('big world')

        Raises
        ------
        OutOfRange
            If either offset lies past the end of its string.
        """
        removed = search.window(self.data, offset, length)
        inserted = search.window(str(_unwrap(other)), other_offset, other_length)
        return self._swap(self.data[:offset] + inserted
                          + self.data[offset + len(removed):])

    # Transformations
    # ------------------------------------------------------------------------ #
    def repeat(self, count, sep='', wrapper=''):
        return type(self)(repeat(self.data, count, sep, wrapper))

    trim = _transform(trimming.trim)
    ltrim = _transform(trimming.ltrim)
    rtrim = _transform(trimming.rtrim)
    depunctuate = remove_punct = _transform(trimming.depunctuate)

    upper = to_upper = _transform(casing.to_upper)
    lower = to_lower = _transform(casing.to_lower)
    swap_case = _transform(casing.swap_case)
    capitalize_front = cap_f = _transform(casing.capitalize_front)
    uncapitalize_front = uncap_f = _transform(casing.uncapitalize_front)
    capitalize = title = _transform(casing.capitalize)
    uncapitalize = _transform(casing.uncapitalize)
    initials = _transform(casing.initials)
    reverse = _transform(casing.reverse)
    reverse_words = _transform(tokens.reverse_words)

    def split(self, delimiter=CONFIG.split.delimiter):
        """Split into a list of `Text` tokens. See `xstring.tokens.split`."""
        return [*map(type(self), tokens.split(self.data, _unwrap(delimiter)))]

    # Queries
    # ------------------------------------------------------------------------ #
    word_count = _query(casing.word_count)
    uppercase_count = _query(charclass.uppercase_count)
    lowercase_count = _query(charclass.lowercase_count)
    vowel_count = _query(charclass.vowel_count)
    consonant_count = _query(charclass.consonant_count)
    count = _query(search.count)

    find = _query(search.find)
    rfind = r_find = _query(search.rfind)
    find_first_of = _query(search.find_first_of)
    find_last_of = _query(search.find_last_of)
    find_first_not_of = _query(search.find_first_not_of)
    find_last_not_of = _query(search.find_last_not_of)
    compare = _query(search.compare)

    # Mutating
    # ------------------------------------------------------------------------ #
    def find_and_replace(self, needle, replacement, case_sensitive=True):
        """
        Replace every occurrence of `needle` in place. See
        `xstring.search.find_and_replace`. Returns this object.
        """
        return self._swap(search.find_and_replace(
            self.data, str(_unwrap(needle)), str(_unwrap(replacement)),
            case_sensitive
        ))

    # I/O
    # ------------------------------------------------------------------------ #
    def print_line(self, file=None, flush=False):
        return io.print_line(self.data, file, flush)

    def read_line(self, source, delimiter='\n'):
        """
        Replace the content with the next line read from `source`.

        Returns
        -------
        bool
            False if the end of input was reached before anything was read, in
            which case the content is left unchanged.
        """
        line = io.read_line(source, delimiter)
        if line is None:
            return False

        self._swap(line)
        return True
