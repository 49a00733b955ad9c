# third-party
import pytest

# local
from xstring.testing import Expected, Throws, mock
from xstring.tokens import join, reverse_words, split


# ---------------------------------------------------------------------------- #
test_split = Expected(split)(
    {mock.split('a b c'):               ['a', 'b', 'c'],
     mock.split('  a  b  '):            ['a', 'b'],
     mock.split('a,,b,', ','):          ['a', 'b'],
     mock.split(',a', ','):             ['a'],
     mock.split('a<>b<><>c', '<>'):     ['a', 'b', 'c'],
     mock.split('aaa', 'aa'):           ['a'],
     mock.split('abc', 'x'):            ['abc'],
     mock.split('', ','):               [],
     mock.split(',,,', ','):            [],
     mock.split('a b', ''):             ['a b'],
     mock.split('', ''):                [''],
     mock.split(None):                  Throws(TypeError)}
)


test_join = Expected(join)(
    {mock.join(['a', 'b', 'c']):        'a b c',
     mock.join(['a', 'b'], ', '):       'a, b',
     mock.join([]):                     '',
     mock.join(['only']):               'only',
     mock.join(('x', 1, 2.5), '-'):     'x-1-2.5',
     mock.join(iter('abc'), ''):        'abc'}
)


@pytest.mark.parametrize('text', ['', 'abc', 'a b', ' a b', 'a  b '])
def test_split_empty_delimiter(text):
    assert split(text, '') == [text]


@pytest.mark.parametrize(
    'text, delimiter',
    [('a b c', ' '),
     ('key=value', '='),
     ('one::two::three', '::'),
     ('single', ',')]
)
def test_round_trip(text, delimiter):
    assert join(split(text, delimiter), delimiter) == text


@pytest.mark.parametrize('text, delimiter',
                         [(' a b', ' '), ('a,,b', ','), ('a,b,', ',')])
def test_round_trip_asymmetry(text, delimiter):
    # leading, trailing and doubled delimiters are lost
    assert join(split(text, delimiter), delimiter) != text


def test_reverse_words():
    assert reverse_words('one two  three') == 'three two one'
    assert reverse_words('a.b.c', '.') == 'c.b.a'
    assert reverse_words('') == ''
