# third-party
import pytest

# local
from xstring.testing import Expected, mock
from xstring.charclass import (WHITESPACE, consonant_count, is_alpha,
                               is_consonant, is_lower, is_upper, is_vowel,
                               lower, lowercase_count, opposite_case,
                               resolve_charset, upper, uppercase_count,
                               vowel_count)


# ---------------------------------------------------------------------------- #
def test_whitespace():
    assert WHITESPACE == {' ', '\t', '\n', '\v', '\f', '\r'}


@pytest.mark.parametrize('char', 'aeiouAEIOU')
def test_is_vowel(char):
    assert is_vowel(char)
    assert not is_consonant(char)


test_is_vowel_y = Expected(is_vowel)(
    {mock.is_vowel('y'):        False,
     mock.is_vowel('Y', True):  True,
     mock.is_vowel('b'):        False,
     mock.is_vowel('1'):        False}
)


test_is_consonant = Expected(is_consonant)(
    {mock.is_consonant('b'):        True,
     mock.is_consonant('y'):        True,
     mock.is_consonant('y', True):  False,
     # anything that is not a vowel
     mock.is_consonant('!'):        True}
)


@pytest.mark.parametrize(
    'char, up, low, alpha',
    [('A', True, False, True),
     ('z', False, True, True),
     ('5', False, False, False),
     ('é', False, False, False),
     ('', False, False, False)]
)
def test_case_predicates(char, up, low, alpha):
    assert is_upper(char) is up
    assert is_lower(char) is low
    assert is_alpha(char) is alpha


def test_case_mapping_ascii_only():
    assert upper('a') == 'A'
    assert lower('Q') == 'q'
    assert upper('é') == 'é'
    assert opposite_case('a') == 'A'
    assert opposite_case('A') == 'a'
    assert opposite_case('-') == '-'


test_counts = Expected(uppercase_count)(
    {mock.uppercase_count('Hello World'):   2,
     mock.uppercase_count(''):              0,
     mock.uppercase_count('ÉA'):            1}
)


def test_letter_counts():
    assert lowercase_count('Hello World') == 8
    assert vowel_count('Hello World') == 3
    assert vowel_count('yay', True) == 3
    # consonants are everything that is not a vowel
    assert consonant_count('Hello World') == 8


class TestResolveCharset:
    def test_str(self):
        assert resolve_charset('aab') == {'a', 'b'}

    def test_iterable(self):
        assert resolve_charset(['x', 'y']) == {'x', 'y'}

    def test_frozenset_passthrough(self):
        chars = frozenset('ab')
        assert resolve_charset(chars) is chars

    def test_invalid(self):
        with pytest.raises(TypeError):
            resolve_charset(5)

    def test_invalid_items(self):
        with pytest.raises(TypeError):
            resolve_charset([5])

    @pytest.mark.parametrize('chars', [['ab'], ['a', ''], frozenset({'xy'})])
    def test_multi_character_items(self, chars):
        with pytest.raises(ValueError):
            resolve_charset(chars)
