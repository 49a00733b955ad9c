# third-party
import pytest

# local
from xstring.testing import Expected, Throws, mock
from xstring.casing import (cap_f, capitalize, capitalize_front, initials,
                            reverse, swap_case, title, to_lower, to_upper,
                            uncap_f, uncapitalize, uncapitalize_front,
                            word_count)


# ---------------------------------------------------------------------------- #
class TestWholeString:
    def test_upper_lower(self):
        assert to_upper('Hello, World 42') == 'HELLO, WORLD 42'
        assert to_lower('Hello, World 42') == 'hello, world 42'

    def test_swap_case(self):
        assert swap_case('Hello World') == 'hELLO wORLD'

    def test_non_ascii_untouched(self):
        assert to_upper('straße é') == 'STRAßE é'
        assert to_lower('ÉCOLE') == 'École'

    def test_reverse(self):
        assert reverse('abc') == 'cba'
        assert reverse('') == ''


# ---------------------------------------------------------------------------- #
test_capitalize_front = Expected(capitalize_front)(
    {mock.capitalize_front('hELLO wORLD'):          'Hello world',
     mock.capitalize_front('hELLO wORLD', False):   'HELLO wORLD',
     mock.capitalize_front('h'):                    'H',
     mock.capitalize_front('1abc'):                 '1abc',
     mock.capitalize_front(''):                     '',
     mock.capitalize_front('', False):              ''}
)

test_uncapitalize_front = Expected(uncapitalize_front)(
    {mock.uncapitalize_front('Hello'):          'hELLO',
     mock.uncapitalize_front('Hello', False):   'hello',
     mock.uncapitalize_front(''):               ''}
)


def test_front_aliases():
    assert cap_f is capitalize_front
    assert uncap_f is uncapitalize_front


# ---------------------------------------------------------------------------- #
test_capitalize = Expected(capitalize)(
    {mock.capitalize('hello world'):                    'Hello World',
     mock.capitalize('  hello   world  '):              '  Hello   World  ',
     mock.capitalize('the quick-brown fOX'):            'The Quick-brown FOX',
     mock.capitalize('the quick-brown fox', ' -'):      'The Quick-Brown Fox',
     mock.capitalize('a\tb\nc'):                        'A\tB\nC',
     mock.capitalize('1st place'):                      '1st Place',
     mock.capitalize(''):                               ''}
)

test_uncapitalize = Expected(uncapitalize)(
    {mock.uncapitalize('Hello World'):          'hello world',
     mock.uncapitalize('HELLO WORLD'):          'hELLO wORLD',
     mock.uncapitalize('A_B_C', '_'):           'a_b_c',
     mock.uncapitalize(''):                     ''}
)


@pytest.mark.parametrize('text', ['', 'a', 'hello world', ' x  y ', 'A-b c'])
def test_title_is_capitalize(text):
    assert title(text) == capitalize(text)


# ---------------------------------------------------------------------------- #
test_initials = Expected(initials)(
    {mock.initials('the Quick Brown Fox', True):        'T Q B F',
     mock.initials('the Quick Brown Fox'):              't Q B F',
     mock.initials('  portable  network graphics '):    'p n g',
     mock.initials('portable network graphics',
                   True, ''):                           'PNG',
     mock.initials('a-b c', delim='.', delimiters='- '): 'a.b.c',
     mock.initials('word'):                             'w',
     mock.initials(''):                                 '',
     mock.initials('   '):                              ''}
)


test_word_count = Expected(word_count)(
    {mock.word_count('  foo   bar '):       2,
     mock.word_count(''):                   0,
     mock.word_count('   '):                0,
     mock.word_count('one'):                1,
     mock.word_count('a\tb\nc\rd'):         4,
     mock.word_count('a,b;;c', ',;'):       3,
     mock.word_count('a,b', [',;']):        Throws(ValueError)}
)
