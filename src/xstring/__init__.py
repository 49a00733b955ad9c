"""
Extended string toolkit: repetition, trimming, tokenization, case
transformation, search and comparison with precise edge-case semantics over
ASCII text.
"""

# std
from importlib.metadata import PackageNotFoundError, version

# third-party
from loguru import logger

# silence logging by default
logger.disable('xstring')

# relative
from .config import CONFIG
from .text import NULL, Text
from .repetition import repeat
from .io import print_line, read_line
from .errors import OutOfRange, XStringError
from .tokens import join, reverse_words, split
from .trimming import Trim, depunctuate, ltrim, remove_punct, rtrim, trim
from .charclass import (WHITESPACE, consonant_count, is_consonant, is_vowel,
                        lowercase_count, opposite_case, uppercase_count,
                        vowel_count)
from .casing import (cap_f, capitalize, capitalize_front, initials, reverse,
                     swap_case, title, to_lower, to_upper, uncap_f,
                     uncapitalize, uncapitalize_front, word_count)
from .search import (NPOS, Window, compare, count, find, find_and_replace,
                     find_first_not_of, find_first_of, find_last_not_of,
                     find_last_of, r_find, rfind, window)


# ---------------------------------------------------------------------------- #

# version
try:
    __version__ = version('xstring')
except PackageNotFoundError:
    __version__ = '0.0.0'
