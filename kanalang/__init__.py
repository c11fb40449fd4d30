# This file makes the 'kanalang' directory a Python package.

from kanalang.lexicon import Category, Lexicon, LexiconEntry, DEFAULT_LEXICON, build_lexicon
from kanalang.tokenizer import Punctuation, Word, tokenize
from kanalang.parser import ParsedSentence, parse_english, parse_kana, validate_kana
from kanalang.direction import Direction, resolve_direction
from kanalang.translator import Translator, english_to_kana, kana_to_english, translate

__all__ = [
    'Category',
    'Lexicon',
    'LexiconEntry',
    'DEFAULT_LEXICON',
    'build_lexicon',
    'Punctuation',
    'Word',
    'tokenize',
    'ParsedSentence',
    'parse_english',
    'parse_kana',
    'validate_kana',
    'Direction',
    'resolve_direction',
    'Translator',
    'english_to_kana',
    'kana_to_english',
    'translate',
]
