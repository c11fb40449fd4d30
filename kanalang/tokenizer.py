"""
Tokenizer shared by both translation directions.

Whitespace separates words. The six characters ``. , ? ! : ;`` end the current
word and become tokens of their own. Every other character, including
hyphens, apostrophes and digits, stays part of the word it touches.
"""
from dataclasses import dataclass
from typing import List, Union

PUNCTUATION = frozenset(".,?!:;")


@dataclass(frozen=True)
class Word:
    text: str


@dataclass(frozen=True)
class Punctuation:
    char: str


Token = Union[Word, Punctuation]


def tokenize(text: str) -> List[Token]:
    """Split text into Word and Punctuation tokens. Never fails."""
    tokens: List[Token] = []
    current: List[str] = []

    for ch in text:
        if ch.isspace():
            if current:
                tokens.append(Word("".join(current)))
                current = []
        elif ch in PUNCTUATION:
            if current:
                tokens.append(Word("".join(current)))
                current = []
            tokens.append(Punctuation(ch))
        else:
            current.append(ch)

    if current:
        tokens.append(Word("".join(current)))

    return tokens


def words(tokens: List[Token]) -> List[str]:
    """The text of the Word tokens, punctuation dropped."""
    return [token.text for token in tokens if isinstance(token, Word)]
