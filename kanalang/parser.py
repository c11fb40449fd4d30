"""Sentence role assignment for Kana and English.

Both parsers are single-pass state machines over the token stream. The state
is the role currently being filled. Particles switch the state or set a
sentence flag; any other word is appended to the current role. There is no
grammar beyond that: a short sentence is only split into subject / verb /
object word lists.
"""
import logging
from dataclasses import asdict, dataclass, field
from enum import IntEnum
from typing import Dict, List, Optional, Tuple

from kanalang.errors import InvalidWord, MissingSubject
from kanalang.lexicon import DEFAULT_LEXICON, Category, Lexicon
from kanalang.tokenizer import Punctuation, tokenize, words

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# --- Grammar word lists
# -----------------------------------------------------------------------------

# English personal pronouns and the Kana pronoun each maps to
ENGLISH_PRONOUNS = {
    "i": "mi",
    "me": "mi",
    "we": "mi",
    "us": "mi",
    "you": "sina",
    "he": "ona",
    "she": "ona",
    "it": "ona",
    "they": "ona",
}

# English rendering of Kana pronouns in subject position
KANA_PRONOUNS = {
    "mi": "I",
    "sina": "you",
    "ona": "they",
}

ENGLISH_NEGATIONS = {"not", "no", "don't", "doesn't"}
ENGLISH_ARTICLES = {"the", "a", "an"}
ENGLISH_INTENSIFIERS = {"very", "really"}

# Kana particles
SUBJECT_MARKER = "li"
OBJECT_MARKER = "e"
MODIFIER_MARKER = "pi"
QUESTION_MARKER = "se"
NEGATION_MARKER = "ala"
CONJUNCTION = "en"
GREETING = "yu"

PLACEHOLDER_SUBJECT = "unknown"


class Stage(IntEnum):
    """The role that the next plain word is assigned to."""
    SUBJECT = 0
    VERB = 1
    OBJECT = 2


@dataclass
class ParsedSentence:
    """Words of a sentence grouped by role, plus question/negation flags."""

    subject: List[str] = field(default_factory=list)
    verb: List[str] = field(default_factory=list)
    obj: List[str] = field(default_factory=list)
    modifiers: List[Tuple[str, str]] = field(default_factory=list)
    is_question: bool = False
    is_negated: bool = False

    def role(self, stage: Stage) -> List[str]:
        return {
            Stage.SUBJECT: self.subject,
            Stage.VERB: self.verb,
            Stage.OBJECT: self.obj,
        }[stage]

    def to_dict(self) -> Dict:
        data = asdict(self)
        data["object"] = data.pop("obj")
        data["modifiers"] = [list(pair) for pair in self.modifiers]
        return data


# -----------------------------------------------------------------------------
# --- Kana -> roles
# -----------------------------------------------------------------------------

# Particle -> stage it switches to
KANA_STAGE_MARKERS = {
    SUBJECT_MARKER: Stage.VERB,
    OBJECT_MARKER: Stage.OBJECT,
}

KANA_NEGATIONS = {NEGATION_MARKER, "no"}


def parse_kana(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> ParsedSentence:
    """
    Split a Kana sentence into subject, verb and object word lists.

    ``li`` starts the verb, ``e`` starts the object, ``ala``/``no`` negate,
    ``se`` or a ``?`` anywhere marks a question. ``pi`` groups modifiers; the
    group is consumed but not recorded, so ``modifiers`` stays empty.

    Raises:
        MissingSubject: If the text has no words or no subject words.
    """
    tokens = tokenize(text)
    kana_words = [w.lower() for w in words(tokens)]
    if not kana_words:
        raise MissingSubject("Cannot parse an empty sentence.")

    parsed = ParsedSentence()
    parsed.is_question = any(
        isinstance(token, Punctuation) and token.char == "?" for token in tokens
    )

    stage = Stage.SUBJECT
    last_index = len(kana_words) - 1
    for i, word in enumerate(kana_words):
        if word in KANA_STAGE_MARKERS:
            stage = KANA_STAGE_MARKERS[word]
        elif word == MODIFIER_MARKER and i != last_index:
            continue
        elif word in KANA_NEGATIONS:
            parsed.is_negated = True
        elif word == QUESTION_MARKER:
            parsed.is_question = True
        else:
            parsed.role(stage).append(word)

    if not parsed.subject:
        raise MissingSubject()

    logger.debug(f"Kana roles for '{text}': {parsed.to_dict()}")
    return parsed


# -----------------------------------------------------------------------------
# --- English -> roles
# -----------------------------------------------------------------------------

def _english_category(word: str, lexicon: Lexicon) -> Optional[Category]:
    """Category of an English word via its Kana translation, or of the word itself."""
    canonical = lexicon.lookup_by_meaning(word) or word
    return lexicon.category_of(canonical)


def parse_english(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> ParsedSentence:
    """
    Split an English sentence into subject, verb and object word lists.

    The first pronoun is the subject. After it, the first word that translates
    to a Kana action is the verb; if none does, the first word after the
    subject is used. After the verb, entity words and unknown words form the
    object. Negation words are dropped anywhere and set ``is_negated``.

    Never fails: without a pronoun the subject is ``["unknown"]``.
    """
    parsed = ParsedSentence()
    parsed.is_question = text.strip().endswith("?")

    stage = Stage.SUBJECT
    fallback_verb = None
    for word in words(tokenize(text)):
        lower = word.lower()

        if lower in ENGLISH_NEGATIONS:
            parsed.is_negated = True
            continue

        if stage == Stage.SUBJECT:
            if lower in ENGLISH_PRONOUNS:
                parsed.subject.append(lower)
                stage = Stage.VERB
        elif stage == Stage.VERB:
            if fallback_verb is None:
                fallback_verb = lower
            if _english_category(lower, lexicon) is Category.ACTION:
                parsed.verb.append(lower)
                stage = Stage.OBJECT
        else:
            category = _english_category(lower, lexicon)
            if category is None or category is Category.ENTITY:
                parsed.obj.append(lower)

    if stage == Stage.VERB and fallback_verb is not None:
        parsed.verb.append(fallback_verb)

    if not parsed.subject:
        logger.debug(f"No subject pronoun in '{text}', using placeholder subject")
        parsed.subject.append(PLACEHOLDER_SUBJECT)

    logger.debug(f"English roles for '{text}': {parsed.to_dict()}")
    return parsed


# -----------------------------------------------------------------------------
# --- Validation
# -----------------------------------------------------------------------------

def validate_kana(parsed: ParsedSentence, lexicon: Lexicon = DEFAULT_LEXICON) -> ParsedSentence:
    """
    Check that every subject, verb and object word is a Kana word.

    Raises:
        InvalidWord: For the first word that is not in the lexicon.
    """
    for word in parsed.subject + parsed.verb + parsed.obj:
        if lexicon.lookup_by_canonical(word) is None:
            raise InvalidWord(word)
    return parsed
