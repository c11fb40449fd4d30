"""
Translation between English and Kana.

Both directions are a single left-to-right pass over the tokens, looking each
word up in the lexicon and deciding from a little state (which roles have been
filled, pending flags) which Kana particles or English words to emit. They
never fail: a word missing from the lexicon is emitted as ``[word]``.
"""
import logging
from typing import List, Optional

from kanalang.direction import Direction, resolve_direction
from kanalang.lexicon import DEFAULT_LEXICON, Category, Lexicon
from kanalang.logging_config import log_with_context
from kanalang.parser import (
    CONJUNCTION,
    ENGLISH_ARTICLES,
    ENGLISH_INTENSIFIERS,
    ENGLISH_PRONOUNS,
    GREETING,
    KANA_PRONOUNS,
    MODIFIER_MARKER,
    NEGATION_MARKER,
    OBJECT_MARKER,
    QUESTION_MARKER,
    SUBJECT_MARKER,
    Stage,
)
from kanalang.tokenizer import tokenize, words

logger = logging.getLogger(__name__)

GREETING_PREFIXES = ("hello", "hi ", "hey")

# English words that are rendered as trailing Kana modifiers
ENGLISH_TRAILING_MODIFIERS = {
    "not": NEGATION_MARKER,
    "no": NEGATION_MARKER,
    "don't": NEGATION_MARKER,
    **{word: "mute" for word in ENGLISH_INTENSIFIERS},
}

ENGLISH_DROPPED = {"and"} | ENGLISH_ARTICLES

# Subjects after which the subject marker "li" is left out
MARKERLESS_SUBJECTS = {"mi", "sina"}

ENTITY_LIKE = {Category.ENTITY, Category.NUMBER}


def _placeholder(word: str) -> str:
    return f"[{word}]"


class Translator:
    """
    English <-> Kana translator over one lexicon.

    The lexicon is only read, so a single Translator can be shared freely.

    Usage:
        translator = Translator()
        translator.english_to_kana("i want food")    # -> "mi wile e moku"
        translator.kana_to_english("mi wile e moku") # -> "I want food."
    """

    def __init__(self, lexicon: Optional[Lexicon] = None):
        self.lexicon = lexicon if lexicon is not None else DEFAULT_LEXICON

    def english_to_kana(self, text: str) -> str:
        """
        Render an English sentence in Kana.

        The first content word is the subject, the second the verb (preceded
        by "li" unless the subject is mi/sina), and the rest is the object,
        with "e" placed before its first entity-like word. Negations and
        intensifiers always trail the sentence; a question gets a leading "se".
        """
        lower_text = text.strip().lower()
        if lower_text.startswith(GREETING_PREFIXES):
            return self.lexicon.lookup_by_meaning("hello") or GREETING

        is_question = text.strip().endswith("?")
        result: List[str] = []
        pending_modifiers: List[str] = []
        has_subject = False
        has_verb = False
        has_object = False

        for word in words(tokenize(text)):
            lower = word.lower()

            if lower in ENGLISH_DROPPED:
                continue
            if lower in ENGLISH_TRAILING_MODIFIERS:
                pending_modifiers.append(ENGLISH_TRAILING_MODIFIERS[lower])
                continue

            if not has_subject:
                kana = ENGLISH_PRONOUNS.get(lower) or self.lexicon.lookup_by_meaning(lower)
                result.append(kana or _placeholder(word))
                has_subject = True

            elif not has_verb:
                if SUBJECT_MARKER not in result and result[-1] not in MARKERLESS_SUBJECTS:
                    result.append(SUBJECT_MARKER)
                kana = self.lexicon.lookup_by_meaning(lower)
                result.append(kana or _placeholder(word))
                has_verb = True

            else:
                is_pronoun = lower in ENGLISH_PRONOUNS
                kana = ENGLISH_PRONOUNS.get(lower) or self.lexicon.lookup_by_meaning(lower)
                is_entity = is_pronoun or self.lexicon.category_of(kana or lower) in ENTITY_LIKE

                if is_entity and not has_object:
                    result.append(OBJECT_MARKER)
                    has_object = True
                result.append(kana or _placeholder(word))

        result.extend(pending_modifiers)
        if is_question:
            result.insert(0, QUESTION_MARKER)

        if not result:
            return text

        output = " ".join(result)
        log_with_context("English -> Kana", {"input": text, "output": output}, logger=logger)
        return output

    def kana_to_english(self, text: str) -> str:
        """
        Render a Kana sentence in English.

        Particles steer the output instead of being translated: "li" and "e"
        move on to the verb and object, "se" makes a question, "ala" negates
        the next verb. Subject pronouns get their English form, every other
        word its primary gloss.
        """
        lower_text = text.strip().lower()
        if lower_text in (GREETING, "y") or lower_text.startswith(GREETING + " "):
            return "hello"

        result: List[str] = []
        stage = Stage.SUBJECT
        is_question = False
        is_negated = False

        for word in words(tokenize(text)):
            lower = word.lower()

            if lower == GREETING:
                result.append("hello")
            elif lower == QUESTION_MARKER:
                is_question = True
            elif lower == SUBJECT_MARKER:
                stage = Stage.VERB
            elif lower == OBJECT_MARKER:
                stage = Stage.OBJECT
            elif lower == MODIFIER_MARKER:
                continue
            elif lower == NEGATION_MARKER:
                is_negated = True
            elif lower == CONJUNCTION:
                result.append("and")
            elif lower in self.lexicon:
                gloss = self.lexicon.primary_gloss(lower)
                if gloss is None:
                    continue
                if stage == Stage.SUBJECT:
                    result.append(KANA_PRONOUNS.get(lower, gloss))
                elif stage == Stage.VERB and is_negated:
                    result.append(f"do not {gloss}")
                    is_negated = False
                else:
                    result.append(gloss)
            else:
                result.append(_placeholder(word))

        if not result:
            return text

        output = " ".join(result) + ("?" if is_question else ".")
        log_with_context("Kana -> English", {"input": text, "output": output}, logger=logger)
        return output

    def translate(self, text: str, direction: Optional[str] = "auto") -> str:
        """Translate text; the direction is resolved (or auto-detected) first."""
        if resolve_direction(direction, text) is Direction.TO_KANA:
            return self.english_to_kana(text)
        return self.kana_to_english(text)


_default_translator = Translator()


def english_to_kana(text: str) -> str:
    return _default_translator.english_to_kana(text)


def kana_to_english(text: str) -> str:
    return _default_translator.kana_to_english(text)


def translate(text: str, direction: Optional[str] = "auto") -> str:
    """
    Translate between English and Kana with the built-in lexicon.

    Args:
        text: The sentence to translate.
        direction: "to"/"en2k"/"en-kana" for English -> Kana,
            "from"/"k2en"/"kana-en" for Kana -> English, "auto" to guess.

    Returns:
        The translation. Never raises for unknown words.
    """
    return _default_translator.translate(text, direction)
