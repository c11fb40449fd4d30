"""
Errors raised while decomposing or validating a sentence.

Only the parser and the validator raise these. The translation functions are
lenient and degrade unknown words to ``[word]`` placeholders instead.
"""


class ParseError(ValueError):
    """Base class for sentence parsing and validation failures."""


class MissingSubject(ParseError):
    def __init__(self, message: str = "No subject found in sentence."):
        super().__init__(message)


class MissingVerb(ParseError):
    """Reserved for completeness checks; no parser path raises it yet."""

    def __init__(self, message: str = "No verb found in sentence."):
        super().__init__(message)


class InvalidWord(ParseError):
    """A word that is not in the lexicon. Only the first one is reported."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid word: '{token}'")


class GrammarError(ParseError):
    """Reserved for grammar rule violations."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Grammar error: {message}")
