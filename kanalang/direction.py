"""
Translation direction resolution.

An explicit direction (or one of its aliases) is used as given. Anything else,
including "auto", falls back to keyword sniffing: the text is treated as Kana
when one of a few very common Kana words occurs anywhere in it.

The sniffing is a plain substring test on the lowercased text, not a word
match. Any text containing "e", "li" or "mi" as letters is therefore taken as
Kana ("you are good" resolves to Kana -> English), so most English sentences
only resolve to English -> Kana when they avoid the letter "e".
"""
import logging
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class Direction(Enum):
    TO_KANA = "to"
    FROM_KANA = "from"


TO_KANA_ALIASES = {"to", "en2k", "en-kana"}
FROM_KANA_ALIASES = {"from", "k2en", "kana-en"}
AUTO = "auto"

KANA_KEYWORDS = ("mi", "sina", "ona", "li", "e", "pona", "ike", "toki", "moku")


def detect_direction(text: str) -> Direction:
    """Guess the direction from the text alone (substring keyword test)."""
    lower = text.lower()
    if any(keyword in lower for keyword in KANA_KEYWORDS):
        return Direction.FROM_KANA
    return Direction.TO_KANA


def resolve_direction(direction: Optional[str], text: str) -> Direction:
    """
    Turn a direction name into a Direction.

    Args:
        direction: "to"/"en2k"/"en-kana", "from"/"k2en"/"kana-en", "auto" or None.
            Unrecognized names are treated like "auto".
        text: The text to translate, used when auto-detecting.
    """
    if isinstance(direction, Direction):
        return direction
    if direction in TO_KANA_ALIASES:
        return Direction.TO_KANA
    if direction in FROM_KANA_ALIASES:
        return Direction.FROM_KANA

    detected = detect_direction(text)
    logger.debug(f"Auto-detected direction '{detected.value}' for '{text}'")
    return detected
