#!/usr/bin/env python3
"""
Basic Kana Translation Examples

This script walks through translating between English and Kana and looks at
how a Kana sentence is split into subject, verb and object.
"""
import json

from kanalang import DEFAULT_LEXICON, Category, parse_kana, translate, validate_kana
from kanalang.errors import InvalidWord


def example_1_english_to_kana():
    """Translate simple English sentences into Kana."""
    print("=" * 60)
    print("Example 1: English -> Kana")
    print("=" * 60)

    for sentence in ["i want food", "you are good", "he see fish", "you want water?"]:
        print(f"  {sentence:<20} -> {translate(sentence, 'to')}")

    print("\nExplanation:")
    print("  'li' is left out after 'mi' and 'sina'")
    print("  'e' comes before the first object word")
    print("  Words missing from the lexicon come out as [word]")


def example_2_kana_to_english():
    """Translate Kana sentences back into English."""
    print("\n" + "=" * 60)
    print("Example 2: Kana -> English")
    print("=" * 60)

    for sentence in ["mi wile e moku", "se sina lon", "ona li ala lukin e kala", "yu"]:
        print(f"  {sentence:<25} -> {translate(sentence, 'from')}")


def example_3_auto_direction():
    """Let the translator guess the direction."""
    print("\n" + "=" * 60)
    print("Example 3: Automatic Direction")
    print("=" * 60)

    for sentence in ["mi toki pona", "i love you", "you are good"]:
        print(f"  {sentence:<20} -> {translate(sentence)}")

    print("\nNote: detection looks for Kana keywords as substrings,")
    print("  so the 'e' in 'are' makes 'you are good' read as Kana.")


def example_4_parse_and_validate():
    """Decompose a Kana sentence and check its words against the lexicon."""
    print("\n" + "=" * 60)
    print("Example 4: Parsing and Validation")
    print("=" * 60)

    parsed = validate_kana(parse_kana("ona li toki e ijo"))
    print(json.dumps(parsed.to_dict(), indent=2))

    try:
        validate_kana(parse_kana("ona li zorp"))
    except InvalidWord as e:
        print(f"\nValidation failed: {e}")


def example_5_lexicon():
    """Browse the lexicon by category."""
    print("\n" + "=" * 60)
    print("Example 5: Lexicon")
    print("=" * 60)

    print(f"  {len(DEFAULT_LEXICON)} words")
    for category in Category:
        words = DEFAULT_LEXICON.words_in(category)
        print(f"  {category.value:<9} {len(words):>3}  e.g. {', '.join(words[:5])}")


def main():
    """Run all examples."""
    print("\n")
    print("*" * 60)
    print("  KANALANG: Basic Translation Examples")
    print("*" * 60)

    example_1_english_to_kana()
    example_2_kana_to_english()
    example_3_auto_direction()
    example_4_parse_and_validate()
    example_5_lexicon()

    print("\n" + "=" * 60)
    print("Examples Complete!")
    print("=" * 60)
    print("\nNext steps:")
    print("  - Run 'kanalang lexicon' to see every word")
    print("  - Run 'kanalang chat' to talk to an LLM in Kana")
    print("\n")


if __name__ == "__main__":
    main()
