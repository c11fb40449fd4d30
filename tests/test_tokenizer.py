"""
Tests for the word/punctuation tokenizer.
"""
import unittest

from kanalang.tokenizer import Punctuation, Word, tokenize, words


class TestTokenize(unittest.TestCase):

    def test_empty_input(self):
        self.assertEqual(tokenize(""), [])

    def test_whitespace_only(self):
        self.assertEqual(tokenize("  \t\n "), [])

    def test_punctuation_splits_words(self):
        self.assertEqual(tokenize("a.b"), [Word("a"), Punctuation("."), Word("b")])

    def test_simple_sentence(self):
        self.assertEqual(
            tokenize("mi wile e moku"),
            [Word("mi"), Word("wile"), Word("e"), Word("moku")],
        )

    def test_all_punctuation_characters(self):
        tokens = tokenize("a.b,c?d!e:f;g")
        self.assertEqual(
            [t.char for t in tokens if isinstance(t, Punctuation)],
            [".", ",", "?", "!", ":", ";"],
        )
        self.assertEqual(words(tokens), ["a", "b", "c", "d", "e", "f", "g"])

    def test_trailing_question_mark(self):
        self.assertEqual(tokenize("se sina lon?"), [
            Word("se"), Word("sina"), Word("lon"), Punctuation("?"),
        ])

    def test_consecutive_punctuation(self):
        self.assertEqual(tokenize("what?!"), [Word("what"), Punctuation("?"), Punctuation("!")])

    def test_hyphen_apostrophe_digits_stay_in_word(self):
        self.assertEqual(
            tokenize("don't next-to 42nd"),
            [Word("don't"), Word("next-to"), Word("42nd")],
        )

    def test_other_symbols_stay_in_word(self):
        self.assertEqual(tokenize('"hello" (x)'), [Word('"hello"'), Word("(x)")])

    def test_unicode_whitespace_splits(self):
        self.assertEqual(tokenize("mi\u00a0toki\u3000pona"), [Word("mi"), Word("toki"), Word("pona")])

    def test_case_is_preserved(self):
        self.assertEqual(tokenize("Hello World"), [Word("Hello"), Word("World")])


class TestWords(unittest.TestCase):

    def test_drops_punctuation(self):
        self.assertEqual(words(tokenize("mi, sina.")), ["mi", "sina"])

    def test_empty(self):
        self.assertEqual(words([]), [])


if __name__ == '__main__':
    unittest.main()
