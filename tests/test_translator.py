"""
Tests for the English <-> Kana translator.
"""
import unittest
from concurrent.futures import ThreadPoolExecutor

from kanalang.lexicon import Category, LexiconEntry, build_lexicon
from kanalang.translator import Translator, english_to_kana, kana_to_english, translate


class TestEnglishToKana(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        """Set up the translator once for all tests."""
        cls.translator = Translator()

    def test_subject_verb_object(self):
        self.assertEqual(self.translator.english_to_kana("i want food"), "mi wile e moku")

    def test_unknown_verb_becomes_placeholder(self):
        # 'li' is left out after 'sina'; 'are' is not in the lexicon
        self.assertEqual(self.translator.english_to_kana("you are good"), "sina [are] pona")

    def test_pronoun_object(self):
        self.assertEqual(self.translator.english_to_kana("i love you"), "mi olin e sina")

    def test_li_after_third_person_subject(self):
        self.assertEqual(self.translator.english_to_kana("he see fish"), "ona li lukin e kala")

    def test_dictionary_subject_and_articles(self):
        self.assertEqual(
            self.translator.english_to_kana("the person sees the fish"),
            "jan li [sees] e kala",
        )

    def test_subject_placeholder_keeps_case(self):
        self.assertEqual(
            self.translator.english_to_kana("Zorp eats fish"),
            "[Zorp] li [eats] e kala",
        )

    def test_object_marker_only_before_first_entity(self):
        self.assertEqual(self.translator.english_to_kana("i want big water"), "mi wile suli e telo")
        self.assertEqual(self.translator.english_to_kana("i want water fire"), "mi wile e telo seli")

    def test_unknown_object_word(self):
        self.assertEqual(self.translator.english_to_kana("i want zorp"), "mi wile [zorp]")

    def test_number_counts_as_entity(self):
        self.assertEqual(self.translator.english_to_kana("i have two"), "mi jo e tu")

    def test_modifiers_trail_the_sentence(self):
        self.assertEqual(self.translator.english_to_kana("i really want food"), "mi wile e moku mute")
        self.assertEqual(self.translator.english_to_kana("i don't want food"), "mi wile e moku ala")

    def test_and_is_dropped(self):
        self.assertEqual(
            self.translator.english_to_kana("i want food and water"),
            "mi wile e moku telo",
        )

    def test_question_prepends_se(self):
        self.assertEqual(self.translator.english_to_kana("you want water?"), "se sina wile e telo")

    def test_greetings(self):
        for text in ("hello", "Hello there", "  HELLO friend", "hi friend", "hey", "hey you?"):
            self.assertEqual(self.translator.english_to_kana(text), "yu", text)

    def test_hi_needs_a_following_space(self):
        self.assertEqual(self.translator.english_to_kana("history is good"), "[history] li [is] pona")

    def test_empty_result_echoes_input(self):
        self.assertEqual(self.translator.english_to_kana(""), "")
        self.assertEqual(self.translator.english_to_kana("the and a"), "the and a")

    def test_punctuation_is_ignored(self):
        self.assertEqual(self.translator.english_to_kana("i want food."), "mi wile e moku")


class TestKanaToEnglish(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.translator = Translator()

    def test_subject_verb_object(self):
        self.assertEqual(self.translator.kana_to_english("mi wile e moku"), "I want food.")

    def test_question(self):
        self.assertEqual(self.translator.kana_to_english("se sina lon"), "you located-at?")

    def test_speak_good(self):
        self.assertEqual(self.translator.kana_to_english("mi toki pona"), "I speak good.")

    def test_third_person_sentence(self):
        self.assertEqual(self.translator.kana_to_english("ona li toki e ijo"), "they speak thing.")

    def test_negated_verb(self):
        self.assertEqual(
            self.translator.kana_to_english("ona li ala lukin e kala"),
            "they do not see fish.",
        )

    def test_negation_without_following_verb_is_lost(self):
        self.assertEqual(self.translator.kana_to_english("mi wile ala"), "I want.")

    def test_negation_consumed_once(self):
        self.assertEqual(
            self.translator.kana_to_english("ona li ala lukin kute"),
            "they do not see hear.",
        )

    def test_pronoun_substitution_only_for_subject(self):
        self.assertEqual(self.translator.kana_to_english("sina li olin e mi"), "you love i.")

    def test_greeting_shortcut(self):
        for text in ("yu", "Yu pona", "y", " YU "):
            self.assertEqual(self.translator.kana_to_english(text), "hello", text)

    def test_greeting_mid_sentence(self):
        self.assertEqual(self.translator.kana_to_english("mi yu"), "I hello.")

    def test_en_is_and(self):
        self.assertEqual(
            self.translator.kana_to_english("mi en sina li pona"),
            "I and you good.",
        )

    def test_pi_is_dropped(self):
        self.assertEqual(
            self.translator.kana_to_english("jan pi toki pona li lape"),
            "person speak good sleep.",
        )

    def test_unknown_word_placeholder(self):
        self.assertEqual(self.translator.kana_to_english("mi Zorp"), "I [Zorp].")

    def test_case_insensitive_words(self):
        self.assertEqual(self.translator.kana_to_english("Mi Wile E Moku"), "I want food.")

    def test_question_mark_alone_is_not_a_question(self):
        self.assertEqual(self.translator.kana_to_english("sina lon?"), "you located-at.")

    def test_empty_result_echoes_input(self):
        self.assertEqual(self.translator.kana_to_english(""), "")
        self.assertEqual(self.translator.kana_to_english("li e"), "li e")


class TestTranslate(unittest.TestCase):

    def test_explicit_directions(self):
        for direction in ("to", "en2k", "en-kana"):
            self.assertEqual(translate("i want food", direction), "mi wile e moku")
        for direction in ("from", "k2en", "kana-en"):
            self.assertEqual(translate("mi wile e moku", direction), "I want food.")

    def test_auto_detects_kana(self):
        self.assertEqual(translate("mi toki pona", "auto"), "I speak good.")
        self.assertEqual(translate("mi toki pona"), "I speak good.")

    def test_auto_detects_english(self):
        self.assertEqual(translate("i want food", "auto"), "mi wile e moku")

    def test_auto_substring_false_positive(self):
        # The letter "e" alone makes the text look like Kana
        self.assertEqual(translate("you are good", "auto"), "[you] [are] [good].")

    def test_unknown_direction_is_auto(self):
        self.assertEqual(translate("mi toki pona", "sideways"), "I speak good.")
        self.assertEqual(translate("mi toki pona", None), "I speak good.")

    def test_deterministic(self):
        for text in ("i want food", "mi wile e moku", "you want water?", "se sina lon"):
            self.assertEqual(translate(text), translate(text))

    def test_module_functions(self):
        self.assertEqual(english_to_kana("i want food"), "mi wile e moku")
        self.assertEqual(kana_to_english("mi wile e moku"), "I want food.")

    def test_never_fails_on_odd_input(self):
        for text in ("", "   ", "?", "!!!", "[x]", "a.b,c", "123"):
            self.assertIsInstance(translate(text, "to"), str)
            self.assertIsInstance(translate(text, "from"), str)


class TestCustomLexicon(unittest.TestCase):

    def test_translator_uses_its_lexicon(self):
        lexicon = build_lexicon([
            LexiconEntry("mi", ("i",), Category.ENTITY),
            LexiconEntry("soweli", ("cat", "animal"), Category.ENTITY),
            LexiconEntry("olin", ("love",), Category.ACTION),
        ])
        translator = Translator(lexicon)
        self.assertEqual(translator.english_to_kana("i love cat"), "mi olin e soweli")
        self.assertEqual(translator.kana_to_english("mi olin e soweli"), "I love cat.")
        self.assertEqual(translator.english_to_kana("i love fish"), "mi olin [fish]")

    def test_empty_lexicon_is_used_as_given(self):
        translator = Translator(build_lexicon([]))
        self.assertEqual(len(translator.lexicon), 0)
        self.assertEqual(translator.kana_to_english("mi"), "[mi].")
        self.assertEqual(translator.kana_to_english("mi wile e moku"), "[mi] [wile] [moku].")

    def test_shared_translator_across_threads(self):
        translator = Translator()
        texts = ["i want food", "mi toki pona", "you want water?"] * 20
        expected = [translator.translate(t) for t in texts]
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(translator.translate, texts))
        self.assertEqual(results, expected)


if __name__ == '__main__':
    unittest.main()
