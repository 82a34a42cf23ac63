import dataclasses
import unittest

from deepl_client.deepl_lib.options import (
    Formality, SplitSentences, TranslationOptions, UsageInformation
)


class TestTranslationOptions(unittest.TestCase):

    def test_only_target_language_by_default(self):
        options = TranslationOptions(target_language="DE")
        self.assertEqual(options.to_payload(), {"target_lang": "DE"})

    def test_all_options(self):
        options = TranslationOptions(
            target_language="DE",
            source_language="EN",
            split_sentences=SplitSentences.PUNCTUATION,
            preserve_formatting=True,
            formality=Formality.LESS,
        )
        self.assertEqual(options.to_payload(), {
            "target_lang": "DE",
            "source_lang": "EN",
            "split_sentences": "nonewlines",
            "preserve_formatting": "1",
            "formality": "less",
        })

    def test_split_sentences_wire_values(self):
        self.assertEqual(SplitSentences.NONE.value, "0")
        self.assertEqual(SplitSentences.PUNCTUATION.value, "nonewlines")
        self.assertEqual(SplitSentences.PUNCTUATION_AND_NEWLINES.value, "1")

    def test_options_are_immutable(self):
        options = TranslationOptions(target_language="DE")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            options.target_language = "FR"


class TestUsageInformation(unittest.TestCase):

    def test_characters_remaining(self):
        usage = UsageInformation(character_limit=250000, character_count=1450)
        self.assertEqual(usage.characters_remaining, 248550)
        self.assertFalse(usage.limit_reached)

    def test_limit_reached(self):
        usage = UsageInformation(character_limit=500, character_count=520)
        self.assertEqual(usage.characters_remaining, 0)
        self.assertTrue(usage.limit_reached)

    def test_unlimited_account_never_reaches_limit(self):
        self.assertFalse(UsageInformation(character_limit=0, character_count=10).limit_reached)

if __name__ == '__main__':
    unittest.main()
