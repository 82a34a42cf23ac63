from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class SplitSentences(Enum):
    """Controls how the server splits the input into sentences.

    The values are the literal strings the API expects:

    - `NONE`: no splitting at all.
    - `PUNCTUATION`: split on punctuation only.
    - `PUNCTUATION_AND_NEWLINES`: split on punctuation and on newlines
      (the server default).
    """
    NONE = "0"
    PUNCTUATION = "nonewlines"
    PUNCTUATION_AND_NEWLINES = "1"


class Formality(Enum):
    """Controls the register (formal/informal) of the translated text."""
    LESS = "less"
    DEFAULT = "default"
    MORE = "more"


@dataclass(frozen=True)
class UsageInformation:
    """API usage and limits of the account for the current billing period.

    Attributes:
        character_limit: How many characters can be translated per billing
            period, based on the account settings.
        character_count: How many characters were already translated in the
            current billing period.
    """
    character_limit: int
    character_count: int

    @property
    def characters_remaining(self) -> int:
        return max(self.character_limit - self.character_count, 0)

    @property
    def limit_reached(self) -> bool:
        return self.character_limit > 0 and self.character_count >= self.character_limit


@dataclass(frozen=True)
class Translation:
    """A single translated text chunk as returned by the server."""
    detected_source_language: str
    text: str


@dataclass(frozen=True)
class TranslationOptions:
    """The settings of a single translate request.

    Every optional field left as None is omitted from the request instead of
    being sent as an empty value, because the API treats an explicitly empty
    field differently from a missing one.

    Attributes:
        target_language: Code of the language to translate into (e.g. "EN-US").
        source_language: Code of the source language. If None, the server
            detects it.
        split_sentences: How the server splits the input into sentences.
        preserve_formatting: Whether the server keeps the original formatting.
        formality: The desired formality of the translation.
    """
    target_language: str
    source_language: Optional[str] = None
    split_sentences: Optional[SplitSentences] = None
    preserve_formatting: Optional[bool] = None
    formality: Optional[Formality] = None

    def to_payload(self) -> Dict[str, str]:
        """Renders the options as form fields for the translate endpoint."""
        payload = {"target_lang": self.target_language}
        if self.source_language is not None:
            payload["source_lang"] = self.source_language
        if self.split_sentences is not None:
            payload["split_sentences"] = self.split_sentences.value
        if self.preserve_formatting is not None:
            payload["preserve_formatting"] = "1" if self.preserve_formatting else "0"
        if self.formality is not None:
            payload["formality"] = self.formality.value
        return payload
