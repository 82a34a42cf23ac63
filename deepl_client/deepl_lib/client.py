from typing import Any, Dict, List, Optional, Sequence

from .api_client import DEFAULT_API_BASE_URL, api_call
from .exceptions import DeeplAuthorizationError, DeeplDeserializationError
from .options import Formality, SplitSentences, Translation, TranslationOptions, UsageInformation


class DeepL:
    """A DeepL developer account, identified by its API key.

    Create one instance per account and call as many operations on it as
    needed. The instance keeps no state besides its settings, so it can be
    shared freely. No request is made until the first operation is called.

    Every operation issues exactly one blocking request and may raise the
    exceptions from `deepl_lib.exceptions`, or a `requests` exception if the
    server could not be reached at all.

    Example:
        deepl = DeepL(api_key=os.environ["DEEPL_API_KEY"])
        deepl.usage_information()
        # UsageInformation(character_limit=250000, character_count=1450)
        deepl.translate(["ja"], target_language="EN-US", source_language="DE")
        # [Translation(detected_source_language='DE', text='yes')]
    """

    def __init__(
        self,
        api_key: Optional[str],
        api_base_url: str = DEFAULT_API_BASE_URL,
        timeout: Optional[float] = None,
        debug: bool = False
    ) -> None:
        """Creates a client for the account behind `api_key`.

        Args:
            api_key: The DeepL API key. Must not be empty.
            api_base_url: The base URL of the API, without a trailing slash.
            timeout: Optional timeout in seconds applied to every request.
            debug: If True, requests and responses are printed to stderr.

        Raises:
            DeeplAuthorizationError: If no API key was provided.
        """
        if not api_key:
            raise DeeplAuthorizationError("No API key provided.")
        self._api_key = api_key
        self._api_base_url = api_base_url.rstrip("/")
        self._timeout = timeout
        self._debug = debug

    @property
    def api_base_url(self) -> str:
        return self._api_base_url

    def __repr__(self) -> str:
        return f"DeepL(api_base_url={self._api_base_url!r})"

    def _call(self, endpoint: str, payload: Optional[Dict[str, Any]] = None) -> Any:
        return api_call(
            endpoint,
            payload or {},
            self._api_key,
            api_base_url=self._api_base_url,
            timeout=self._timeout,
            debug=self._debug,
        )

    def usage_information(self) -> UsageInformation:
        """Retrieves the API usage and limits of the account.

        This does not consume any translation quota, which also makes it the
        cheapest way to verify an API key.

        Returns:
            The current `UsageInformation`.

        Raises:
            DeeplDeserializationError: If the response lacks the usage fields.
        """
        data = self._call("/usage")
        if not isinstance(data, dict) or "character_count" not in data or "character_limit" not in data:
            raise DeeplDeserializationError("The usage response does not contain the expected fields.")
        return UsageInformation(
            character_limit=data["character_limit"],
            character_count=data["character_count"],
        )

    def source_languages(self) -> Dict[str, str]:
        """Retrieves all available source languages, like `{"DE": "German", ...}`."""
        return self._languages("source")

    def target_languages(self) -> Dict[str, str]:
        """Retrieves all available target languages, like `{"DE": "German", ...}`."""
        return self._languages("target")

    def _languages(self, language_type: str) -> Dict[str, str]:
        data = self._call("/languages", {"type": language_type})
        if not isinstance(data, list) or not data or not isinstance(data[0], dict) or "language" not in data[0]:
            raise DeeplDeserializationError(f"The {language_type} language listing is empty or malformed.")

        # Duplicate codes are not expected from the server; the last one wins.
        try:
            return {entry["language"]: entry.get("name") for entry in data}
        except (KeyError, TypeError, AttributeError) as e:
            raise DeeplDeserializationError(f"Malformed {language_type} language entry in response: {e}") from e

    def translate(
        self,
        texts: Sequence[str],
        target_language: str,
        source_language: Optional[str] = None,
        split_sentences: Optional[SplitSentences] = None,
        preserve_formatting: Optional[bool] = True,
        formality: Optional[Formality] = Formality.DEFAULT
    ) -> List[Translation]:
        """Translates one or more text chunks in a single request.

        Options passed as None are left out of the request entirely, so the
        server applies its own defaults for them.

        Args:
            texts: The text chunks to translate. Must not be empty.
            target_language: Code of the language to translate into (e.g. "DE").
            source_language: Code of the source language. If None, the server
                             detects it.
            split_sentences: How the server splits the input into sentences.
            preserve_formatting: Whether the original formatting is preserved.
            formality: The desired formality of the translation.

        Returns:
            One `Translation` per input chunk, in input order.

        Raises:
            ValueError: If `texts` is empty or `target_language` is missing.
            DeeplDeserializationError: If the response lacks the translations.
        """
        if not target_language:
            raise ValueError("A target language is required.")
        if isinstance(texts, str) or not texts:
            raise ValueError("At least one text to translate is required.")
        if not all(isinstance(text, str) for text in texts):
            raise ValueError("All texts to translate must be strings.")

        options = TranslationOptions(
            target_language=target_language,
            source_language=source_language,
            split_sentences=split_sentences,
            preserve_formatting=preserve_formatting,
            formality=formality,
        )
        payload = {**options.to_payload(), "text": list(texts)}
        data = self._call("/translate", payload)
        if not isinstance(data, dict) or "translations" not in data:
            raise DeeplDeserializationError("The translate response does not contain any translations.")

        try:
            return [
                Translation(
                    detected_source_language=entry["detected_source_language"],
                    text=entry["text"],
                )
                for entry in data["translations"]
            ]
        except (KeyError, TypeError) as e:
            raise DeeplDeserializationError(f"Malformed translation entry in response: {e}") from e
