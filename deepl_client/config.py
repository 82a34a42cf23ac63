import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .deepl_lib.api_client import DEFAULT_API_BASE_URL

API_KEY_ENV_VAR = "DEEPL_API_KEY"
API_BASE_URL_ENV_VAR = "DEEPL_API_BASE_URL"

class ConfigurationError(Exception):
    """Raised when the command-line tool cannot be configured from the environment."""
    pass

@dataclass(frozen=True)
class Settings:
    """Settings of the command-line tool, read once from the environment.

    Attributes:
        api_key: The DeepL API key.
        api_base_url: The base URL of the DeepL API.
    """
    api_key: str
    api_base_url: str = DEFAULT_API_BASE_URL

def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Reads the tool's settings from the process environment.

    This is the only place that looks at environment variables; the client
    library itself is always handed its settings explicitly.

    Args:
        environ: The mapping to read from. Defaults to `os.environ`.

    Returns:
        The loaded `Settings`.

    Raises:
        ConfigurationError: If `DEEPL_API_KEY` is missing or empty.
    """
    if environ is None:
        environ = os.environ

    api_key = environ.get(API_KEY_ENV_VAR, "").strip()
    if not api_key:
        raise ConfigurationError(
            f"No {API_KEY_ENV_VAR} found. Please provide your API key in this environment variable."
        )

    api_base_url = environ.get(API_BASE_URL_ENV_VAR) or DEFAULT_API_BASE_URL
    return Settings(api_key=api_key, api_base_url=api_base_url)
