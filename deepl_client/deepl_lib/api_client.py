import json
import sys
from typing import Any, Dict, Optional

import requests

from .exceptions import DeeplAuthorizationError, DeeplDeserializationError, DeeplServerError

# Base URL of the DeepL Pro API. Accounts on the free plan use
# https://api-free.deepl.com/v2 instead; it can be overridden through the
# DEEPL_API_BASE_URL environment variable or the client constructor.
DEFAULT_API_BASE_URL: str = "https://api.deepl.com/v2"

AUTHORIZATION_FAILED_MESSAGE = "Authorization failed, is your API key correct?"
SERVER_ERROR_TEMPLATE = "An error occurred while communicating with the DeepL server: '{message}'."

_AUTH_FIELD = "auth_key"


def _masked(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Returns a copy of the payload that is safe to print."""
    return {key: ("***" if key == _AUTH_FIELD else value) for key, value in payload.items()}


def _server_error(response: requests.Response) -> DeeplServerError:
    """Builds the error for a non-200, non-authorization response.

    The vendor usually explains the failure in a JSON body with a `message`
    field. If the body is not JSON, or carries no message, the raw status code
    is all the caller gets.
    """
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict) and data.get("message") is not None:
        return DeeplServerError(SERVER_ERROR_TEMPLATE.format(message=data["message"]), response.status_code)
    return DeeplServerError(str(response.status_code), response.status_code)


def api_call(
    endpoint: str,
    payload: Dict[str, Any],
    api_key: str,
    api_base_url: str = DEFAULT_API_BASE_URL,
    timeout: Optional[float] = None,
    debug: bool = False
) -> Any:
    """Sends a request to the DeepL API and classifies the response.

    This is the single point of contact with the server. The payload and the
    API key are sent as a form-encoded POST body to `api_base_url + endpoint`;
    list values are sent as repeated form fields, which is how the API accepts
    several `text` entries. The response is then classified in a strict order:

    1.  200 OK: the body is parsed as JSON and returned as is. Interpreting the
        individual fields is left to the caller.
    2.  401 Unauthorized or 403 Forbidden: the key was rejected. This check
        wins over any message the server may have put into the body.
    3.  Anything else: a server error, carrying the vendor's message if the
        body has one, or the bare status code otherwise.

    Optional debug output prints the request (with the API key masked) and the
    raw response to stderr.

    Args:
        endpoint: The API endpoint to target, including the leading slash
                  (e.g. "/translate").
        payload: The form fields of the request, without the API key.
        api_key: The DeepL API key to authenticate with.
        api_base_url: The base URL of the API.
        timeout: Optional request timeout in seconds. None waits indefinitely.
        debug: If True, the request and the response are printed to stderr.

    Returns:
        The parsed JSON body of a successful response.

    Raises:
        DeeplAuthorizationError: If the server answered with 401 or 403.
        DeeplServerError: If the server answered with any other non-200 status.
        DeeplDeserializationError: If a 200 response body is not valid JSON.
        requests.exceptions.RequestException: If the request itself failed
            (unreachable host, timeout, ...).
    """
    form = {**payload, _AUTH_FIELD: api_key}
    url = f"{api_base_url}{endpoint}"
    if debug:
        print(f"\n--- DEBUG: API Request to endpoint: {endpoint} ---", file=sys.stderr)
        print(f"--- DEBUG: API Request Payload ---\n{json.dumps(_masked(form), indent=2)}\n-------------------------------------", file=sys.stderr)

    response = requests.post(url, data=form, timeout=timeout)

    if debug:
        print(f"--- DEBUG: API Response ({response.status_code}) ---\n{response.text}\n--------------------------------", file=sys.stderr)

    if response.status_code == requests.codes.ok:
        try:
            return response.json()
        except ValueError as e:
            raise DeeplDeserializationError(f"Could not decode the response from {endpoint}: {e}") from e

    if response.status_code in (requests.codes.unauthorized, requests.codes.forbidden):
        raise DeeplAuthorizationError(AUTHORIZATION_FAILED_MESSAGE)

    raise _server_error(response)
