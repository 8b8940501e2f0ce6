"""HTTP transport for the Hue Bridge v1 API.

Issues one request per call and decodes the bridge's response envelope.
The bridge reports application errors inside HTTP 200 responses as
[{"error": {"type": ..., "address": ..., "description": ...}}]; those are
turned into BridgeError here and nowhere else.
"""

import requests

from core.errors import BridgeError, NetworkError

# Seconds before a single request is abandoned
DEFAULT_TIMEOUT = 5


def build_url(address: str, path: str) -> str:
    """Build the request URL for a bridge address and API path.

    Args:
        address: Bridge IP address or host name
        path: API path such as 'api' or 'api/<user>/lights'

    Returns:
        Absolute http:// URL
    """
    if not address:
        raise ValueError("Bridge address must not be empty")
    return f"http://{address}/{path.lstrip('/')}"


def decode_envelope(payload):
    """Return the success payload, or raise BridgeError for an error entry.

    Args:
        payload: Parsed JSON body from the bridge

    Returns:
        The payload unchanged when it carries no error entry

    Raises:
        BridgeError: (or a subclass) for the first error entry found
    """
    if isinstance(payload, list):
        for entry in payload:
            if isinstance(entry, dict) and isinstance(entry.get('error'), dict):
                raise BridgeError.from_payload(entry['error'])
    return payload


def send(address: str, method: str, path: str, body: dict | None = None, *,
         timeout: float = DEFAULT_TIMEOUT, http=None):
    """Send a request to the bridge and return its decoded JSON payload.

    Args:
        address: Bridge IP address or host name
        method: HTTP method ('GET', 'POST', 'PUT')
        path: API path relative to the bridge root
        body: Optional JSON body
        timeout: Request timeout in seconds
        http: Optional requests.Session for connection reuse

    Returns:
        Decoded JSON payload (dict or list)

    Raises:
        BridgeError: Bridge reported an application error
        NetworkError: Request failed or the body was not usable
    """
    url = build_url(address, path)
    client = http if http is not None else requests

    try:
        response = client.request(method, url, json=body, timeout=timeout)
    except requests.exceptions.Timeout as e:
        raise NetworkError('timeout', f"{method} {url} timed out: {e}") from e
    except requests.exceptions.ConnectionError as e:
        raise NetworkError('connection', f"Cannot connect to {address}: {e}") from e
    except requests.exceptions.RequestException as e:
        raise NetworkError('request', f"{method} {url} failed: {e}") from e

    try:
        payload = response.json()
    except ValueError as e:
        if response.status_code >= 400:
            raise NetworkError('http', f"HTTP {response.status_code} from {url}") from e
        raise NetworkError('invalid_response', f"Response from {url} is not JSON") from e

    payload = decode_envelope(payload)

    if response.status_code >= 400:
        raise NetworkError('http', f"HTTP {response.status_code} from {url}")

    return payload
