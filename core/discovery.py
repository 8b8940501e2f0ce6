"""Bridge discovery via the Philips N-UPnP service."""

import requests

from core.errors import DiscoveryError
from core.transport import DEFAULT_TIMEOUT, send

DISCOVERY_URL = 'https://discovery.meethue.com/'


def discover(url: str = DISCOVERY_URL, *, timeout: float = DEFAULT_TIMEOUT,
             http=None) -> list[str]:
    """Discover Hue bridges on the network using N-UPnP.

    Uses the Philips discovery service to find bridges on the same network.

    Args:
        url: Discovery endpoint
        timeout: Request timeout in seconds
        http: Optional requests.Session

    Returns:
        Distinct bridge addresses in the order reported.
        Empty list if the service knows no bridge.

    Raises:
        DiscoveryError: Service unreachable, rate limited or malformed answer
    """
    client = http if http is not None else requests

    try:
        response = client.get(url, timeout=timeout)
        response.raise_for_status()
        bridges = response.json()
    except requests.exceptions.HTTPError as e:
        status = getattr(e.response, 'status_code', None)
        if status == 429:
            raise DiscoveryError("Philips discovery service rate limit reached",
                                 rate_limited=True) from e
        raise DiscoveryError(f"Bridge discovery failed: {e}") from e
    except ValueError as e:
        # requests' JSONDecodeError is both a ValueError and a RequestException
        raise DiscoveryError(f"Failed to parse discovery response: {e}") from e
    except requests.exceptions.RequestException as e:
        raise DiscoveryError(f"Bridge discovery failed: {e}") from e

    if not isinstance(bridges, list):
        raise DiscoveryError("Failed to parse discovery response: expected a list")

    addresses = []
    for bridge in bridges:
        address = bridge.get('internalipaddress') if isinstance(bridge, dict) else None
        if address and address not in addresses:
            addresses.append(address)
    return addresses


def probe_bridge(address: str, *, timeout: float = DEFAULT_TIMEOUT, http=None) -> dict:
    """Fetch the unauthenticated bridge config to confirm a bridge answers.

    Returns:
        Dict with name, bridgeid and apiversion (missing keys omitted)

    Raises:
        NetworkError: Bridge did not answer
        BridgeError: Bridge answered with an error entry
    """
    config = send(address, 'GET', 'api/config', timeout=timeout, http=http)
    if not isinstance(config, dict):
        return {}
    return {key: config[key] for key in ('name', 'bridgeid', 'apiversion') if key in config}
