"""Authenticated bridge session.

A Session is an immutable (address, username) pair. Every call is a fresh
request to the bridge; nothing is cached between calls.
"""

from dataclasses import dataclass, field

import requests

from core import transport
from core.errors import NetworkError
from models.light import Light, LightCommand


@dataclass(frozen=True)
class Session:
    """Authenticated handle on one bridge.

    Attributes:
        address: Bridge IP address or host name
        username: Bridge-issued username (application key)
        timeout: Per-request timeout in seconds
        http: Optional requests.Session for connection reuse
    """
    address: str
    username: str
    timeout: float = transport.DEFAULT_TIMEOUT
    http: requests.Session | None = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        if not self.address:
            raise ValueError("Bridge address must not be empty")
        if not self.username:
            raise ValueError("Username must not be empty")

    def _request(self, method: str, path: str, body: dict | None = None):
        return transport.send(
            self.address, method, f"api/{self.username}/{path}", body,
            timeout=self.timeout, http=self.http,
        )

    def list_lights(self) -> list[tuple[str, Light]]:
        """Fetch all lights in one request.

        Returns:
            (id, Light) pairs in the order the bridge returned them

        Raises:
            UnauthorizedUser: Username is not (or no longer) valid
            BridgeError: Other bridge-reported error
            NetworkError: Bridge unreachable or answer unusable
        """
        lights = self._request('GET', 'lights')
        if not isinstance(lights, dict):
            raise NetworkError('invalid_response', "Light listing is not an object")
        return [(light_id, Light.from_api(light_id, data)) for light_id, data in lights.items()]

    def get_light(self, light_id: str | int) -> Light:
        """Fetch a single light.

        Raises:
            ResourceNotFound: No light with this id
        """
        data = self._request('GET', f"lights/{light_id}")
        if not isinstance(data, dict):
            raise NetworkError('invalid_response', f"Light {light_id} is not an object")
        return Light.from_api(str(light_id), data)

    def set_light_state(self, light_id: str | int,
                        command: LightCommand | dict) -> list[tuple[str, object]]:
        """Change only the given state fields of a light.

        Args:
            light_id: Bridge light id
            command: LightCommand, or a dict of state fields

        Returns:
            (field, value) pairs the bridge acknowledged, in response order

        Raises:
            ResourceNotFound: No light with this id
            InvalidValue: A value is outside the accepted range
            UnauthorizedUser: Username is not (or no longer) valid
            NetworkError: Bridge unreachable or answer unusable
            ValueError: Nothing to change
        """
        if isinstance(command, LightCommand):
            body = command.to_payload()
        else:
            body = dict(command)
            if not body:
                raise ValueError("Light command has no fields set")

        result = self._request('PUT', f"lights/{light_id}/state", body)
        return parse_applied(result)


def parse_applied(result) -> list[tuple[str, object]]:
    """Extract acknowledged fields from a PUT success array.

    [{"success": {"/lights/1/state/on": true}}] -> [('on', True)]
    """
    applied = []
    if not isinstance(result, list):
        return applied
    for entry in result:
        success = entry.get('success') if isinstance(entry, dict) else None
        if not isinstance(success, dict):
            continue
        for address, value in success.items():
            applied.append((address.rstrip('/').rsplit('/', 1)[-1], value))
    return applied
