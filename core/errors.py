"""Error types for Hue Bridge interactions.

All errors raised by the core derive from HueError so commands can catch
them in one place while still telling them apart:
- NetworkError: the bridge (or discovery service) could not be talked to
- BridgeError: the bridge answered with an error entry in its response
- DiscoveryError: the discovery service could not be queried
- RegistrationError: the push-link handshake ended without a username
"""


class HueError(Exception):
    """Base error for Hue client failures."""


class NetworkError(HueError):
    """Network-level failure (timeout, refused connection, DNS, bad body)."""

    def __init__(self, kind: str, message: str):
        super().__init__(f"{kind}: {message}")
        self.kind = kind
        self.message = message


class BridgeError(HueError):
    """Application error reported by the bridge in an error envelope."""

    type = None

    def __init__(self, error_type: int, address: str = '', description: str = ''):
        super().__init__(f"{description} (type {error_type}, address {address or '/'})")
        self.type = error_type
        self.address = address
        self.description = description

    @classmethod
    def from_payload(cls, error: dict) -> 'BridgeError':
        """Build the matching BridgeError subclass from an error dict.

        Args:
            error: The inner dict of {"error": {...}}

        Returns:
            Instance of the subclass registered for the error type,
            or plain BridgeError for undocumented types
        """
        error_type = error.get('type')
        try:
            error_type = int(error_type)
        except (TypeError, ValueError):
            error_type = -1
        error_cls = BRIDGE_ERROR_TYPES.get(error_type, BridgeError)
        return error_cls(
            error_type,
            str(error.get('address', '')),
            str(error.get('description', '')),
        )


class UnauthorizedUser(BridgeError):
    """Username is unknown to the bridge or has been revoked."""
    type = 1


class InvalidJson(BridgeError):
    type = 2


class ResourceNotFound(BridgeError):
    """Requested resource (e.g. a light id) does not exist."""
    type = 3


class MethodNotAvailable(BridgeError):
    type = 4


class MissingParameters(BridgeError):
    type = 5


class ParameterNotAvailable(BridgeError):
    type = 6


class InvalidValue(BridgeError):
    """Parameter value is out of the accepted range."""
    type = 7


class ParameterNotModifiable(BridgeError):
    type = 8


class LinkButtonNotPressed(BridgeError):
    """Push-link button has not been pressed; registration may be retried."""
    type = 101


class DeviceIsOff(BridgeError):
    type = 201


class InternalError(BridgeError):
    type = 901


BRIDGE_ERROR_TYPES = {
    cls.type: cls
    for cls in (
        UnauthorizedUser,
        InvalidJson,
        ResourceNotFound,
        MethodNotAvailable,
        MissingParameters,
        ParameterNotAvailable,
        InvalidValue,
        ParameterNotModifiable,
        LinkButtonNotPressed,
        DeviceIsOff,
        InternalError,
    )
}


class DiscoveryError(HueError):
    """Discovery service unreachable or returned an unusable answer."""

    def __init__(self, message: str, rate_limited: bool = False):
        super().__init__(message)
        self.rate_limited = rate_limited


class RegistrationError(HueError):
    """Push-link registration did not produce a username."""


class RegistrationDenied(RegistrationError):
    """Bridge rejected the registration with a non-retryable error."""

    def __init__(self, error: BridgeError):
        super().__init__(f"Registration denied: {error.description or error}")
        self.error = error


class RegistrationTimeout(RegistrationError):
    """Attempt budget exhausted without success or denial."""

    def __init__(self, attempts: int, last_error: HueError | None = None,
                 bridge_reachable: bool = False):
        if bridge_reachable:
            reason = "link button was not pressed"
        else:
            reason = "bridge unreachable"
        super().__init__(f"Registration timed out after {attempts} attempts: {reason}")
        self.attempts = attempts
        self.last_error = last_error
        self.bridge_reachable = bridge_reachable
