"""
Push-link registration for Hue Bridge.

Creating an API user requires someone to press the physical link button on
the bridge. Until that happens the bridge answers "link button not pressed"
(error type 101), so registration polls the bridge until it hands out a
username, rejects the request, or the attempt budget runs out.

The decision logic is a small state machine kept free of I/O:
classify() turns one attempt's result into an Outcome and next_step()
decides what happens next. register() drives it with an injectable
send() and sleep().
"""

import time
from enum import Enum

from core import transport
from core.errors import (
    BridgeError,
    HueError,
    LinkButtonNotPressed,
    NetworkError,
    RegistrationDenied,
    RegistrationTimeout,
)

# Defaults for the CLI; the protocol does not mandate them
DEFAULT_ATTEMPTS = 12
DEFAULT_INTERVAL = 5.0


class Outcome(Enum):
    """Result of a single create-user attempt."""
    SUCCESS = 'success'
    PENDING = 'pending'
    DENIED = 'denied'
    NETWORK_FAILURE = 'network_failure'


class Step(Enum):
    """What register() does after an attempt."""
    DONE = 'done'
    FAIL = 'fail'
    RETRY = 'retry'
    TIMEOUT = 'timeout'


def extract_username(payload) -> str | None:
    """Return the username from a create-user success payload, if present.

    Expected shape: [{"success": {"username": "<token>"}}]
    """
    entries = payload if isinstance(payload, list) else [payload]
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        success = entry.get('success')
        if isinstance(success, dict) and success.get('username'):
            return success['username']
    return None


def classify(result) -> Outcome:
    """Map an attempt result (payload or raised HueError) to an Outcome.

    Args:
        result: Decoded payload on success, or the HueError the attempt raised

    Returns:
        The Outcome for the state machine
    """
    if isinstance(result, LinkButtonNotPressed):
        return Outcome.PENDING
    if isinstance(result, BridgeError):
        return Outcome.DENIED
    if isinstance(result, NetworkError):
        return Outcome.NETWORK_FAILURE
    if extract_username(result):
        return Outcome.SUCCESS
    # A 200 answer without a username is as useless as a garbled one
    return Outcome.NETWORK_FAILURE


def next_step(outcome: Outcome, attempt: int, max_attempts: int) -> Step:
    """Decide the next step after attempt number `attempt` (1-based).

    Success and denial short-circuit; only pending and network failures
    consume the attempt budget.
    """
    if outcome is Outcome.SUCCESS:
        return Step.DONE
    if outcome is Outcome.DENIED:
        return Step.FAIL
    if attempt >= max_attempts:
        return Step.TIMEOUT
    return Step.RETRY


def register(address: str, device_type: str,
             max_attempts: int = DEFAULT_ATTEMPTS,
             retry_interval: float = DEFAULT_INTERVAL, *,
             sleep=time.sleep, on_pending=None, send=transport.send,
             timeout: float = transport.DEFAULT_TIMEOUT) -> str:
    """Create a new API user via link button authentication.

    Args:
        address: Bridge IP address or host name
        device_type: Application identifier sent as 'devicetype'
        max_attempts: Number of create-user requests before giving up
        retry_interval: Seconds to wait between attempts
        sleep: Delay function, called with retry_interval
        on_pending: Optional callback(attempt, max_attempts, outcome)
            invoked before each wait
        send: Transport function used for the request
        timeout: Per-request timeout in seconds

    Returns:
        The bridge-issued username

    Raises:
        RegistrationDenied: Bridge rejected the request (not retryable)
        RegistrationTimeout: Attempts exhausted while pending or unreachable
        ValueError: Empty address or device type, or max_attempts < 1
    """
    if not address:
        raise ValueError("Bridge address must not be empty")
    if not device_type:
        raise ValueError("Device type must not be empty")
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    payload = {'devicetype': device_type}
    last_error = None
    bridge_reachable = False

    for attempt in range(1, max_attempts + 1):
        try:
            result = send(address, 'POST', 'api', payload, timeout=timeout)
        except HueError as e:
            result = e

        outcome = classify(result)
        if outcome is Outcome.PENDING:
            bridge_reachable = True
        if isinstance(result, HueError):
            last_error = result
        elif outcome is Outcome.NETWORK_FAILURE:
            last_error = NetworkError('invalid_response', f"No username in response: {result!r}")

        step = next_step(outcome, attempt, max_attempts)
        if step is Step.DONE:
            return extract_username(result)
        if step is Step.FAIL:
            raise RegistrationDenied(result)
        if step is Step.TIMEOUT:
            break

        if on_pending is not None:
            on_pending(attempt, max_attempts, outcome)
        sleep(retry_interval)

    raise RegistrationTimeout(max_attempts, last_error, bridge_reachable)
