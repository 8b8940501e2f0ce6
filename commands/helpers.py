"""Shared helpers for CLI commands: option resolution and error reporting."""

import click

from core.errors import (
    BridgeError,
    DiscoveryError,
    HueError,
    InvalidValue,
    NetworkError,
    RegistrationDenied,
    RegistrationTimeout,
    ResourceNotFound,
    UnauthorizedUser,
)
from core.session import Session


def resolve_session(ctx: click.Context, bridge: str | None, user: str | None) -> Session:
    """Build a Session from command options, falling back to config.

    Exits with status 1 when bridge or user is missing.
    """
    config = ctx.obj['config']
    bridge = bridge or config.get('bridge')
    user = user or config.get('user')
    if not bridge or not user:
        click.secho("Error: User and bridge must be specified "
                    "(options, HUE_BRIDGE/HUE_USER or config file).", fg='red', err=True)
        ctx.exit(1)
    if ctx.obj.get('verbose'):
        click.echo(f"Bridge: {bridge}, user: {user}")
    return Session(bridge, user, timeout=config['timeout'])


def error_message(error: HueError | ValueError) -> str:
    """Return an actionable message for a core error."""
    if isinstance(error, UnauthorizedUser):
        return f"Unauthorised user: {error.description}. Run 'register' to obtain a new user."
    if isinstance(error, ResourceNotFound):
        return f"Not found: {error.description}"
    if isinstance(error, InvalidValue):
        return f"Value out of range: {error.description}"
    if isinstance(error, BridgeError):
        return f"Bridge error {error.type}: {error.description}"
    if isinstance(error, RegistrationTimeout):
        if error.bridge_reachable:
            return (f"Link button was not pressed within {error.attempts} attempts. "
                    "Press the button on the bridge and try again.")
        last_error = error.last_error
        if isinstance(last_error, NetworkError) and last_error.kind == 'invalid_response':
            return (f"Bridge answered without a username after {error.attempts} attempts: "
                    f"{last_error.message}")
        return f"Bridge unreachable after {error.attempts} attempts: {error.last_error}"
    if isinstance(error, RegistrationDenied):
        return f"Bridge refused registration: {error.error.description}"
    if isinstance(error, DiscoveryError):
        if error.rate_limited:
            return ("Philips discovery service rate limit reached. "
                    "Pass the bridge address with --bridge instead.")
        return str(error)
    if isinstance(error, NetworkError):
        return f"Bridge unreachable ({error.kind}): {error.message}"
    return str(error)


def fail(ctx: click.Context, error: HueError | ValueError):
    """Print an error message on stderr and exit with status 1."""
    click.secho(f"✗ {error_message(error)}", fg='red', err=True)
    ctx.exit(1)


def require_non_empty(ctx, param, value):
    """Click callback rejecting empty or blank option values."""
    if value is not None and not value.strip():
        raise click.BadParameter("must not be empty")
    return value
