"""Configuration loading.

Defaults for the bridge, user and registration timing come from, in order
of precedence:
- command line options (applied by the commands)
- environment variables HUE_BRIDGE and HUE_USER
- the user config file (~/.hue_cli/config.json)
- DEFAULT_CONFIG

The file is only read. Storing credentials is left to the user.
"""

import json
import os
from pathlib import Path

import click

from core.auth import DEFAULT_ATTEMPTS, DEFAULT_INTERVAL
from core.transport import DEFAULT_TIMEOUT

# User configuration file location
CONFIG_FILE = Path.home() / '.hue_cli' / 'config.json'

DEFAULT_CONFIG = {
    'bridge': None,
    'user': None,
    'timeout': DEFAULT_TIMEOUT,
    'register_attempts': DEFAULT_ATTEMPTS,
    'register_interval': DEFAULT_INTERVAL,
}

ENV_OVERRIDES = {
    'HUE_BRIDGE': 'bridge',
    'HUE_USER': 'user',
}

# key: (converter, check, requirement shown in the warning)
NUMERIC_KEYS = {
    'timeout': (float, lambda v: v > 0, "a number greater than 0"),
    'register_attempts': (int, lambda v: v >= 1, "an integer of at least 1"),
    'register_interval': (float, lambda v: v >= 0, "a number of at least 0"),
}


def load_config(path: Path | None = None) -> dict:
    """Load configuration merged over DEFAULT_CONFIG.

    Args:
        path: Config file to read (defaults to CONFIG_FILE)

    Returns:
        Dict with every DEFAULT_CONFIG key present
    """
    path = path or CONFIG_FILE
    config = dict(DEFAULT_CONFIG)

    if path.exists():
        try:
            with open(path, 'r') as f:
                data = json.load(f)
            if isinstance(data, dict):
                config.update({k: v for k, v in data.items() if k in DEFAULT_CONFIG})
            else:
                click.echo(f"Warning: Ignoring {path}: expected a JSON object", err=True)
        except (json.JSONDecodeError, IOError) as e:
            click.echo(f"Warning: Failed to load config from {path}: {e}", err=True)

    for key, (convert, check, requirement) in NUMERIC_KEYS.items():
        value = config[key]
        try:
            if isinstance(value, bool):
                raise ValueError(value)
            converted = convert(value)
            if not check(converted):
                raise ValueError(value)
        except (TypeError, ValueError):
            click.echo(f"Warning: Ignoring {key}={value!r} in {path}: expected {requirement}",
                       err=True)
            converted = DEFAULT_CONFIG[key]
        config[key] = converted

    for env_name, key in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            config[key] = value

    return config


def config_snippet(bridge: str, user: str, path: Path | None = None) -> str:
    """Return shell commands that write a config file for bridge and user."""
    path = path or CONFIG_FILE
    body = json.dumps({'bridge': bridge, 'user': user}, indent=2)
    return (
        f"mkdir -p {path.parent}\n"
        f"cat > {path} << 'EOF'\n"
        f"{body}\n"
        f"EOF\n"
        f"chmod 600 {path}"
    )
