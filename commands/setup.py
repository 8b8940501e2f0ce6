"""
Setup commands for Hue CLI: bridge discovery and push-link registration.

Contains custom Click group class for coloured help output and typo suggestions.
"""

import click

from commands.helpers import fail, require_non_empty
from core.auth import Outcome, register
from core.config import CONFIG_FILE, config_snippet
from core.discovery import discover, probe_bridge
from core.errors import HueError


class ColouredGroup(click.Group):
    """Custom Group class that adds colour to usage output and suggests similar commands."""

    def resolve_command(self, ctx, args):
        """Resolve command with suggestions for typos."""
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            if 'No such command' in str(e):
                cmd_name = args[0] if args else ''
                suggestions = self._get_suggestions(ctx, cmd_name)

                if suggestions:
                    error_msg = f"No such command '{cmd_name}'.\n\n"
                    error_msg += click.style("Did you mean one of these?\n", fg='yellow')
                    for suggestion in suggestions:
                        error_msg += click.style(f"  • {suggestion}\n", fg='green')
                    raise click.UsageError(error_msg, ctx)
            raise

    def _get_suggestions(self, ctx, cmd_name):
        """Commands sharing a prefix with, or containing, cmd_name."""
        if not cmd_name:
            return []
        cmd_lower = cmd_name.lower()
        return [
            command for command in self.list_commands(ctx)
            if command.startswith(cmd_lower[:2]) or cmd_lower in command
        ]

    def format_usage(self, ctx, formatter):
        """Format the usage line with colour."""
        formatter.write_text(
            click.style('Usage: ', fg='cyan', bold=True) +
            click.style(f'{ctx.command_path} [OPTIONS] COMMAND [ARGS]...', fg='white')
        )


@click.command(name='discover')
@click.option('--check', is_flag=True, help='Query each bridge to confirm it answers')
@click.pass_context
def discover_command(ctx, check: bool):
    """Discover Hue bridges on the local network.

    \b
    Examples:
      hue-cli discover
      hue-cli discover --check
    """
    config = ctx.obj['config']
    try:
        addresses = discover(timeout=config['timeout'])
    except HueError as e:
        fail(ctx, e)

    if not addresses:
        click.secho("⚠ No bridges found", fg='yellow')
        return

    click.secho(f"Found {len(addresses)} Hue bridge{'s' if len(addresses) > 1 else ''}:",
                fg='cyan', bold=True)
    for address in addresses:
        if not check:
            click.echo(f"  {address}")
            continue
        try:
            info = probe_bridge(address, timeout=config['timeout'])
        except HueError as e:
            click.echo(f"  {address}  " + click.style(f"unreachable ({e})", fg='red'))
            continue
        name = info.get('name', 'Philips hue')
        click.echo(f"  {address}  {name} (API {info.get('apiversion', '?')})")


@click.command(name='register')
@click.option('--bridge', '-b', help='Bridge address (discovered when omitted)')
@click.option('--device-type', '-d', required=True, callback=require_non_empty,
              help='Application identifier, e.g. "hue-cli#laptop"')
@click.option('--attempts', type=click.IntRange(min=1), help='Number of registration attempts')
@click.option('--interval', type=click.FloatRange(min=0), help='Seconds between attempts')
@click.pass_context
def register_command(ctx, bridge: str | None, device_type: str,
                     attempts: int | None, interval: float | None):
    """Register this device with the bridge and print the new user.

    Press the link button on the bridge when prompted.

    \b
    Examples:
      hue-cli register -d "hue-cli#laptop"
      hue-cli register -b 192.168.1.2 -d "hue-cli#laptop" --attempts 24
    """
    config = ctx.obj['config']
    verbose = ctx.obj.get('verbose')
    bridge = bridge or config.get('bridge')
    attempts = attempts or config['register_attempts']
    if interval is None:
        interval = config['register_interval']

    if not bridge:
        if verbose:
            click.echo("Discovering bridge.")
        try:
            addresses = discover(timeout=config['timeout'])
        except HueError as e:
            fail(ctx, e)
        if not addresses:
            click.secho("✗ No bridge found. Pass the address with --bridge.", fg='red', err=True)
            ctx.exit(1)
        bridge = addresses[0]

    if verbose:
        click.echo(f"Trying to register, bridge: {bridge}")

    def on_pending(attempt, max_attempts, outcome):
        if outcome is Outcome.PENDING:
            click.secho(f"Please press the link button on the bridge. "
                        f"Retrying in {interval:g} seconds ({attempt}/{max_attempts})",
                        fg='yellow')
        else:
            click.secho(f"Bridge did not answer. "
                        f"Retrying in {interval:g} seconds ({attempt}/{max_attempts})",
                        fg='yellow')

    try:
        user = register(bridge, device_type, attempts, interval,
                        on_pending=on_pending, timeout=config['timeout'])
    except (HueError, ValueError) as e:
        fail(ctx, e)

    click.secho(f'✓ Successfully registered user: "{user}"', fg='green', bold=True)
    click.echo()
    click.echo(f"To use this bridge by default, create {CONFIG_FILE}:")
    click.echo(config_snippet(bridge, user))
