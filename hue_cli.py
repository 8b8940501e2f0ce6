#!/usr/bin/env python3
"""
Hue CLI
Discover a Philips Hue bridge, register a user and control lights.
"""

import click

from core.config import load_config
from commands.setup import ColouredGroup, discover_command, register_command
from commands.control import show_command, light_command


@click.group(
    cls=ColouredGroup,
    context_settings={'help_option_names': ['-h', '--help']}
)
@click.option('--verbose', '-v', is_flag=True, help='Show resolved arguments and configuration')
@click.version_option(version='0.1.0', prog_name='Hue CLI')
@click.pass_context
def cli(ctx, verbose: bool):
    """Hue CLI - control Philips Hue lights.

Bridge and user default to HUE_BRIDGE/HUE_USER or ~/.hue_cli/config.json.
Run 'register' first to obtain a user."""
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose
    ctx.obj['config'] = load_config()
    if verbose:
        click.echo(f"Configuration: {ctx.obj['config']}")


cli.add_command(discover_command)
cli.add_command(register_command)
cli.add_command(show_command)
cli.add_command(light_command)


if __name__ == '__main__':
    cli()
