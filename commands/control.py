"""
Light commands: show light state and change it.
"""

import click

from commands.helpers import fail, resolve_session
from core.errors import HueError
from models.light import LightCommand
from models.utils import kelvin_to_mired, light_details, light_table


@click.command(name='show')
@click.option('--bridge', '-b', help='Bridge address')
@click.option('--user', '-u', help='Username registered on the bridge')
@click.option('--id', '-i', 'light_id', help='Show a single light')
@click.pass_context
def show_command(ctx, bridge: str | None, user: str | None, light_id: str | None):
    """Show lights and their state.

    \b
    Examples:
      hue-cli show
      hue-cli show --id 3
    """
    session = resolve_session(ctx, bridge, user)

    try:
        if light_id is None:
            lines = light_table(session.list_lights())
        else:
            lines = light_details(session.get_light(light_id))
    except (HueError, ValueError) as e:
        fail(ctx, e)

    for line in lines:
        click.echo(line)


@click.command(name='light')
@click.option('--bridge', '-b', help='Bridge address')
@click.option('--user', '-u', help='Username registered on the bridge')
@click.option('--id', '-i', 'light_id', required=True, help='Light id')
@click.option('--on/--off', 'on', default=None, help='Turn light on or off')
@click.option('--bri', type=click.IntRange(1, 254), help='Brightness (1-254)')
@click.option('--hue', type=click.IntRange(0, 65535), help='Hue (0-65535)')
@click.option('--sat', type=click.IntRange(0, 254), help='Saturation (0-254)')
@click.option('--ct', type=click.IntRange(2000, 6500), help='Colour temperature in Kelvin (2000-6500)')
@click.option('--transition', type=click.IntRange(min=0), help='Transition time in 100ms steps')
@click.pass_context
def light_command(ctx, bridge: str | None, user: str | None, light_id: str,
                  on: bool | None, bri: int | None, hue: int | None, sat: int | None,
                  ct: int | None, transition: int | None):
    """Change the state of a light. Only given options are changed.

    \b
    Examples:
      hue-cli light --id 1 --on --bri 200
      hue-cli light --id 1 --ct 2700
      hue-cli light --id 1 --off
    """
    command = LightCommand(
        on=on,
        bri=bri,
        hue=hue,
        sat=sat,
        ct=kelvin_to_mired(ct) if ct is not None else None,
        transitiontime=transition,
    )
    if command == LightCommand():
        click.echo("Error: Nothing to change. Use --on/--off, --bri, --hue, --sat or --ct.",
                   err=True)
        ctx.exit(1)

    session = resolve_session(ctx, bridge, user)

    try:
        applied = session.set_light_state(light_id, command)
    except (HueError, ValueError) as e:
        fail(ctx, e)

    for field, value in applied:
        click.secho(f"✓ {field} = {value}", fg='green')
