"""Utility functions for displaying lights.

- show: Render optional values with an N/A placeholder
- kelvin_to_mired / mired_to_kelvin: Colour temperature unit conversion
- light_row / light_table / light_details: Text layout for the show command
"""

from models.light import Light

NOT_AVAILABLE = 'N/A'


def show(value) -> str:
    """Return str(value), or N/A for None."""
    if value is None:
        return NOT_AVAILABLE
    return str(value)


def kelvin_to_mired(kelvin: int) -> int:
    """Convert a colour temperature in Kelvin to mireds (rounded)."""
    if kelvin <= 0:
        raise ValueError("Colour temperature must be positive")
    return round(1_000_000 / kelvin)


def mired_to_kelvin(mired: int | None) -> int | None:
    if not mired:
        return None
    return round(1_000_000 / mired)


def _kelvin_label(mired: int | None) -> str:
    kelvin = mired_to_kelvin(mired)
    return f"{kelvin}K" if kelvin else NOT_AVAILABLE


def _on_label(on: bool | None) -> str:
    if on is None:
        return NOT_AVAILABLE
    return 'on' if on else 'off'


def light_row(light: Light, name_width: int) -> str:
    state = light.state
    return (
        f"{light.id:>2} {light.name:<{name_width}} "
        f"{_on_label(state.on):<3} {show(state.bri):>3} {show(state.hue):>5} "
        f"{show(state.sat):>3} {_kelvin_label(state.ct):>6} "
        f"{show(state.colormode):<9} {show(state.xy)}"
    )


def light_table(lights: list[tuple[str, Light]]) -> list[str]:
    """Format lights as a header line followed by one row per light."""
    name_width = max([len(light.name) for _, light in lights] + [4])
    header = f"id {'name':<{name_width}} on  bri hue   sat     ct colormode xy"
    return [header] + [light_row(light, name_width) for _, light in lights]


def light_details(light: Light) -> list[str]:
    """Format one light as an indented key/value listing."""
    state = light.state
    return [
        f"id: {light.id}",
        f"name: {light.name}",
        "state:",
        f"    on: {show(state.on)}",
        f"    bri: {show(state.bri)}",
        f"    hue: {show(state.hue)}",
        f"    sat: {show(state.sat)}",
        f"    effect: {show(state.effect)}",
        f"    ct: {_kelvin_label(state.ct)}",
        f"    alert: {show(state.alert)}",
        f"    colormode: {show(state.colormode)}",
        f"    xy: {show(state.xy)}",
        f"    reachable: {show(state.reachable)}",
    ]
