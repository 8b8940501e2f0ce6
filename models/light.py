"""Light data types for the Hue Bridge v1 API.

Light and LightState are point-in-time reads built from the bridge's
light objects. LightCommand is a partial state update: only the fields
that are set are sent to the bridge.
"""

from dataclasses import dataclass, field, fields


@dataclass(frozen=True)
class LightState:
    """State snapshot of a light. Fields the bridge omits are None."""
    on: bool | None = None
    bri: int | None = None
    hue: int | None = None
    sat: int | None = None
    ct: int | None = None  # mireds
    xy: tuple[float, float] | None = None
    alert: str | None = None
    effect: str | None = None
    colormode: str | None = None
    reachable: bool | None = None

    @classmethod
    def from_api(cls, state: dict) -> 'LightState':
        xy = state.get('xy')
        return cls(
            on=state.get('on'),
            bri=state.get('bri'),
            hue=state.get('hue'),
            sat=state.get('sat'),
            ct=state.get('ct'),
            xy=tuple(xy) if xy is not None else None,
            alert=state.get('alert'),
            effect=state.get('effect'),
            colormode=state.get('colormode'),
            reachable=state.get('reachable'),
        )


@dataclass(frozen=True)
class Light:
    """A light as reported by the bridge.

    `raw` keeps the bridge's object exactly as received.
    """
    id: str
    name: str
    type: str | None
    model_id: str | None
    state: LightState
    raw: dict = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_api(cls, light_id: str, data: dict) -> 'Light':
        return cls(
            id=str(light_id),
            name=data.get('name', ''),
            type=data.get('type'),
            model_id=data.get('modelid'),
            state=LightState.from_api(data.get('state') or {}),
            raw=data,
        )


@dataclass(frozen=True)
class LightCommand:
    """Partial light state update."""
    on: bool | None = None
    bri: int | None = None
    hue: int | None = None
    sat: int | None = None
    ct: int | None = None  # mireds
    xy: tuple[float, float] | None = None
    alert: str | None = None
    effect: str | None = None
    transitiontime: int | None = None  # multiples of 100ms

    def to_payload(self) -> dict:
        """Return the JSON body with unset fields left out.

        Raises:
            ValueError: No field is set
        """
        payload = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            payload[f.name] = list(value) if f.name == 'xy' else value
        if not payload:
            raise ValueError("Light command has no fields set")
        return payload
