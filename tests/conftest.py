"""Pytest configuration and fixtures for Hue CLI tests."""

import pytest
from pathlib import Path
from unittest.mock import MagicMock


@pytest.fixture
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


def make_response(payload, status_code=200):
    """Build a fake requests.Response returning payload from .json()."""
    response = MagicMock()
    response.status_code = status_code
    if isinstance(payload, Exception):
        response.json.side_effect = payload
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def response_factory():
    """Return the make_response helper."""
    return make_response


@pytest.fixture
def lights_payload():
    """Two lights as returned by GET /api/<user>/lights."""
    return {
        "1": {
            "name": "Hallway",
            "type": "Extended color light",
            "modelid": "LCT015",
            "state": {
                "on": True, "bri": 200, "hue": 8418, "sat": 140,
                "ct": 366, "xy": [0.4573, 0.41], "alert": "none",
                "effect": "none", "colormode": "ct", "reachable": True,
            },
        },
        "2": {
            "name": "Desk",
            "type": "Dimmable light",
            "modelid": "LWB010",
            "state": {"on": False, "bri": 1, "alert": "none", "reachable": False},
        },
    }
