"""Tests for CLI commands using click's CliRunner.

Core calls are mocked; these tests check option handling and messages.
"""

import json
import pytest
from click.testing import CliRunner
from unittest.mock import patch

from core.config import DEFAULT_CONFIG
from core.errors import (
    DiscoveryError,
    NetworkError,
    RegistrationDenied,
    RegistrationTimeout,
    ResourceNotFound,
    UnauthorizedUser,
    BridgeError,
)
from hue_cli import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def config():
    config = dict(DEFAULT_CONFIG)
    config.update({'bridge': '192.168.1.2', 'user': 'abc123', 'register_interval': 0})
    with patch('hue_cli.load_config', return_value=config):
        yield config


class TestDiscoverCommand:

    @patch('commands.setup.discover')
    def test_lists_addresses(self, mock_discover, runner, config):
        mock_discover.return_value = ['192.168.1.2', '192.168.1.3']

        result = runner.invoke(cli, ['discover'])

        assert result.exit_code == 0
        assert 'Found 2 Hue bridges' in result.output
        assert '192.168.1.3' in result.output

    @patch('commands.setup.discover')
    def test_none_found(self, mock_discover, runner, config):
        mock_discover.return_value = []

        result = runner.invoke(cli, ['discover'])

        assert result.exit_code == 0
        assert 'No bridges found' in result.output

    @patch('commands.setup.discover')
    def test_rate_limited(self, mock_discover, runner, config):
        mock_discover.side_effect = DiscoveryError('limit', rate_limited=True)

        result = runner.invoke(cli, ['discover'])

        assert result.exit_code == 1
        assert '--bridge' in result.output

    @patch('commands.setup.probe_bridge')
    @patch('commands.setup.discover')
    def test_check(self, mock_discover, mock_probe, runner, config):
        mock_discover.return_value = ['192.168.1.2']
        mock_probe.return_value = {'name': 'Living room', 'apiversion': '1.50.0'}

        result = runner.invoke(cli, ['discover', '--check'])

        assert 'Living room (API 1.50.0)' in result.output


class TestRegisterCommand:

    @patch('commands.setup.register')
    def test_success_prints_user_and_snippet(self, mock_register, runner, config):
        mock_register.return_value = 'abc123'

        result = runner.invoke(cli, ['register', '-b', '10.0.0.9', '-d', 'test-app', '--attempts', '4'])

        assert result.exit_code == 0
        assert 'abc123' in result.output
        assert '"bridge": "10.0.0.9"' in result.output
        args = mock_register.call_args.args
        assert args == ('10.0.0.9', 'test-app', 4, 0)

    @patch('commands.setup.register')
    @patch('commands.setup.discover')
    def test_discovers_bridge_when_missing(self, mock_discover, mock_register, runner, config):
        config['bridge'] = None
        mock_discover.return_value = ['192.168.1.7', '192.168.1.8']
        mock_register.return_value = 'abc123'

        result = runner.invoke(cli, ['register', '-d', 'test-app'])

        assert result.exit_code == 0
        assert mock_register.call_args.args[0] == '192.168.1.7'

    @patch('commands.setup.register')
    def test_timeout_button_not_pressed(self, mock_register, runner, config):
        mock_register.side_effect = RegistrationTimeout(3, None, bridge_reachable=True)

        result = runner.invoke(cli, ['register', '-d', 'test-app'])

        assert result.exit_code == 1
        assert 'Press the button on the bridge' in result.output

    @patch('commands.setup.register')
    def test_timeout_unreachable(self, mock_register, runner, config):
        mock_register.side_effect = RegistrationTimeout(3, None, bridge_reachable=False)

        result = runner.invoke(cli, ['register', '-d', 'test-app'])

        assert result.exit_code == 1
        assert 'Bridge unreachable' in result.output

    @patch('commands.setup.register')
    def test_denied(self, mock_register, runner, config):
        mock_register.side_effect = RegistrationDenied(BridgeError(7, '/devicetype', 'invalid value'))

        result = runner.invoke(cli, ['register', '-d', 'test-app'])

        assert result.exit_code == 1
        assert 'refused registration' in result.output

    def test_device_type_required(self, runner, config):
        result = runner.invoke(cli, ['register'])

        assert result.exit_code == 2

    @patch('commands.setup.register')
    def test_empty_device_type_rejected(self, mock_register, runner, config):
        result = runner.invoke(cli, ['register', '-d', ''])

        assert result.exit_code == 2
        assert 'must not be empty' in result.output
        mock_register.assert_not_called()

    @patch('commands.setup.register')
    def test_value_error_reported(self, mock_register, runner, config):
        mock_register.side_effect = ValueError('max_attempts must be at least 1')

        result = runner.invoke(cli, ['register', '-d', 'test-app'])

        assert result.exit_code == 1
        assert '✗ max_attempts must be at least 1' in result.output

    @patch('commands.setup.register')
    def test_timeout_without_username(self, mock_register, runner, config):
        last_error = NetworkError('invalid_response', 'No username in response')
        mock_register.side_effect = RegistrationTimeout(2, last_error, bridge_reachable=False)

        result = runner.invoke(cli, ['register', '-d', 'test-app'])

        assert result.exit_code == 1
        assert 'answered without a username' in result.output


class TestShowCommand:

    @patch('core.session.transport.send')
    def test_table(self, mock_send, runner, config, lights_payload):
        mock_send.return_value = lights_payload

        result = runner.invoke(cli, ['show'])

        assert result.exit_code == 0
        assert 'Hallway' in result.output
        assert 'Desk' in result.output

    @patch('core.session.transport.send')
    def test_single_light(self, mock_send, runner, config, lights_payload):
        mock_send.return_value = lights_payload['1']

        result = runner.invoke(cli, ['show', '--id', '1'])

        assert result.exit_code == 0
        assert 'name: Hallway' in result.output

    @patch('core.session.transport.send')
    def test_unauthorized_suggests_register(self, mock_send, runner, config):
        mock_send.side_effect = UnauthorizedUser(1, '/lights', 'unauthorized user')

        result = runner.invoke(cli, ['show'])

        assert result.exit_code == 1
        assert "Run 'register'" in result.output

    def test_missing_user(self, runner, config):
        config['user'] = None

        result = runner.invoke(cli, ['show'])

        assert result.exit_code == 1
        assert 'must be specified' in result.output


class TestLightCommand:

    @patch('core.session.transport.send')
    def test_partial_update(self, mock_send, runner, config):
        mock_send.return_value = [
            {"success": {"/lights/1/state/on": True}},
            {"success": {"/lights/1/state/ct": 370}},
        ]

        result = runner.invoke(cli, ['light', '--id', '1', '--on', '--ct', '2700'])

        assert result.exit_code == 0
        assert mock_send.call_args.args[3] == {'on': True, 'ct': 370}
        assert 'ct = 370' in result.output

    @patch('core.session.transport.send')
    def test_unknown_light(self, mock_send, runner, config):
        mock_send.side_effect = ResourceNotFound(3, '/lights/9', 'resource, /lights/9, not available')

        result = runner.invoke(cli, ['light', '--id', '9', '--off'])

        assert result.exit_code == 1
        assert 'Not found' in result.output

    def test_nothing_to_change(self, runner, config):
        result = runner.invoke(cli, ['light', '--id', '1'])

        assert result.exit_code == 1
        assert 'Nothing to change' in result.output


class TestGroup:

    def test_typo_suggestion(self, runner, config):
        result = runner.invoke(cli, ['regster'])

        assert result.exit_code == 2
        assert 'register' in result.output


class TestConfigFileValues:
    """Bad numbers in the config file fall back to defaults instead of crashing."""

    @patch('core.session.transport.send')
    def test_bad_timeout_warns_and_uses_default(self, mock_send, runner, tmp_path, monkeypatch,
                                                lights_payload):
        monkeypatch.delenv('HUE_BRIDGE', raising=False)
        monkeypatch.delenv('HUE_USER', raising=False)
        path = tmp_path / 'config.json'
        path.write_text(json.dumps({'bridge': '192.168.1.2', 'user': 'abc123', 'timeout': 'soon'}))
        mock_send.return_value = lights_payload

        with patch('core.config.CONFIG_FILE', path):
            result = runner.invoke(cli, ['show'])

        assert result.exit_code == 0
        assert "Warning: Ignoring timeout='soon'" in result.output
        assert mock_send.call_args.kwargs['timeout'] == DEFAULT_CONFIG['timeout']

    def test_zero_attempts_in_config_does_not_crash(self, runner, tmp_path):
        path = tmp_path / 'config.json'
        path.write_text(json.dumps({'bridge': '192.168.1.2', 'register_attempts': 0}))

        with patch('core.config.CONFIG_FILE', path), \
                patch('commands.setup.register', return_value='abc123') as mock_register:
            result = runner.invoke(cli, ['register', '-d', 'test-app'])

        assert result.exit_code == 0
        assert mock_register.call_args.args[2] == DEFAULT_CONFIG['register_attempts']
