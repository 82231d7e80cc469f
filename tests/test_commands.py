"""
Tests for the CLI commands.

Commands are invoked through click's CliRunner with the config file in a
temporary directory and the bridge patched out.
"""

import json

import requests

import pytest
from unittest.mock import patch, MagicMock
from click.testing import CliRunner

from hue_control import cli
from core.config import ModuleConfig, save_module_config
from core.errors import DiscoveryError, RegistrationError


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def installed(config_file):
    """Save a module config so commands can find the bridge."""
    save_module_config(ModuleConfig(address='http://192.168.1.2/api/test-user'))
    return config_file


class TestInstallCommand:
    """Test the install command."""

    @patch('commands.setup.install')
    def test_saves_config(self, mock_install, runner, config_file):
        mock_install.return_value = ModuleConfig(address='http://192.168.1.2/api/new-user')

        result = runner.invoke(cli, ['install', '--wait', '20'])

        assert result.exit_code == 0
        assert 'Successfully registered' in result.output
        assert json.loads(config_file.read_text()) == {'address': 'http://192.168.1.2/api/new-user'}
        settings = mock_install.call_args.args[1]
        assert settings.link_wait_seconds == 20

    @patch('commands.setup.install')
    def test_link_button_hint(self, mock_install, runner, config_file):
        mock_install.side_effect = RegistrationError(
            'Bridge refused registration: link button not pressed',
            error_type=101, description='link button not pressed')

        result = runner.invoke(cli, ['install'])

        assert result.exit_code == 1
        assert '--wait' in result.output
        assert not config_file.exists()

    @patch('commands.setup.install')
    def test_no_bridge(self, mock_install, runner, config_file):
        mock_install.side_effect = DiscoveryError()

        result = runner.invoke(cli, ['install'])

        assert result.exit_code == 1
        assert 'Unable to discover Hue Bridge' in result.output

    @patch('core.install.BridgeClient.register')
    @patch('core.install.BridgeClient.discover')
    def test_unreachable_bridge(self, mock_discover, mock_register, runner, config_file):
        mock_discover.return_value = {'id': 'abc', 'internalipaddress': '192.168.1.2'}
        mock_register.side_effect = requests.exceptions.ConnectionError('No route to host')

        result = runner.invoke(cli, ['install'])

        assert result.exit_code == 1
        assert not isinstance(result.exception, requests.exceptions.ConnectionError)
        assert 'Bridge registration failed: No route to host' in result.output
        assert not config_file.exists()

    @patch('commands.setup.install')
    def test_discovery_rate_limited(self, mock_install, runner, config_file):
        mock_install.side_effect = requests.exceptions.HTTPError('429 Client Error: Too Many Requests')

        result = runner.invoke(cli, ['install'])

        assert result.exit_code == 1
        assert '429' in result.output

    @patch('commands.setup.install')
    def test_unparseable_response(self, mock_install, runner, config_file):
        mock_install.side_effect = ValueError('Expecting value')

        result = runner.invoke(cli, ['install'])

        assert result.exit_code == 1
        assert 'Failed to parse bridge response' in result.output


class TestSetupCommand:
    """Test the setup command."""

    def test_not_configured(self, runner, config_file):
        result = runner.invoke(cli, ['setup'])

        assert result.exit_code == 0
        assert 'No bridge configured' in result.output

    def test_configured(self, runner, installed):
        result = runner.invoke(cli, ['setup'])

        assert 'http://192.168.1.2/api/test-user' in result.output


class TestInspectionCommands:
    """Test discover, lights and actions."""

    @patch('commands.inspection.BridgeClient.discover')
    def test_discover(self, mock_discover, runner):
        mock_discover.return_value = {'id': 'abc', 'internalipaddress': '192.168.1.2'}

        result = runner.invoke(cli, ['discover'])

        assert result.exit_code == 0
        assert '192.168.1.2' in result.output

    @patch('core.client.requests.get')
    def test_discover_not_json(self, mock_get, runner):
        mock_get.return_value.json.side_effect = ValueError('Expecting value')

        result = runner.invoke(cli, ['discover'])

        assert result.exit_code == 1
        assert not isinstance(result.exception, ValueError)
        assert 'Failed to parse discovery response' in result.output

    @patch('core.client.requests.get')
    def test_discover_unreachable(self, mock_get, runner):
        mock_get.side_effect = requests.exceptions.ConnectionError('offline')

        result = runner.invoke(cli, ['discover'])

        assert result.exit_code == 1
        assert 'Bridge discovery failed' in result.output

    @patch('core.client.BridgeClient.get_lights')
    def test_lights(self, mock_get_lights, runner, installed, lights):
        mock_get_lights.return_value = lights

        result = runner.invoke(cli, ['lights'])

        assert result.exit_code == 0
        assert 'Desk lamp' in result.output
        assert '254/254' in result.output

    @patch('core.client.BridgeClient.get_lights')
    def test_lights_unreachable(self, mock_get_lights, runner, installed):
        mock_get_lights.return_value = False

        result = runner.invoke(cli, ['lights'])

        assert result.exit_code == 1

    def test_lights_not_installed(self, runner, config_file):
        result = runner.invoke(cli, ['lights'])

        assert 'No bridge configured' in result.output

    def test_actions(self, runner):
        result = runner.invoke(cli, ['actions'])

        assert 'turn on the' in result.output
        assert 'brighten' in result.output


class TestControlCommands:
    """Test run and say."""

    def test_run(self, client_cls, runner, installed):
        result = runner.invoke(cli, ['run', 'turn on the', 'Desk', 'lamp'])

        assert result.exit_code == 0
        assert 'Turned on the light Desk lamp' in result.output
        client_cls.return_value.toggle_light.assert_called_once_with('Desk lamp', True)

    def test_run_unknown_action(self, runner, installed):
        result = runner.invoke(cli, ['run', 'brigten', 'Desk lamp'])

        assert result.exit_code == 1
        assert 'brighten' in result.output

    def test_run_not_installed(self, runner, config_file):
        result = runner.invoke(cli, ['run', 'dim', 'Desk lamp'])

        assert result.exit_code == 1
        assert 'No bridge configured' in result.output

    def test_say(self, client_cls, runner, installed):
        result = runner.invoke(cli, ['say', 'turn', 'off', 'all', 'lights'])

        assert result.exit_code == 0
        assert 'Turned off all lights' in result.output
        client_cls.return_value.toggle_all_lights.assert_called_once_with(False)

    def test_say_no_match(self, runner, installed):
        result = runner.invoke(cli, ['say', 'make', 'coffee'])

        assert result.exit_code == 1


class TestCommandSuggestions:
    """Test typo suggestions from the group."""

    def test_suggests_similar_command(self, runner):
        result = runner.invoke(cli, ['light'])

        assert result.exit_code != 0
        assert 'lights' in result.output
