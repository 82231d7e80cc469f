"""Pytest configuration and fixtures for smith-hue tests."""

import copy

import pytest
from pathlib import Path
from unittest.mock import MagicMock, patch

import requests

from core.client import BridgeClient

ADDRESS = 'http://192.168.1.2/api/test-user'


def make_response(data, status_code: int = 200):
    """Build a fake requests.Response returning data from json()."""
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = data
    response.text = str(data)
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} Error", response=response
        )
    return response


@pytest.fixture
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def lights():
    """Light collection as returned by GET /lights."""
    return {
        '1': {'name': 'Desk lamp', 'type': 'Extended color light', 'state': {'on': False, 'bri': 100}},
        '2': {'name': 'Bedroom', 'type': 'Dimmable light', 'state': {'on': True, 'bri': 254}},
        '3': {'name': 'Hallway', 'type': 'Dimmable light', 'state': {'on': True, 'bri': 1}},
        '5': {'name': 'Plug', 'type': 'On/Off plug-in unit', 'state': {'on': False}},
    }


@pytest.fixture
def session(lights):
    """Session that serves the lights fixture and accepts every PUT."""
    mock_session = MagicMock(spec=requests.Session)

    def fake_request(method, url, **kwargs):
        if method == 'GET' and url.endswith('/lights'):
            return make_response(lights)
        return make_response([{'success': {'ok': True}}])

    mock_session.request.side_effect = fake_request
    return mock_session


@pytest.fixture
def bridge_session(lights):
    """Session that behaves like a bridge: PUT state bodies are merged into lights."""
    mock_session = MagicMock(spec=requests.Session)

    def fake_request(method, url, **kwargs):
        if method == 'GET' and url.endswith('/lights'):
            return make_response(copy.deepcopy(lights))
        if method == 'PUT' and url.endswith('/state'):
            light_id = url.split('/')[-2]
            body = kwargs.get('json') or {}
            lights[light_id]['state'].update(body)
            return make_response([
                {'success': {f'/lights/{light_id}/state/{key}': value}}
                for key, value in body.items()
            ])
        return make_response([{'error': {'type': 3, 'description': 'resource not available'}}])

    mock_session.request.side_effect = fake_request
    return mock_session


@pytest.fixture
def client(session):
    """BridgeClient using the fake session."""
    return BridgeClient(ADDRESS, session=session)


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    """Point SMITH_HUE_CONFIG at a temporary file."""
    path = tmp_path / 'smith_hue' / 'config.json'
    monkeypatch.setenv('SMITH_HUE_CONFIG', str(path))
    return path


def put_calls(session):
    """Return (url, json body) for every PUT made through the session."""
    return [
        (call.args[1], call.kwargs.get('json'))
        for call in session.request.call_args_list
        if call.args[0] == 'PUT'
    ]


@pytest.fixture
def client_cls():
    """Patch the BridgeClient used by actions; the instance is its own context."""
    with patch('core.actions.BridgeClient') as mock_client_cls:
        instance = mock_client_cls.return_value
        instance.__enter__.return_value = instance
        yield mock_client_cls
