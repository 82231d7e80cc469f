"""BridgeClient class for the Hue Bridge local v1 API.

This module contains the client that handles discovery, registration and
light control. Lights are addressed by name rather than numeric ID; every
operation fetches the light list fresh from the bridge, which is the only
source of truth (lights are also switched by hand and by other apps).
"""

import click
import requests

from core.errors import DiscoveryError, RegistrationError
from models.result import RequestResult, Success, TransportFailure
from models.types import DiscoveredBridge, Light
from models.utils import is_at_brightness_limit, next_brightness

# Philips N-UPnP discovery service
DISCOVERY_URL = 'https://discovery.meethue.com'


class BridgeClient:
    """Talks to a single Hue Bridge using an authenticated base address."""

    def __init__(self, address: str, session: requests.Session | None = None):
        """Initialise BridgeClient.

        Args:
            address: Bridge API address including username,
                e.g. http://192.168.1.2/api/<username>
            session: Optional requests session (a new one is created if omitted
                and closed by close())
        """
        self.address = address
        self._owns_session = session is None
        self.session = session or requests.Session()

    def close(self):
        """Close the session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> 'BridgeClient':
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    @staticmethod
    def discover() -> DiscoveredBridge:
        """Discover the Hue Bridge on the local network.

        The discovery service returns a JSON array of bridges with their
        internal IP addresses. Only the first one is used.

        Returns:
            First bridge dict (keys: id, internalipaddress, port)

        Raises:
            DiscoveryError: If no bridge was found
        """
        response = requests.get(DISCOVERY_URL)
        response.raise_for_status()
        bridges = response.json()

        if not bridges:
            raise DiscoveryError()

        return bridges[0]

    @staticmethod
    def register(address: str, device_type: str) -> dict:
        """Make a registration request to the given Bridge API address.

        The first call arms the bridge and comes back with a 'link button
        not pressed' error (type 101). Once the button has been pressed, a
        second call returns {'success': {'username': ...}}. The caller has to
        check which of the two shapes came back.

        Args:
            address: Bridge API address without username (http://<ip>/api)
            device_type: Name of the application creating the user

        Returns:
            First element of the bridge response, unchanged

        Raises:
            RegistrationError: If the bridge returned an empty response
        """
        response = requests.post(address, json={'devicetype': device_type})
        response.raise_for_status()
        result = response.json()

        if not result:
            raise RegistrationError()

        return result[0]

    def request(self, method: str, path: str, params: dict | None = None) -> RequestResult:
        """Make one request to the Bridge API.

        GET params are sent as query parameters, anything else as a JSON
        body. params=None sends neither.

        Returns:
            Success with the parsed body, or TransportFailure with the error
        """
        url = f"{self.address}{path}"
        options = {}

        if params is not None:
            if method.lower() == 'get':
                options['params'] = params
            else:
                options['json'] = params

        try:
            response = self.session.request(method.upper(), url, **options)
            response.raise_for_status()
            return Success(response.json())
        except (requests.exceptions.RequestException, ValueError) as e:
            click.echo(f"API request error: {e}", err=True)
            # Show response body for debugging
            response = getattr(e, 'response', None)
            if response is not None:
                click.echo(f"Response body: {response.text}", err=True)
            return TransportFailure(method, url, e)

    def do_request(self, method: str, path: str, params: dict | None = None):
        """Make a request and return the parsed body, or False on failure.

        Failures are logged by request(); callers cannot tell a network
        error apart from a falsy response. Use request() to get the
        distinction.
        """
        return self.request(method, path, params).unwrap_or(False)

    def get_lights(self) -> dict[str, Light] | bool:
        """Get all lights connected to the bridge, keyed by light ID."""
        return self.do_request('get', '/lights')

    def set_light_state(self, light_id: str, params: dict):
        """Change the state of a light (on/off, brightness, colour etc).

        Only the given fields change; the bridge keeps the rest.
        """
        return self.do_request('put', f'/lights/{light_id}/state', params)

    def get_light_by_name(self, name: str) -> Light | bool:
        """Get a light by name (case-insensitive).

        If several lights share the name, the first one in the bridge's
        ordering wins. That ordering is not guaranteed to be stable between
        calls, so which light is picked is undefined.

        Returns:
            Light dict with 'id' added, or False if no light matches
        """
        lights = self.get_lights()
        # An unauthorised user gets a list of error objects back
        if not isinstance(lights, dict):
            return False

        for light_id, light in lights.items():
            if light.get('name', '').lower() == name.lower():
                light['id'] = light_id
                return light

        return False

    def toggle_light(self, name: str, on: bool) -> bool:
        """Turn the light matching the given name on/off.

        Returns:
            False if no light matches, True once the state was sent
        """
        light = self.get_light_by_name(name)
        if not light:
            return False

        self.set_light_state(light['id'], {'on': on})
        return True

    def toggle_all_lights(self, on: bool) -> bool:
        """Turn every light on/off, one request at a time.

        Failures of individual lights are not reported.
        """
        lights = self.get_lights()
        if not isinstance(lights, dict):
            return True

        for light_id in lights:
            self.set_light_state(light_id, {'on': on})

        return True

    def change_light_brightness(self, name: str, brighten: bool) -> bool:
        """Brighten or dim the light matching the given name by one step.

        Returns:
            False if no light matches, the light has no brightness, or it is
            already at minimum (dimming) / maximum (brightening); else True
        """
        light = self.get_light_by_name(name)
        if not light:
            return False

        bri = light.get('state', {}).get('bri')
        if bri is None or is_at_brightness_limit(bri, brighten):
            return False

        self.set_light_state(light['id'], {'bri': next_brightness(bri, brighten)})
        return True
