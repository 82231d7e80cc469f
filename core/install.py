"""Module installation: discover the bridge and create an API user.

Registration needs a human to press the link button on the bridge, so
install() registers once to arm the bridge, tells the user to press the
button, waits, and registers again to collect the username.
"""

import threading
import time
from typing import Protocol

from core.client import BridgeClient
from core.config import InstallSettings, ModuleConfig
from core.errors import InstallCancelled, RegistrationError
from models.utils import bridge_error

PRESS_BUTTON_MESSAGE = 'Press the button on your Hue Bridge'


class Output(Protocol):
    """Progress sink supplied by the host."""

    def write(self, message: str) -> None:
        ...


def wait_for_link_button(seconds: float, cancel: threading.Event | None = None):
    """Give the user time to press the link button.

    Raises:
        InstallCancelled: If cancel is set before the time is up
    """
    if cancel is None:
        time.sleep(seconds)
        return

    if cancel.wait(seconds):
        raise InstallCancelled('Installation cancelled while waiting for the link button')


def install(output: Output, settings: InstallSettings | None = None,
            cancel: threading.Event | None = None) -> ModuleConfig:
    """Discover and register with the Hue Bridge on the network.

    Args:
        output: Receives progress messages for the user
        settings: Device type and wait time (defaults from InstallSettings)
        cancel: Optional event that aborts the link button wait

    Returns:
        ModuleConfig with the full authenticated bridge address

    Raises:
        DiscoveryError: If no bridge was found
        RegistrationError: If the bridge did not hand out a username
        InstallCancelled: If cancel was set during the wait
    """
    settings = settings or InstallSettings()

    bridge = BridgeClient.discover()
    address = f"http://{bridge['internalipaddress']}/api"

    # First call only arms the bridge
    BridgeClient.register(address, settings.device_type)

    output.write(PRESS_BUTTON_MESSAGE)

    wait_for_link_button(settings.link_wait_seconds, cancel)

    result = BridgeClient.register(address, settings.device_type)
    success = result.get('success') if isinstance(result, dict) else None
    if not success or 'username' not in success:
        error = bridge_error(result) or {}
        description = error.get('description', 'Unexpected response from bridge')
        raise RegistrationError(
            f"Bridge refused registration: {description}",
            error_type=error.get('type'),
            description=error.get('description'),
        )

    return ModuleConfig(address=f"{address}/{success['username']}")
