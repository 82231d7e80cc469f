"""Utility functions for smith-hue.

This module contains helper functions used across the application:
- next_brightness: Step a brightness value and clamp it to the bridge range
- is_at_brightness_limit: Whether a light cannot move further in a direction
- bridge_error: Pull the error object out of a bridge response element
- get_module_config: Load the saved config or tell the user to install
- get_client: Helper to build a BridgeClient from the saved config
- similarity_score: Score how close a typed name is to a known one
- find_similar_strings: Pick the closest action or command names
"""

import click

from models.types import BridgeErrorObject

# Brightness range accepted by the v1 API
MIN_BRIGHTNESS = 1
MAX_BRIGHTNESS = 254
BRIGHTNESS_STEP = 100

# Bridge error type for "link button not pressed"
LINK_BUTTON_NOT_PRESSED = 101


def is_at_brightness_limit(bri: int, brighten: bool) -> bool:
    """Check whether a light is already as dim or as bright as it goes.

    Only the current value is compared; a step that would overshoot is
    clamped by next_brightness() instead.
    """
    if brighten:
        return bri == MAX_BRIGHTNESS
    return bri == MIN_BRIGHTNESS


def next_brightness(bri: int, brighten: bool, step: int = BRIGHTNESS_STEP) -> int:
    """Step a brightness value up or down and clamp it into 1-254.

    Args:
        bri: Current brightness
        brighten: True to step up, False to step down
        step: Amount to change by

    Returns:
        New brightness, e.g. 200 -> 254 when brightening, 50 -> 1 when dimming
    """
    value = bri + step if brighten else bri - step
    return max(MIN_BRIGHTNESS, min(MAX_BRIGHTNESS, value))


def bridge_error(element: dict) -> BridgeErrorObject | None:
    """Return the 'error' object of a bridge response element, if any."""
    if isinstance(element, dict):
        error = element.get('error')
        if isinstance(error, dict):
            return error
    return None


def get_module_config():
    """Load the saved module config, telling the user how to create it if missing.

    Returns:
        ModuleConfig, or None if the module has not been installed yet
    """
    # Import here to avoid circular dependency
    from core.config import load_module_config, get_user_config_file

    config = load_module_config()
    if not config:
        click.secho("✗ No bridge configured.", fg='red')
        click.echo(f"Run 'install' first to create {get_user_config_file()}")
    return config


def get_client():
    """Build a BridgeClient from the saved module config.

    Returns:
        A BridgeClient, or None if the module has not been installed yet
    """
    from core.client import BridgeClient

    config = get_module_config()
    if not config:
        return None
    return BridgeClient(config.address)


def similarity_score(s1: str, s2: str) -> int:
    """Score how close a typed name is to a registered one.

    Used to suggest action names ('turn on' -> 'turn on the') and CLI
    commands ('light' -> 'lights'). Case is ignored.

    Returns:
        100 for an exact match, 80 when one is a prefix of the other, 60 when
        one contains the other, up to 50 for letters appearing in the same
        order, and 0 for anything scoring 20 or less
    """
    typed = s1.lower()
    known = s2.lower()

    if typed == known:
        return 100
    if known.startswith(typed) or typed.startswith(known):
        return 80
    if typed in known or known in typed:
        return 60

    # Letters of typed found in order in known
    matches = 0
    position = 0
    for char in typed:
        found = known.find(char, position)
        if found == -1:
            break
        matches += 1
        position = found + 1

    score = int((matches / max(len(typed), len(known))) * 50) if matches else 0
    return score if score > 20 else 0


def find_similar_strings(target: str, candidates: list[str], limit: int = 3) -> list[str]:
    """Return the registered names closest to a mistyped one, best first.

    Names scoring 0 against target are left out, so an unrelated word gives
    an empty list and the caller can skip the "Did you mean" hint.
    """
    scored = [(similarity_score(target, candidate), candidate) for candidate in candidates]
    ranked = sorted((pair for pair in scored if pair[0] > 0), key=lambda pair: pair[0], reverse=True)
    return [candidate for _, candidate in ranked[:limit]]
