"""Command actions exposed to the host framework.

Each action takes the free-text parameter of the command (usually a light
name) and the module config, makes one BridgeClient call and returns a
confirmation string. The reply does not say whether the light was found;
an unknown light name is a silent no-op.
"""

from typing import Callable

from core.client import BridgeClient
from core.config import ModuleConfig
from core.errors import UnknownActionError
from models.utils import find_similar_strings

ActionHandler = Callable[[str, ModuleConfig], str]

# Registered actions, in registration order
actions: dict[str, ActionHandler] = {}


def action(name: str) -> Callable[[ActionHandler], ActionHandler]:
    """Register a handler under a command name."""
    def decorator(handler: ActionHandler) -> ActionHandler:
        actions[name] = handler
        return handler
    return decorator


def hue(config: ModuleConfig) -> BridgeClient:
    """Create a client for the bridge address in the module config.

    Use it as a context manager so its session is closed after the call.
    """
    return BridgeClient(config.address)


@action('turn off all lights')
def turn_off_all_lights(params: str, config: ModuleConfig) -> str:
    with hue(config) as client:
        client.toggle_all_lights(False)
    return 'Turned off all lights'


@action('turn on all lights')
def turn_on_all_lights(params: str, config: ModuleConfig) -> str:
    with hue(config) as client:
        client.toggle_all_lights(True)
    return 'Turned on all lights'


@action('turn on the')
def turn_on_light(light: str, config: ModuleConfig) -> str:
    with hue(config) as client:
        client.toggle_light(light, True)
    return f'Turned on the light {light}'


@action('turn off the')
def turn_off_light(light: str, config: ModuleConfig) -> str:
    with hue(config) as client:
        client.toggle_light(light, False)
    return f'Turned off the light {light}'


@action('dim')
def dim_light(light: str, config: ModuleConfig) -> str:
    with hue(config) as client:
        client.change_light_brightness(light, False)
    return f'Dimmed light {light}'


@action('brighten')
def brighten_light(light: str, config: ModuleConfig) -> str:
    with hue(config) as client:
        client.change_light_brightness(light, True)
    return f'Brightened light {light}'


def run_action(name: str, params: str, config: ModuleConfig | dict) -> str:
    """Run the action registered under name.

    Args:
        name: Action name, e.g. 'turn on the'
        params: Free-text parameter, e.g. a light name
        config: ModuleConfig or the host's {address} dict

    Raises:
        UnknownActionError: If no action has that name (with suggestions)
        ConfigError: If a dict config has no address
    """
    handler = actions.get(name.strip().lower())
    if handler is None:
        raise UnknownActionError(name, find_similar_strings(name, list(actions)))

    if not isinstance(config, ModuleConfig):
        config = ModuleConfig.from_dict(config)

    return handler(params, config)


def match_action(utterance: str) -> tuple[str, str] | None:
    """Split free text into an action name and its parameter.

    The longest action name the text starts with wins, so 'turn on all
    lights' is not read as 'turn on the' or similar.

    Returns:
        (action name, parameter) or None if nothing matches
    """
    text = ' '.join(utterance.split())
    lowered = text.lower()

    for name in sorted(actions, key=len, reverse=True):
        if lowered == name:
            return name, ''
        if lowered.startswith(name + ' '):
            return name, text[len(name):].strip()

    return None
