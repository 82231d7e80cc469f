"""Configuration management for the Hue module.

This module handles:
- ModuleConfig: the authenticated bridge address the host persists
- InstallSettings: device type and link button wait used by install()
- Loading/saving the module config file
"""

import json
import os
from dataclasses import dataclass, asdict
from pathlib import Path

import click

from core.errors import ConfigError

# Configuration file path (override with SMITH_HUE_CONFIG)
USER_CONFIG_FILE = Path.home() / '.smith_hue' / 'config.json'

DEFAULT_DEVICE_TYPE = '@mr-smith/smith-hue'
DEFAULT_LINK_WAIT_SECONDS = 10.0


@dataclass(frozen=True)
class ModuleConfig:
    """Per-module config passed to every action.

    address is the full authenticated base URL, e.g.
    http://192.168.1.2/api/<username>
    """
    address: str

    @classmethod
    def from_dict(cls, data: dict) -> 'ModuleConfig':
        """Build from the host's {address} map."""
        address = data.get('address') if isinstance(data, dict) else None
        if not address or not isinstance(address, str):
            raise ConfigError("Module config is missing a bridge 'address'")
        return cls(address=address)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class InstallSettings:
    """Settings for the discovery and registration flow."""
    device_type: str = DEFAULT_DEVICE_TYPE
    link_wait_seconds: float = DEFAULT_LINK_WAIT_SECONDS

    @classmethod
    def from_env(cls) -> 'InstallSettings':
        """Read overrides from SMITH_HUE_DEVICE_TYPE and SMITH_HUE_LINK_WAIT."""
        device_type = os.getenv('SMITH_HUE_DEVICE_TYPE', DEFAULT_DEVICE_TYPE)
        raw_wait = os.getenv('SMITH_HUE_LINK_WAIT')
        if raw_wait is None:
            return cls(device_type=device_type)

        try:
            wait = float(raw_wait)
        except ValueError:
            raise ConfigError(f"SMITH_HUE_LINK_WAIT must be a number, got '{raw_wait}'")
        if wait < 0:
            raise ConfigError("SMITH_HUE_LINK_WAIT must not be negative")
        return cls(device_type=device_type, link_wait_seconds=wait)


def get_user_config_file() -> Path:
    """Return the config file path, honouring SMITH_HUE_CONFIG."""
    override = os.getenv('SMITH_HUE_CONFIG')
    if override:
        return Path(override).expanduser()
    return USER_CONFIG_FILE


def load_module_config() -> ModuleConfig | None:
    """Load the module config from the user config file.

    Returns:
        ModuleConfig, or None if the file is missing or unreadable
    """
    config_file = get_user_config_file()
    try:
        if not config_file.exists():
            return None

        with open(config_file, 'r') as f:
            data = json.load(f)

        return ModuleConfig.from_dict(data)

    except (json.JSONDecodeError, IOError, ConfigError) as e:
        click.echo(f"Warning: Failed to load config from {config_file}: {e}", err=True)
        return None


def save_module_config(config: ModuleConfig) -> bool:
    """Save the module config to the user config file.

    Creates the config directory if it doesn't exist and sets secure
    file permissions (600 - user read/write only), since the address
    contains the bridge username.

    Args:
        config: Module config to save

    Returns:
        True if saved successfully, False otherwise
    """
    config_file = get_user_config_file()
    try:
        config_file.parent.mkdir(parents=True, exist_ok=True)

        with open(config_file, 'w') as f:
            json.dump(config.to_dict(), f, indent=2)

        os.chmod(config_file, 0o600)

        return True

    except (IOError, OSError) as e:
        click.echo(f"Error: Failed to save config to {config_file}: {e}", err=True)
        return False
