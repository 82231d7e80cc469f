"""Type definitions for Hue Bridge payloads.

This module provides TypedDict definitions for the v1 API structures the
client reads, improving type safety and IDE autocompletion.
"""

from typing import TypedDict


class DiscoveredBridge(TypedDict, total=False):
    """Bridge information from N-UPnP discovery."""
    id: str
    internalipaddress: str
    port: int


class LightState(TypedDict, total=False):
    """The part of a light's state the client reads and writes."""
    on: bool
    bri: int
    reachable: bool


class Light(TypedDict, total=False):
    """Light record from /lights.

    The bridge keys lights by ID; 'id' is only present on records returned
    by BridgeClient.get_light_by_name().
    """
    id: str
    name: str
    type: str
    state: LightState


class BridgeErrorObject(TypedDict):
    """Error object the bridge returns instead of a username."""
    type: int
    address: str
    description: str

