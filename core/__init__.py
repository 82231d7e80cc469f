"""Core functionality for smith-hue.

This package contains:
- client: BridgeClient class for Hue Bridge API interaction
- actions: Command actions registered with the host
- install: Bridge discovery and link button registration
- config: Module config and install settings
- errors: Exception types
"""
