"""Data models and utility functions.

This package contains:
- types: TypedDicts for bridge payloads
- result: Success/TransportFailure request results
- utils: Brightness helpers and fuzzy matching
"""
