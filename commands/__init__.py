"""CLI command modules.

This package contains:
- setup: Install and setup commands
- inspection: Inspection commands (discover, lights, actions)
- control: Action commands (run, say)
"""
