"""CLI command modules.

This package contains:
- setup: Bridge discovery and registration commands (discover, register)
- control: Light commands (show, light)
- helpers: Session resolution and error reporting shared by commands
"""
