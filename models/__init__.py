"""Data models and utility functions.

This package contains:
- light: Light, LightState and LightCommand data types
- utils: Display helpers (N/A rendering, colour temperature, light tables)
"""
