"""Core functionality for Hue control.

This package contains:
- errors: Error taxonomy for network, bridge, discovery and registration failures
- transport: HTTP requests and bridge response envelope decoding
- discovery: Bridge discovery via the Philips N-UPnP service
- auth: Push-link registration state machine
- session: Authenticated light listing and control
- config: Configuration file and environment defaults
"""
