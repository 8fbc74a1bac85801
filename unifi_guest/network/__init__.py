"""
Network operations module for HTTP transport setup.
"""

from unifi_guest.network.client import build_session

__all__ = ["build_session"]
