"""Utility functions for URL handling."""

from unifi_guest.utils.url import Endpoints, build_endpoints, join_path, origin, parse_base_url

__all__ = ["Endpoints", "build_endpoints", "join_path", "origin", "parse_base_url"]
