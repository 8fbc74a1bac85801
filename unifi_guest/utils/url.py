"""
URL helpers for the controller REST API.

Endpoint URLs are built by joining percent-encoded path segments onto the
controller's scheme and authority, so a site slug can never leak into a
neighbouring path component.
"""

import urllib.parse
from dataclasses import dataclass

from ..config import DEFAULT_SITE, LOGIN_PATH, LOGOUT_PATH, STAMGR_PATH
from ..errors import AddressError


@dataclass(frozen=True)
class Endpoints:
    """Resolved endpoint URLs for one controller site."""

    login: str
    logout: str
    stamgr: str


def parse_base_url(address: str) -> urllib.parse.SplitResult:
    """
    Validate a controller base address such as ``https://10.0.1.100:8443``.

    Raises:
        AddressError: if the address is not an absolute http(s) URL with a
            host, carries an invalid port, or contains whitespace.
    """
    if not isinstance(address, str) or not address.strip():
        raise AddressError(f"Invalid controller address: {address!r}")
    if any(ch.isspace() for ch in address):
        raise AddressError(f"Controller address contains whitespace: {address!r}")

    try:
        parts = urllib.parse.urlsplit(address)
        # .port raises ValueError for non-numeric or out-of-range ports
        parts.port
    except ValueError as exc:
        raise AddressError(f"Parse controller address error: {exc}") from exc

    if parts.scheme.lower() not in ("http", "https"):
        raise AddressError(f"Unsupported scheme in controller address: {address!r}")
    if not parts.hostname:
        raise AddressError(f"No host in controller address: {address!r}")
    return parts


def join_path(base: urllib.parse.SplitResult, *segments: str) -> str:
    """Return ``scheme://netloc/seg1/seg2/...`` with every segment quoted."""
    path = "/" + "/".join(urllib.parse.quote(seg, safe="") for seg in segments)
    return urllib.parse.urlunsplit((base.scheme, base.netloc, path, "", ""))


def origin(base: urllib.parse.SplitResult) -> str:
    return urllib.parse.urlunsplit((base.scheme, base.netloc, "/", "", ""))


def build_endpoints(base: urllib.parse.SplitResult, site: str = "") -> Endpoints:
    """Resolve the login, logout and station-manager URLs for *site*."""
    site = site or DEFAULT_SITE
    return Endpoints(
        login=join_path(base, *LOGIN_PATH),
        logout=join_path(base, *LOGOUT_PATH),
        stamgr=join_path(base, "api", "s", site, *STAMGR_PATH),
    )
