"""Authentication submodule – the session cookie store."""

from unifi_guest.auth.cookies import CookieStore

__all__ = ["CookieStore"]
