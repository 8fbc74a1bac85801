"""
HTTP transport configuration for controller communication.

Provides a requests.Session with retries switched off and automatic cookie
capture disabled; session cookies are handled by
:class:`unifi_guest.auth.CookieStore` instead.
"""

import http.cookiejar

import requests
import urllib3
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..logging_setup import log


class _NoCapturePolicy(http.cookiejar.DefaultCookiePolicy):
    """Cookie policy that refuses every Set-Cookie offered to the jar."""

    def set_ok(self, cookie, request):
        return False


def build_session(verify_ssl: bool = True) -> requests.Session:
    """
    Return a requests.Session configured for the controller API.

    Args:
        verify_ssl: Whether to verify TLS certificates.  Controllers usually
            present a self-signed certificate, so callers may pass False;
            doing so is logged as a warning.

    Returns:
        Configured requests.Session instance
    """
    session = requests.Session()
    # No automatic retries: transient failures are reported to the caller.
    retry = Retry(total=0, raise_on_status=False)
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.cookies.set_policy(_NoCapturePolicy())
    session.verify = verify_ssl
    if not verify_ssl:
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
        log.warning("TLS certificate verification is DISABLED for this controller session")
    return session
