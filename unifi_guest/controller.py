"""
Session client for the controller REST API.

A :class:`Controller` holds one controller session: the resolved endpoint
URLs, the credentials, and the cookies returned by ``/api/login``.  It
exposes login, logout and the guest-authorization command.

Result contract
---------------
The operations raise only for transport-level failures: a malformed address,
a network error, a non-200 HTTP status, or a cancelled context.  A request
that returns 200 but whose envelope reports ``meta.rc != "ok"`` is *not* an
error here.  Every operation returns the ``requests.Response``; pass
``resp.content`` to :func:`unifi_guest.envelope.parse_response_envelope` to
check the logical result.

Sessions are not thread-safe.  ``login()`` and ``logout()`` write the cookie
store while command calls read it; serialise them per instance.
"""

from __future__ import annotations

import json
import logging

import requests

from .auth.cookies import CookieStore
from .config import AUTHORIZE_GUEST_CMD, DEFAULT_SITE, JSON_HEADERS, REQUEST_TIMEOUT
from .context import Context, run_with_context
from .errors import AuthenticationError, CancellationError, CommandError, TransportError
from .logging_setup import log as _package_log
from .network.client import build_session
from .utils.url import build_endpoints, origin, parse_base_url


def _encode(body: dict) -> str:
    return json.dumps(body, separators=(",", ":"))


def build_command_envelope(
    mac: str,
    minutes: int,
    down_kbps: int = 0,
    up_kbps: int = 0,
    quota_mb: int = 0,
) -> dict[str, str]:
    """
    Build the ``authorize-guest`` command body.

    Limits are only included when greater than zero.  All values are sent as
    decimal strings.
    """
    args = {
        "cmd": AUTHORIZE_GUEST_CMD,
        "mac": mac,
        "minutes": str(int(minutes)),
    }
    if down_kbps > 0:
        args["down"] = str(int(down_kbps))
    if up_kbps > 0:
        args["up"] = str(int(up_kbps))
    if quota_mb > 0:
        args["bytes"] = str(int(quota_mb))
    return args


class Controller:
    """
    One authenticated session against a controller site.

    Args:
        url: Controller base address, e.g. ``https://10.0.1.100:8443``.
        username: Controller admin user name.
        password: Controller admin password.
        site: Site slug; empty selects ``"default"``.
        verify_ssl: Verify the controller's TLS certificate.  Controllers
            normally ship a self-signed certificate; pass False to accept it.
        timeout: Socket timeout in seconds for each request.
        debug: Log command bodies and response bodies at DEBUG, and include
            response bodies in status errors.
        logger: Logger to report through (default: the package logger).
        session: Pre-built requests.Session (default: :func:`build_session`).

    Raises:
        AddressError: *url* is malformed.  No network I/O is performed.
    """

    def __init__(
        self,
        url: str,
        username: str,
        password: str,
        site: str = "",
        *,
        verify_ssl: bool = True,
        timeout: float = REQUEST_TIMEOUT,
        debug: bool = False,
        logger: logging.Logger | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._base = parse_base_url(url)
        self.site = site or DEFAULT_SITE
        self.endpoints = build_endpoints(self._base, self.site)
        self.username = username
        self._password = password
        self.timeout = timeout
        self.debug = debug
        self.log = logger or _package_log
        self.cookies = CookieStore()
        self._session = session if session is not None else build_session(verify_ssl)
        self.log.debug("Controller %s site=%r", self.base_url, self.site)

    @property
    def base_url(self) -> str:
        return origin(self._base)

    # -- transport -----------------------------------------------------------

    def _post(
        self,
        ctx: Context | None,
        name: str,
        url: str,
        body: dict | None = None,
        attach_cookies: bool = True,
    ) -> requests.Response:
        """POST *body* as JSON to *url*, bounded by *ctx*."""
        ctx = ctx or Context.background()
        kwargs: dict = {
            "headers": dict(JSON_HEADERS) if body is not None else {"Accept": "*/*"},
            "timeout": ctx.request_timeout(self.timeout),
        }
        if body is not None:
            kwargs["data"] = _encode(body)
        if attach_cookies:
            kwargs["cookies"] = self.cookies.attach()

        try:
            resp = run_with_context(ctx, self._session.post, url, **kwargs)
        except CancellationError:
            self.log.debug("%s() cancelled", name)
            raise
        except requests.RequestException as exc:
            # A socket timeout caused by the deadline is reported as a cancellation
            err = ctx.error()
            if err is not None:
                raise err from exc
            self.log.debug("%s() error: %s", name, exc)
            raise TransportError(f"{name}: {exc}") from exc

        if self.debug:
            self.log.debug("%s() response: %s", name, resp.text)
        return resp

    def _body_for_error(self, resp: requests.Response) -> str | None:
        return resp.text if self.debug else None

    # -- operations ----------------------------------------------------------

    def login(self, ctx: Context | None = None) -> requests.Response:
        """
        Log in and store the session cookies.

        Raises:
            AuthenticationError: on any status other than 200.
            TransportError: if the request fails.
            CancellationError: if *ctx* is cancelled or expires.
        """
        resp = self._post(
            ctx,
            "Login",
            self.endpoints.login,
            {"username": self.username, "password": self._password},
            attach_cookies=False,
        )
        if resp.status_code != 200:
            self.log.debug("Login() error: status %s", resp.status_code)
            raise AuthenticationError("login", resp.status_code, self._body_for_error(resp))

        self.cookies.capture(resp)
        self.log.debug("Login() ok, cookies: %s", self.cookies.names())
        return resp

    def logout(self, ctx: Context | None = None) -> requests.Response:
        """
        Log out with the stored cookies attached.

        Cookies returned by the controller are re-captured; previously stored
        cookies are kept and may be stale afterwards.

        Raises:
            AuthenticationError: on any status other than 200.
        """
        resp = self._post(ctx, "Logout", self.endpoints.logout)
        if resp.status_code != 200:
            self.log.debug("Logout() error: status %s", resp.status_code)
            raise AuthenticationError("logout", resp.status_code, self._body_for_error(resp))

        self.cookies.capture(resp)
        self.log.debug("Logout() ok")
        return resp

    def authorize_guest_with_limits(
        self,
        ctx: Context | None,
        mac: str,
        minutes: int,
        down_kbps: int = 0,
        up_kbps: int = 0,
        quota_mb: int = 0,
    ) -> requests.Response:
        """
        Authorize a guest client and optionally cap its bandwidth and quota.

        Args:
            ctx: Call context (None for no deadline).
            mac: Guest MAC address, ``"aa:bb:cc:dd:ee:ff"``.
            minutes: Authorization length in minutes.
            down_kbps: Download limit in Kbps (0 = unlimited).
            up_kbps: Upload limit in Kbps (0 = unlimited).
            quota_mb: Transfer quota in MB (0 = unlimited).

        Returns:
            The controller response; decode it to check ``meta.rc``.

        Raises:
            CommandError: on any status other than 200.
        """
        args = build_command_envelope(mac, minutes, down_kbps, up_kbps, quota_mb)
        if self.debug:
            self.log.debug("AuthorizeGuest(): POST data: %s", _encode(args))

        resp = self._post(ctx, "AuthorizeGuest", self.endpoints.stamgr, args)
        if resp.status_code != 200:
            self.log.debug("AuthorizeGuest() error: status %s", resp.status_code)
            raise CommandError("authorize-guest", resp.status_code, self._body_for_error(resp))

        self.log.debug("AuthorizeGuest() ok")
        return resp

    def authorize_guest(self, ctx: Context | None, mac: str, minutes: int) -> requests.Response:
        """Authorize a guest client for *minutes* without limits."""
        return self.authorize_guest_with_limits(ctx, mac, minutes, 0, 0, 0)

    # -- lifecycle -----------------------------------------------------------

    def close(self) -> None:
        """Release the transport's pooled connections."""
        self._session.close()

    def __enter__(self) -> Controller:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
