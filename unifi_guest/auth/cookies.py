"""
Session cookie store.

The controller identifies a logged-in session purely by the cookies returned
from ``/api/login``.  They are kept here rather than in the transport's own
jar so that the points that write them are explicit:

  * login   – writes (captures the response cookies)
  * logout  – writes (some controllers rotate the token on logout)
  * command – read-only (cookies are attached, responses are not captured)

The store is not locked.  Callers sharing one store across threads must
serialise login/logout against command calls themselves.
"""

import requests
from requests.cookies import RequestsCookieJar

from ..logging_setup import log


class CookieStore:
    """Explicit cookie jar attached to one controller session."""

    def __init__(self) -> None:
        self._jar = RequestsCookieJar()

    def capture(self, resp: requests.Response) -> int:
        """
        Copy the cookies set by *resp* into the store.

        requests has already scoped each cookie to the responding host, so
        they are stored against the controller address as received.

        Returns:
            Number of cookies captured.
        """
        count = 0
        for cookie in resp.cookies:
            self._jar.set_cookie(cookie)
            count += 1
        log.debug("Captured %d cookie(s): %s", count, sorted(self.names()))
        return count

    def attach(self) -> RequestsCookieJar:
        """Return a copy of the stored cookies for one outgoing request."""
        return self._jar.copy()

    def names(self) -> list[str]:
        return [c.name for c in self._jar]

    def get(self, name: str, default: str | None = None) -> str | None:
        return self._jar.get(name, default)

    def clear(self) -> None:
        self._jar.clear()

    def __len__(self) -> int:
        return len(self._jar)

