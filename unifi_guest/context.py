"""
Call context: cancellation and deadlines for blocking controller calls.

Every controller operation accepts a :class:`Context`.  The HTTP request runs
on a daemon worker thread while the caller waits on the context, so a
cancelled or expired context returns control immediately with
:class:`CancellationError` instead of waiting for the socket to give up.
"""

from __future__ import annotations

import threading
import time
from typing import Any, Callable

from .config import CONTEXT_POLL_INTERVAL
from .errors import CancellationError


class Context:
    """Cancellation flag plus an optional absolute deadline (monotonic clock)."""

    def __init__(self, timeout: float | None = None) -> None:
        self._cancelled = threading.Event()
        self._deadline = None if timeout is None else time.monotonic() + timeout
        self._reason = ""

    @classmethod
    def background(cls) -> Context:
        """A context that is never cancelled and has no deadline."""
        return cls()

    @classmethod
    def with_timeout(cls, seconds: float) -> Context:
        return cls(timeout=seconds)

    def cancel(self) -> None:
        if not self._cancelled.is_set():
            self._reason = "context canceled"
            self._cancelled.set()

    @property
    def deadline(self) -> float | None:
        return self._deadline

    def remaining(self) -> float | None:
        """Seconds left before the deadline, or None without a deadline."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def done(self) -> bool:
        if self._cancelled.is_set():
            return True
        return self._deadline is not None and time.monotonic() >= self._deadline

    def error(self) -> CancellationError | None:
        """The error describing why the context is done, or None."""
        if self._cancelled.is_set():
            return CancellationError(self._reason)
        if self._deadline is not None and time.monotonic() >= self._deadline:
            return CancellationError("context deadline exceeded")
        return None

    def raise_if_done(self) -> None:
        err = self.error()
        if err is not None:
            raise err

    def request_timeout(self, default: float) -> float:
        """Socket timeout for one request: never longer than the time left."""
        remaining = self.remaining()
        if remaining is None:
            return default
        return max(min(default, remaining), 0.001)


def run_with_context(ctx: Context, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """
    Run ``func(*args, **kwargs)`` on a worker thread, bounded by *ctx*.

    Returns the function's result, or re-raises its exception.  If *ctx*
    finishes first, raises :class:`CancellationError`; the worker is left to
    finish on its own and its result is discarded.
    """
    ctx.raise_if_done()

    finished = threading.Event()
    outcome: dict[str, Any] = {}

    def _target() -> None:
        try:
            outcome["result"] = func(*args, **kwargs)
        except BaseException as exc:  # re-raised on the calling thread
            outcome["error"] = exc
        finally:
            finished.set()

    worker = threading.Thread(target=_target, name="unifi-request", daemon=True)
    worker.start()

    while not finished.wait(CONTEXT_POLL_INTERVAL):
        if ctx.done():
            break

    if not finished.is_set():
        ctx.raise_if_done()
    if "error" in outcome:
        raise outcome["error"]
    return outcome["result"]
