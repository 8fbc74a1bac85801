"""
Tests for the call context and context-bounded execution.
"""

import threading
import time
import unittest

from unifi_guest.context import Context, run_with_context
from unifi_guest.errors import CancellationError


class TestContext(unittest.TestCase):
    def test_background_never_done(self):
        ctx = Context.background()
        self.assertFalse(ctx.done())
        self.assertIsNone(ctx.remaining())
        self.assertIsNone(ctx.error())
        ctx.raise_if_done()

    def test_cancel(self):
        ctx = Context.background()
        ctx.cancel()
        self.assertTrue(ctx.done())
        with self.assertRaises(CancellationError) as cm:
            ctx.raise_if_done()
        self.assertIn("canceled", str(cm.exception))

    def test_expired_deadline(self):
        ctx = Context.with_timeout(0)
        self.assertTrue(ctx.done())
        self.assertEqual(ctx.remaining(), 0.0)
        self.assertIn("deadline", str(ctx.error()))

    def test_request_timeout_without_deadline(self):
        self.assertEqual(Context.background().request_timeout(15), 15)

    def test_request_timeout_capped_by_deadline(self):
        ctx = Context.with_timeout(2)
        self.assertLessEqual(ctx.request_timeout(15), 2)
        self.assertGreater(ctx.request_timeout(15), 0)


class TestRunWithContext(unittest.TestCase):
    def setUp(self):
        self.release = threading.Event()

    def tearDown(self):
        self.release.set()

    def _block(self):
        self.release.wait(5)
        return "late"

    def test_returns_result(self):
        self.assertEqual(run_with_context(Context.background(), lambda a, b: a + b, 2, b=3), 5)

    def test_reraises_worker_exception(self):
        def boom():
            raise KeyError("x")

        with self.assertRaises(KeyError):
            run_with_context(Context.background(), boom)

    def test_already_cancelled_does_not_call(self):
        called = []
        ctx = Context.background()
        ctx.cancel()
        with self.assertRaises(CancellationError):
            run_with_context(ctx, called.append, 1)
        self.assertEqual(called, [])

    def test_deadline_interrupts_blocking_call(self):
        ctx = Context.with_timeout(0.2)
        start = time.monotonic()
        with self.assertRaises(CancellationError):
            run_with_context(ctx, self._block)
        self.assertLess(time.monotonic() - start, 2.0)

    def test_cancel_from_other_thread(self):
        ctx = Context.background()
        timer = threading.Timer(0.1, ctx.cancel)
        timer.start()
        start = time.monotonic()
        try:
            with self.assertRaises(CancellationError):
                run_with_context(ctx, self._block)
        finally:
            timer.cancel()
        self.assertLess(time.monotonic() - start, 2.0)


if __name__ == "__main__":
    unittest.main()
