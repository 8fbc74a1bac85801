"""
Tests for the command-line front end.
"""

import unittest
from unittest.mock import MagicMock, patch

from unifi_guest.cli import parse_args, run
from unifi_guest.errors import AddressError, AuthenticationError, CommandError

OK_BODY = b'{"meta":{"rc":"ok"},"data":[]}'
ERROR_BODY = b'{"meta":{"rc":"error","msg":"api.err.UnknownStation"},"data":[]}'


class TestParseArgs(unittest.TestCase):
    def test_positional_and_limits(self):
        args = parse_args([
            "aa:bb:cc:dd:ee:ff", "60",
            "--url", "https://host:8443", "--site", "office",
            "--down", "2048", "--quota", "100", "--no-verify-ssl",
        ])
        self.assertEqual(args.mac, "aa:bb:cc:dd:ee:ff")
        self.assertEqual(args.minutes, 60)
        self.assertEqual(args.url, "https://host:8443")
        self.assertEqual(args.site, "office")
        self.assertEqual(args.down, 2048)
        self.assertEqual(args.up, 0)
        self.assertEqual(args.quota, 100)
        self.assertFalse(args.verify_ssl)

    def test_verify_ssl_default_on(self):
        args = parse_args(["aa:bb:cc:dd:ee:ff", "5"])
        self.assertTrue(args.verify_ssl)
        self.assertFalse(args.debug)


class TestRun(unittest.TestCase):
    def _args(self, *extra):
        return parse_args([
            "aa:bb:cc:dd:ee:ff", "5",
            "--url", "https://host:8443", "--user", "admin", "--password", "pw",
            *extra,
        ])

    def _controller(self, body=OK_BODY):
        ctl = MagicMock()
        ctl.base_url = "https://host:8443/"
        ctl.site = "default"
        ctl.authorize_guest_with_limits.return_value = MagicMock(content=body)
        return ctl

    def test_success_exit_zero(self):
        ctl = self._controller()
        with patch("unifi_guest.cli.Controller", return_value=ctl) as factory:
            self.assertEqual(run(self._args("--up", "512")), 0)

        factory.assert_called_once()
        self.assertEqual(factory.call_args.args[:4], ("https://host:8443", "admin", "pw", "default"))
        ctl.login.assert_called_once()
        call = ctl.authorize_guest_with_limits.call_args.args
        self.assertEqual(call[1:], ("aa:bb:cc:dd:ee:ff", 5, 0, 512, 0))
        ctl.logout.assert_called_once()

    def test_rc_error_exit_one_and_still_logs_out(self):
        ctl = self._controller(ERROR_BODY)
        with patch("unifi_guest.cli.Controller", return_value=ctl):
            with self.assertLogs("unifi-guest", level="ERROR") as cm:
                self.assertEqual(run(self._args()), 1)
        self.assertIn("api.err.UnknownStation", cm.output[0])
        ctl.logout.assert_called_once()

    def test_command_error_still_logs_out(self):
        ctl = self._controller()
        ctl.authorize_guest_with_limits.side_effect = CommandError("authorize-guest", 500)
        with patch("unifi_guest.cli.Controller", return_value=ctl):
            with self.assertLogs("unifi-guest", level="ERROR"):
                self.assertEqual(run(self._args()), 1)
        ctl.logout.assert_called_once()

    def test_login_failure_skips_command(self):
        ctl = self._controller()
        ctl.login.side_effect = AuthenticationError("login", 400)
        with patch("unifi_guest.cli.Controller", return_value=ctl):
            with self.assertLogs("unifi-guest", level="ERROR"):
                self.assertEqual(run(self._args()), 1)
        ctl.authorize_guest_with_limits.assert_not_called()

    def test_bad_address(self):
        with patch("unifi_guest.cli.Controller", side_effect=AddressError("bad")):
            with self.assertLogs("unifi-guest", level="ERROR"):
                self.assertEqual(run(self._args()), 1)


if __name__ == "__main__":
    unittest.main()
