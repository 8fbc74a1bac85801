"""
Command-line interface for the UniFi guest-authorization client.

Logs in, authorizes one guest MAC address, reports the controller's result
code and logs out again.
"""

import argparse
import getpass
import logging
import sys

from unifi_guest.config import (
    DEFAULT_PASSWORD,
    DEFAULT_URL,
    DEFAULT_USER,
    ENV_SITE,
    REQUEST_TIMEOUT,
)
from unifi_guest.context import Context
from unifi_guest.controller import Controller
from unifi_guest.envelope import envelope_message, parse_response_envelope
from unifi_guest.errors import UnifiError
from unifi_guest.logging_setup import log, setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog="unifi-guest",
        description="Authorize a guest client on a UniFi network controller.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Controller address, site, user and password can also be provided\n"
            "via the UNIFI_URL, UNIFI_SITE, UNIFI_USER and UNIFI_PASSWORD env vars.\n"
            "If the password is not supplied and not in the environment, "
            "you will be prompted for it."
        ),
    )
    parser.add_argument("mac", help="Guest MAC address (aa:bb:cc:dd:ee:ff)")
    parser.add_argument("minutes", type=int, help="Authorization length in minutes")
    parser.add_argument(
        "--url", default=DEFAULT_URL,
        help=f"Controller base URL (default: {DEFAULT_URL})",
    )
    parser.add_argument(
        "--site", default=ENV_SITE,
        help=f"Site slug (default: {ENV_SITE})",
    )
    parser.add_argument(
        "--user", default=DEFAULT_USER,
        help=f"Admin username (default: {DEFAULT_USER})",
    )
    parser.add_argument(
        "--password", default=DEFAULT_PASSWORD,
        help="Admin password (overrides UNIFI_PASSWORD env var)",
    )
    parser.add_argument("--down", type=int, default=0, help="Download limit in Kbps")
    parser.add_argument("--up", type=int, default=0, help="Upload limit in Kbps")
    parser.add_argument("--quota", type=int, default=0, help="Transfer quota in MB")
    parser.add_argument(
        "--timeout", type=float, default=REQUEST_TIMEOUT * 2,
        help="Overall deadline in seconds for the whole run "
             f"(default: {REQUEST_TIMEOUT * 2})",
    )
    parser.add_argument(
        "--no-verify-ssl", dest="verify_ssl", action="store_false", default=True,
        help="Disable TLS certificate verification (use for self-signed certs)",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable verbose debug logging, including response bodies",
    )
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> int:
    """Execute one authorize run; return the process exit code."""
    ctx = Context.with_timeout(args.timeout)
    try:
        ctl = Controller(
            args.url,
            args.user,
            args.password,
            args.site,
            verify_ssl=args.verify_ssl,
            debug=args.debug,
        )
    except UnifiError as exc:
        log.error("%s", exc)
        return 1

    with ctl:
        try:
            ctl.login(ctx)
        except UnifiError as exc:
            log.error("Login failed: %s", exc)
            return 1
        log.info("Logged in to %s (site %s)", ctl.base_url, ctl.site)

        ok = False
        try:
            resp = ctl.authorize_guest_with_limits(
                ctx, args.mac, args.minutes, args.down, args.up, args.quota,
            )
            envelope, ok = parse_response_envelope(resp.content)
            if ok:
                log.info("Authorized %s for %d minute(s)", args.mac, args.minutes)
            else:
                log.error(
                    "Controller rejected authorize-guest for %s: %s",
                    args.mac, envelope_message(envelope) or "rc != ok",
                )
        except UnifiError as exc:
            log.error("Authorize failed: %s", exc)
        finally:
            try:
                ctl.logout(ctx)
            except UnifiError as exc:
                log.warning("Logout failed: %s", exc)

    return 0 if ok else 1


def main() -> None:
    """
    Main entry point for the CLI.
    """
    args = parse_args()

    setup_logging(debug=args.debug)

    if args.debug:
        logging.getLogger("urllib3").setLevel(logging.DEBUG)

    if not args.password:
        args.password = getpass.getpass("Controller password: ")

    sys.exit(run(args))


if __name__ == "__main__":
    main()
