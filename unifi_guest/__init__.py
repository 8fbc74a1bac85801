"""
unifi_guest
===========
Client for a UniFi-style network controller: log in, authorize guest
clients (optionally with bandwidth and quota limits), log out.

Package structure
-----------------
unifi_guest/
├── __init__.py       – package init and public API
├── config.py         – configuration constants
├── errors.py         – exception hierarchy
├── logging_setup.py  – package logger and colour console handler
├── context.py        – cancellation / deadline context for calls
├── envelope.py       – ``{"meta": {"rc": ...}, "data": [...]}`` parser
├── controller.py     – Controller session client
├── cli.py            – argparse CLI (``python -m unifi_guest``)
├── auth/             – session cookie store
├── network/          – requests.Session factory
└── utils/            – base-address parsing and endpoint URLs

Quick start
-----------
    from unifi_guest import Context, Controller, parse_response_envelope

    ctx = Context.with_timeout(10)
    with Controller("https://10.0.1.100:8443", "admin", "secret",
                    verify_ssl=False) as ctl:
        ctl.login(ctx)
        resp = ctl.authorize_guest(ctx, "aa:bb:cc:dd:ee:ff", 60)
        envelope, ok = parse_response_envelope(resp.content)
        ctl.logout(ctx)

HTTP errors raise; a 200 response whose ``meta.rc`` is not ``"ok"`` does
not.  Check ``ok`` yourself.
"""

from .context import Context
from .controller import Controller, build_command_envelope
from .envelope import envelope_message, parse_response_envelope
from .errors import (
    AddressError,
    AuthenticationError,
    CancellationError,
    CommandError,
    DecodeError,
    SchemaError,
    TransportError,
    UnifiError,
)

__version__ = "1.0.0"

__all__ = [
    "Context",
    "Controller",
    "build_command_envelope",
    "parse_response_envelope",
    "envelope_message",
    "UnifiError",
    "AddressError",
    "AuthenticationError",
    "CommandError",
    "DecodeError",
    "SchemaError",
    "CancellationError",
    "TransportError",
]
