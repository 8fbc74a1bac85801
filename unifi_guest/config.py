"""Configuration constants for the UniFi guest-authorization client."""

import os

DEFAULT_SITE = "default"

# Credentials and controller address can also be supplied via the environment
DEFAULT_URL = os.environ.get("UNIFI_URL", "https://127.0.0.1:8443")
DEFAULT_USER = os.environ.get("UNIFI_USER", "admin")
DEFAULT_PASSWORD = os.environ.get("UNIFI_PASSWORD", "")
ENV_SITE = os.environ.get("UNIFI_SITE", DEFAULT_SITE)

# Endpoint paths as segment tuples; the command path takes the site slug
LOGIN_PATH  = ("api", "login")
LOGOUT_PATH = ("api", "logout")
STAMGR_PATH = ("cmd", "stamgr")    # appended to ("api", "s", <site>)

REQUEST_TIMEOUT = 15               # seconds per HTTP request
CONTEXT_POLL_INTERVAL = 0.05       # how often a waiting call re-checks its context

AUTHORIZE_GUEST_CMD = "authorize-guest"

# Sent on every request; the controller rejects form-encoded bodies
JSON_HEADERS = {
    "Accept": "*/*",
    "Content-Type": "application/json",
}
