"""Logging configuration for the UniFi guest-authorization client."""

import logging

import colorlog

log = logging.getLogger("unifi-guest")


def setup_logging(debug: bool = False) -> None:
    """Install a coloured console handler on the package logger.

    ``debug`` switches the level from INFO to DEBUG.
    """
    level = logging.DEBUG if debug else logging.INFO
    log.setLevel(level)
    log.handlers.clear()

    handler = colorlog.StreamHandler()
    handler.setFormatter(colorlog.ColoredFormatter(
        "%(log_color)s%(asctime)s [%(levelname)s]%(reset)s %(message)s",
        datefmt="%H:%M:%S",
        log_colors={
            "DEBUG":    "cyan",
            "INFO":     "green",
            "WARNING":  "yellow",
            "ERROR":    "red",
            "CRITICAL": "bold_red",
        },
    ))
    log.addHandler(handler)
