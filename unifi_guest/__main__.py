"""
Main entry point for the unifi_guest package.

Allows running the client as: python -m unifi_guest
"""

from unifi_guest.cli import main

if __name__ == "__main__":
    main()
