"""Package setup for unifi_guest."""

from setuptools import setup, find_packages

setup(
    name="unifi-guest",
    version="1.0.0",
    description="Client for authorizing guests on a UniFi network controller",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.31.0",
        "urllib3>=2.0.0",
        "colorlog>=6.8.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "unifi-guest=unifi_guest.cli:main",
        ],
    },
)
