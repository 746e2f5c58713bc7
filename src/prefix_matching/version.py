"""Version information for :mod:`prefix_matching`."""

__all__ = [
    "VERSION",
    "get_version",
]

VERSION = "0.1.0-dev"


def get_version() -> str:
    """Get the :mod:`prefix_matching` version string."""
    return VERSION
