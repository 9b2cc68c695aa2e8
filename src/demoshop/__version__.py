"""Version information for demoshop-e2e."""

__version__ = "0.1.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Release information
__title__ = "demoshop-e2e"
__description__ = "End-to-end browser test suite for the Demo Web Shop"
__author__ = "demoshop-e2e contributors"
__license__ = "MIT"


def get_version() -> str:
    """Return the current version string."""
    return __version__


def get_version_info() -> tuple[int, ...]:
    """Return the version as a tuple of integers."""
    return __version_info__
