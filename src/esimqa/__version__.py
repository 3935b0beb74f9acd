"""Version information for esimqa."""

__version__ = "0.1.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Release information
__title__ = "esimqa"
__description__ = "End-to-end and API regression suite for an eSIM marketplace"
__author__ = "esimqa Team"
__license__ = "MIT"
__copyright__ = "Copyright 2024-2026 esimqa Team"
