"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Veritree, a product of Garudex Labs

Version information for Veritree.
"""

from importlib import metadata
from pathlib import Path


def get_version() -> str:
    """
    Read the version from the VERSION file of a source checkout, falling
    back to the installed distribution metadata.
    """
    version_file = Path(__file__).parent.parent / "VERSION"
    if version_file.exists():
        return version_file.read_text().strip()
    try:
        return metadata.version("veritree")
    except metadata.PackageNotFoundError:
        return "unknown"


__version__ = get_version()
