"""ArcadeFlight version lookup.

A source checkout reports the contents of the root ``VERSION`` file, so a
bumped file is picked up without reinstalling. An installed distribution
reports its package metadata.
"""

from importlib import metadata
from pathlib import Path

DISTRIBUTION_NAME = "arcadeflight"
FALLBACK_VERSION = "0.1.0"

# src/arcadeflight/version.py -> project root
SOURCE_VERSION_FILE = Path(__file__).resolve().parents[2] / "VERSION"


def get_version(version_file: Path = SOURCE_VERSION_FILE) -> str:
    """Resolve the running version.

    Args:
        version_file: ``VERSION`` file of a source checkout.

    Returns:
        Version string (e.g., "0.1.0").
    """
    if version_file.is_file():
        text = version_file.read_text(encoding="utf-8").strip()
        if text:
            return text

    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return FALLBACK_VERSION
