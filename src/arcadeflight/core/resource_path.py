"""Resolution of bundled configuration files.

Config files live in the ``config/`` directory at the project root. The
lookup also tries the current working directory so that the application
can be started from an unpacked source tree.
"""

from pathlib import Path


def get_config_dir() -> Path:
    """Get the configuration directory.

    Returns:
        Path to the first existing ``config`` directory, or the project-root
        location if none exists.
    """
    candidates = [
        Path(__file__).parent.parent.parent.parent / "config",  # src/arcadeflight/core -> root
        Path.cwd() / "config",
    ]
    for candidate in candidates:
        if candidate.is_dir():
            return candidate
    return candidates[0]


def get_config_path(name: str) -> Path:
    """Get the path of a config file.

    Args:
        name: File name relative to the config directory
            (e.g. ``"logging.yaml"`` or ``"aircraft/trainer.yaml"``).

    Returns:
        Path to the file. It may not exist.
    """
    return get_config_dir() / name
