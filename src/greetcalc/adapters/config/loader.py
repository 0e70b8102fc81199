"""Read the layered greetcalc configuration from disk.

Layers, lowest precedence first: the bundled ``defaultconfig.toml``, then
the app, host and user files, ``.env`` and finally environment
variables. A profile moves every file layer into a
``profile/<name>/`` subdirectory.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import DEFAULT_MAX_PROFILE_LENGTH, Config, read_config, validate_profile_name

from greetcalc import __init__conf__


def validate_profile(profile: str, max_length: int | None = None) -> None:
    """Raise ``ValueError`` for profile names that are empty, too long or path-like.

    ``max_length`` defaults to lib_layered_config's limit of 64 characters.

    Example:
        >>> validate_profile("staging-v2")
    """
    validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH if max_length is None else max_length)


def get_default_config_path() -> Path:
    """The ``defaultconfig.toml`` shipped inside the package."""
    return Path(__file__).with_name("defaultconfig.toml")


class LayeredConfigLoader:
    """``get_config`` implementation that reads each (profile, start_dir) once.

    ``start_dir`` is where ``.env`` discovery begins; ``None`` means the
    current directory. Call :meth:`cache_clear` to force a fresh read.
    """

    def __init__(self, cache_size: int = 4) -> None:
        self._read = lru_cache(maxsize=cache_size)(self._read_layers)

    @staticmethod
    def _read_layers(profile: str | None, start_dir: str | None) -> Config:
        return read_config(
            vendor=__init__conf__.LAYEREDCONF_VENDOR,
            app=__init__conf__.LAYEREDCONF_APP,
            slug=__init__conf__.LAYEREDCONF_SLUG,
            profile=profile,
            default_file=get_default_config_path(),
            start_dir=start_dir,
        )

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config:
        """Return the merged configuration.

        Raises:
            ValueError: If ``profile`` is not a valid profile name.
        """
        if profile is not None:
            validate_profile(profile)
        return self._read(profile, start_dir)

    def cache_clear(self) -> None:
        self._read.cache_clear()


get_config = LayeredConfigLoader()


__all__ = [
    "LayeredConfigLoader",
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
