"""Configuration values read from ``.properties`` resources.

Values are plain strings. Two accessors exist: :meth:`ConfigStore.get`
returns None for an unknown key, :meth:`ConfigStore.require` raises
:class:`~bundled_assets.exceptions.UnknownConfigKeyError` naming the key and
the resources that were searched.
"""

from __future__ import annotations

import logging
import threading

from bundled_assets import properties
from bundled_assets.discovery import ResourceRoot
from bundled_assets.exceptions import AssetDecodeError, UnknownConfigKeyError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_RESOURCE = "config.properties"


class ConfigStore:
    """Flat string-to-string configuration mapping."""

    def __init__(self) -> None:
        self._values: dict[str, str] = {}
        self._sources: list[str] = []
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._values

    @property
    def sources(self) -> list[str]:
        """Names of the resources loaded so far, in load order."""
        with self._lock:
            return list(self._sources)

    def load(self, root: ResourceRoot, filename: str = DEFAULT_CONFIG_RESOURCE) -> int:
        """Merge the properties resource ``filename`` into the store.

        Keys already present are overwritten.

        Returns:
            Number of keys in the store after the load.

        Raises:
            ResourceNotFoundError: If ``filename`` does not exist.
            AssetDecodeError: If the resource is malformed.
        """
        data = root.read_bytes(filename)
        try:
            values = properties.loads(data)
        except ValueError as e:
            raise AssetDecodeError(filename, str(e)) from e

        with self._lock:
            self._values.update(values)
            if filename not in self._sources:
                self._sources.append(filename)
            total = len(self._values)
        logger.info("%d config value(s) loaded from %s", len(values), filename)
        return total

    def get(self, key: str) -> str | None:
        """Value for ``key`` or None."""
        with self._lock:
            return self._values.get(key)

    def require(self, key: str) -> str:
        """Value for ``key``.

        Raises:
            UnknownConfigKeyError: If ``key`` is not present.
        """
        with self._lock:
            value = self._values.get(key)
            sources = list(self._sources) or [DEFAULT_CONFIG_RESOURCE]
        if value is None:
            raise UnknownConfigKeyError(key, sources)
        return value

    def keys(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._values)

    def clear(self) -> None:
        """Drop every value and forget the loaded sources."""
        with self._lock:
            self._values = {}
            self._sources = []
