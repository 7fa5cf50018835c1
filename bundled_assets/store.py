"""Keyed asset store shared by the font and image caches.

A store maps string keys to decoded assets for the lifetime of the process.
It is filled in bulk from a :class:`~bundled_assets.discovery.ResourceRoot`
or one asset at a time, and emptied only by :meth:`KeyedAssetStore.clear`.

How a resource name becomes a key is a per-kind policy:

- :func:`stem_key` drops the directory and extension (fonts), so
  ``font/a.ttf`` and ``font/a.otf`` share the key ``a`` and the later load wins.
- :func:`stem_extension_key` keeps the extension (images), so ``red.png``
  and ``red.gif`` become ``red-png`` and ``red-gif``.
"""

from __future__ import annotations

import logging
import posixpath
import threading
from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

from bundled_assets.discovery import ResourceRoot
from bundled_assets.exceptions import AssetDecodeError

logger = logging.getLogger(__name__)

T = TypeVar("T")

Decoder = Callable[[str, bytes], T]
KeyPolicy = Callable[[str], str]


def _split_name(name: str) -> tuple[str, str]:
    base = posixpath.basename(name)
    stem, ext = posixpath.splitext(base)
    # A leading dot starts the extension: ".png" has an empty stem
    if not ext and base.startswith("."):
        return "", base
    return stem, ext


def stem_key(name: str) -> str:
    """Key from base name without extension: ``font/menomonia.ttf`` -> ``menomonia``."""
    return _split_name(name)[0]


def stem_extension_key(name: str) -> str:
    """Key from base name and extension: ``img/red.png`` -> ``red-png``."""
    stem, ext = _split_name(name)
    return f"{stem}-{ext.lstrip('.')}"


class KeyedAssetStore(Generic[T]):
    """Thread-safe mapping from key to one canonical decoded asset.

    Readers and writers share one re-entrant lock. A bulk load decodes
    everything first and publishes the batch in a single critical section;
    readers never see half of a load or half of a clear.
    """

    def __init__(
        self,
        kind: str,
        decoder: Decoder[T],
        key_policy: KeyPolicy = stem_key,
        default_suffixes: Iterable[str] = (),
    ) -> None:
        """Initialize store.

        Args:
            kind: Asset kind used in log messages ("font", "image").
            decoder: Callable turning ``(name, bytes)`` into an asset.
            key_policy: Callable deriving the key from a resource name.
            default_suffixes: Filters used when ``load_all`` gets none.
        """
        self.kind = kind
        self.decoder = decoder
        self.key_policy = key_policy
        self.default_suffixes = tuple(default_suffixes)
        self._entries: dict[str, T] = {}
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind!r}, entries={len(self)})"

    def decode(self, name: str, data: bytes) -> T:
        """Run the decoder, wrapping any failure in :class:`AssetDecodeError`."""
        try:
            return self.decoder(name, data)
        except AssetDecodeError:
            raise
        except Exception as e:
            raise AssetDecodeError(name, str(e) or type(e).__name__) from e

    def load_all(
        self,
        root: ResourceRoot,
        scope: str = "",
        suffixes: Iterable[str] | None = None,
    ) -> int:
        """Decode and insert every resource under ``scope`` matching ``suffixes``.

        Resources that fail to read or decode are logged and skipped. Keys that
        already exist are replaced by the freshly decoded asset.

        Args:
            root: Where to discover resources.
            scope: Directory-like namespace, ``""`` for the whole root.
            suffixes: Accepted extensions; ``None`` uses the store defaults. An
                empty collection matches nothing.

        Returns:
            Number of resources loaded successfully.
        """
        filters = self.default_suffixes if suffixes is None else tuple(suffixes)
        if not filters:
            logger.warning("No %s suffixes given; nothing loaded from %r", self.kind, scope or "/")
            return 0
        batch: dict[str, T] = {}
        loaded = 0
        for name in root.discover(scope, filters):
            try:
                asset = self.decode(name, root.read_bytes(name))
            except Exception as e:
                logger.error("Skipping %s %s: %s", self.kind, name, e, exc_info=True)
                continue
            batch[self.key_policy(name)] = asset
            loaded += 1

        with self._lock:
            self._entries.update(batch)
        logger.info("%d %s(s) loaded from %r", loaded, self.kind, scope or "/")
        return loaded

    def insert(self, key: str, asset: T) -> None:
        """Store ``asset`` under ``key``, replacing any previous entry."""
        with self._lock:
            self._entries[key] = asset

    def get(self, key: str) -> T | None:
        """Return the canonical asset for ``key``, or None with a warning logged."""
        with self._lock:
            asset = self._entries.get(key)
        if asset is None:
            logger.warning("%s with name %s is not available!", self.kind.capitalize(), key)
        return asset

    def keys(self) -> frozenset[str]:
        """Snapshot of the current key set."""
        with self._lock:
            return frozenset(self._entries)

    def clear(self) -> None:
        """Remove every entry. Calling it on an empty store is a no-op."""
        with self._lock:
            self._entries = {}
