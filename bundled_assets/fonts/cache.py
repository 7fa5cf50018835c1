"""Font cache.

Fonts are keyed by base file name without extension: ``font/menomonia.ttf``
is served as ``"menomonia"``. Two files that differ only in extension share a
key and the later load replaces the earlier one.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from fontTools.misc.transform import Transform

from bundled_assets.discovery import ResourceRoot
from bundled_assets.fonts.font import Font, FontStyle, decode_font
from bundled_assets.store import KeyedAssetStore, stem_key
from bundled_assets.variants import FontVariant, resolve_font

logger = logging.getLogger(__name__)

FONT_SUFFIXES: tuple[str, ...] = (".ttf",)


class FontCache(KeyedAssetStore[Font]):
    """Cache of decoded fonts with on-demand size/style/transform variants."""

    def __init__(self, suffixes: Iterable[str] = FONT_SUFFIXES) -> None:
        super().__init__(
            kind="font",
            decoder=decode_font,
            key_policy=stem_key,
            default_suffixes=suffixes,
        )

    def load_all_fonts(
        self,
        root: ResourceRoot,
        scope: str = "",
        suffixes: Iterable[str] | None = None,
    ) -> int:
        """Load every font under ``scope``; see :meth:`KeyedAssetStore.load_all`."""
        return self.load_all(root, scope, suffixes)

    def get_font(
        self,
        key: str,
        variant: FontVariant | None = None,
        *,
        size: float | None = None,
        style: FontStyle | int | None = None,
        transform: Transform | tuple[float, ...] | None = None,
    ) -> Font | None:
        """Return the font stored under ``key``, optionally as a variant.

        Args:
            key: Font key (file stem).
            variant: Requested presentation.
            size: Shortcut for ``FontVariant(size=...)``.
            style: Shortcut for ``FontVariant(style=...)``.
            transform: Shortcut for ``FontVariant(transform=...)``.

        Returns:
            The derived font, or None if ``key`` is not loaded.

        Raises:
            TypeError: If ``variant`` is combined with keyword shortcuts.
        """
        if variant is not None and (size, style, transform) != (None, None, None):
            raise TypeError("Pass either a FontVariant or keyword attributes, not both")
        if variant is None:
            variant = FontVariant(size=size, style=style, transform=transform)

        font = self.get(key)
        if font is None:
            return None
        return resolve_font(font, variant)

    def font_keys(self) -> frozenset[str]:
        return self.keys()
