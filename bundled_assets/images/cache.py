"""Image cache.

Images are keyed by base file name plus extension so that the same picture in
several formats stays distinct: ``images/red/20x20_red.png`` is served as
``"20x20_red-png"``.
"""

from __future__ import annotations

import logging
import urllib.error
import urllib.request
from collections.abc import Iterable
from io import BytesIO

from PIL import Image

from bundled_assets.discovery import ResourceRoot
from bundled_assets.exceptions import AssetDecodeError
from bundled_assets.store import KeyedAssetStore, stem_extension_key
from bundled_assets.variants import ImageVariant, resolve_image

logger = logging.getLogger(__name__)

_EXTENSIONS = (".bmp", ".gif", ".ico", ".jpg", ".jpeg", ".png", ".tif", ".tiff")

# Suffix matching is case-sensitive, so both spellings are listed
IMAGE_SUFFIXES: tuple[str, ...] = _EXTENSIONS + tuple(ext.upper() for ext in _EXTENSIONS)


def decode_image(name: str, data: bytes) -> Image.Image:
    """Decode raster image bytes, forcing Pillow to read the pixel data.

    Raises:
        PIL.UnidentifiedImageError: If the format is not recognised.
    """
    image = Image.open(BytesIO(data))
    image.load()
    return image


class ImageCache(KeyedAssetStore[Image.Image]):
    """Cache of decoded images with on-demand scaled copies."""

    # Default timeout for URL loads (seconds)
    DEFAULT_TIMEOUT = 30

    # Maximum image size to download (20MB)
    MAX_SIZE = 20 * 1024 * 1024

    def __init__(self, suffixes: Iterable[str] = IMAGE_SUFFIXES) -> None:
        super().__init__(
            kind="image",
            decoder=decode_image,
            key_policy=stem_extension_key,
            default_suffixes=suffixes,
        )

    def load_all_images(
        self,
        root: ResourceRoot,
        scope: str = "",
        suffixes: Iterable[str] | None = None,
    ) -> int:
        """Load every image under ``scope``; see :meth:`KeyedAssetStore.load_all`."""
        return self.load_all(root, scope, suffixes)

    def get_image(
        self,
        key: str,
        variant: ImageVariant | None = None,
        *,
        width: int | None = None,
        height: int | None = None,
    ) -> Image.Image | None:
        """Return a copy of the image stored under ``key``, optionally scaled.

        Args:
            key: Image key (``stem-extension``).
            variant: Requested dimensions.
            width: Shortcut for ``ImageVariant(width=...)``.
            height: Shortcut for ``ImageVariant(height=...)``.

        Returns:
            A new image object, or None if ``key`` is not loaded.
        """
        if variant is not None and (width, height) != (None, None):
            raise TypeError("Pass either an ImageVariant or width/height, not both")
        if variant is None:
            variant = ImageVariant(width=width, height=height)

        image = self.get(key)
        if image is None:
            return None
        return resolve_image(image, variant)

    def load_image_from_url(self, key: str, url: str, timeout: float = DEFAULT_TIMEOUT) -> bool:
        """Fetch an image over HTTP(S) and store it under ``key``.

        Failures are logged and reported through the return value.

        Args:
            key: Key to store the image under.
            url: Location of the image.
            timeout: Request timeout in seconds.

        Returns:
            True if the image was fetched, decoded and stored.
        """
        try:
            req = urllib.request.Request(url, headers={"User-Agent": "bundled-assets/0.1.0"})
            with urllib.request.urlopen(req, timeout=timeout) as response:
                content = response.read(self.MAX_SIZE + 1)
        except (urllib.error.URLError, OSError, ValueError) as e:
            logger.error("Could not fetch image %s from %s: %s", key, url, e)
            return False

        if len(content) > self.MAX_SIZE:
            logger.error("Image %s at %s is larger than %d bytes", key, url, self.MAX_SIZE)
            return False

        try:
            image = self.decode(url, content)
        except AssetDecodeError as e:
            logger.error("Could not decode image %s from %s: %s", key, url, e, exc_info=True)
            return False

        self.insert(key, image)
        return True

    def image_keys(self) -> frozenset[str]:
        return self.keys()
