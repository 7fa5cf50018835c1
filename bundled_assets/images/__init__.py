"""Image handling for bundled-assets."""

from bundled_assets.images.cache import IMAGE_SUFFIXES, ImageCache, decode_image

__all__ = ["ImageCache", "IMAGE_SUFFIXES", "decode_image"]
