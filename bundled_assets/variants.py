"""Derived variants of cached assets.

Callers ask for a presentation of a cached asset through one parameter object
instead of a family of overloads:

    >>> cache.get_font("menomonia", FontVariant(size=26, style=FontStyle.BOLD))
    >>> cache.get_image("logo-png", ImageVariant(width=32, height=32))

Resolution is a pure function of ``(canonical asset, variant)``. The canonical
asset is never modified and the result never aliases mutable state of it.
"""

from __future__ import annotations

from dataclasses import dataclass

from fontTools.misc.transform import Transform
from PIL import Image

from bundled_assets.fonts.font import Font, FontStyle, as_transform

# Area averaging, the smooth downscaling filter
RESAMPLE = Image.Resampling.BOX


@dataclass(frozen=True)
class FontVariant:
    """Requested font presentation. Every field is optional.

    Attributes:
        size: Point size replacing the font's size attribute.
        style: Style flags replacing the font's style.
        transform: Affine transform applied to glyph outlines; accepts a
            ``fontTools.misc.transform.Transform`` or 6 numbers.
    """

    size: float | None = None
    style: FontStyle | None = None
    transform: Transform | None = None

    def __post_init__(self) -> None:
        if self.transform is not None and not isinstance(self.transform, Transform):
            object.__setattr__(self, "transform", as_transform(self.transform))
        if self.style is not None and not isinstance(self.style, FontStyle):
            object.__setattr__(self, "style", FontStyle(self.style))

    @property
    def is_empty(self) -> bool:
        return self.size is None and self.style is None and self.transform is None


@dataclass(frozen=True)
class ImageVariant:
    """Requested image dimensions.

    Scaling is all-or-nothing: it happens only when both ``width`` and
    ``height`` are given and positive and at least one differs from the
    source. A missing axis counts as 0, so a one-sided request is a no-op
    rather than an aspect-locked scale.
    """

    width: int | None = None
    height: int | None = None

    @classmethod
    def from_size(cls, size: tuple[int, int]) -> ImageVariant:
        width, height = size
        return cls(width=width, height=height)

    def target_for(self, source: tuple[int, int]) -> tuple[int, int] | None:
        """Dimensions to scale ``source`` to, or None to leave it as is."""
        new_width = self.width or 0
        new_height = self.height or 0
        if new_width <= 0 or new_height <= 0:
            return None
        if (new_width, new_height) == tuple(source):
            return None
        return new_width, new_height


def resolve_font(font: Font, variant: FontVariant | None = None) -> Font:
    """Apply size, then style, then transform to a canonical font.

    ``Font`` is immutable, so the plain case returns the canonical instance
    itself.
    """
    if variant is None or variant.is_empty:
        return font
    return font.derive(size=variant.size, style=variant.style, transform=variant.transform)


def resolve_image(image: Image.Image, variant: ImageVariant | None = None) -> Image.Image:
    """Return a fresh image, scaled when the variant asks for it.

    The result is always an independent copy; mutating it leaves the cached
    image untouched.
    """
    target = variant.target_for(image.size) if variant is not None else None
    if target is None:
        return image.copy()
    return image.resize(target, resample=RESAMPLE)
