"""Font asset and its decoder.

A :class:`Font` is an immutable description of one face: the raw font program
plus the presentation attributes (point size, style flags and affine
transform). Deriving a variant produces a new ``Font`` that shares the raw
bytes but nothing mutable; each instance parses its own ``TTFont`` on demand.
"""

from __future__ import annotations

import posixpath
import re
from dataclasses import dataclass, field, replace
from enum import IntFlag
from functools import cached_property
from io import BytesIO
from typing import Any

from fontTools.misc.transform import Identity, Transform
from fontTools.pens.recordingPen import RecordingPen
from fontTools.pens.transformPen import TransformPen
from fontTools.ttLib import TTFont


class FontStyle(IntFlag):
    """Style flags; combine with ``|`` (``BOLD | ITALIC``)."""

    PLAIN = 0
    BOLD = 1
    ITALIC = 2


def _name(tt: TTFont, ids: list[int]) -> str | None:
    """First non-empty name record for any of ``ids``, in order."""
    if "name" not in tt:
        return None
    for nid in ids:
        for rec in tt["name"].names:
            if rec.nameID == nid:
                try:
                    text = str(rec.toUnicode()).strip()
                except UnicodeDecodeError:
                    text = str(rec.string, errors="ignore").strip()
                if text:
                    return text
    return None


def as_transform(value: Transform | tuple[float, ...] | list[float]) -> Transform:
    """Coerce a 6-number sequence ``(xx, xy, yx, yy, dx, dy)`` to a Transform."""
    if isinstance(value, Transform):
        return value
    values = tuple(float(v) for v in value)
    if len(values) != 6:
        raise ValueError(f"Affine transform needs 6 values, got {len(values)}")
    return Transform(*values)


@dataclass(frozen=True)
class Font:
    """One font face with presentation attributes.

    Attributes:
        data: Raw font program bytes (TTF/OTF/TTC).
        font_number: Face index inside a collection.
        family: Typographic family name (name ID 16, else 1).
        font_name: PostScript name (name ID 6), e.g. ``CronosPro-Regular``.
        full_name: Full face name (name ID 4).
        size: Point size. Freshly decoded fonts have size 1.
        style: Style flags.
        transform: Affine transform applied to glyph outlines.
    """

    data: bytes = field(repr=False)
    font_number: int = 0
    family: str = ""
    font_name: str = ""
    full_name: str = ""
    size: float = 1.0
    style: FontStyle = FontStyle.PLAIN
    transform: Transform = Identity

    @cached_property
    def ttfont(self) -> TTFont:
        """A ``TTFont`` parsed for this instance only."""
        return TTFont(BytesIO(self.data), fontNumber=self.font_number)

    @property
    def is_plain(self) -> bool:
        return self.style == FontStyle.PLAIN

    @property
    def is_bold(self) -> bool:
        return bool(self.style & FontStyle.BOLD)

    @property
    def is_italic(self) -> bool:
        return bool(self.style & FontStyle.ITALIC)

    @property
    def is_transformed(self) -> bool:
        return self.transform != Identity

    @property
    def units_per_em(self) -> int:
        return int(self.ttfont["head"].unitsPerEm)

    def derive(
        self,
        size: float | None = None,
        style: FontStyle | int | None = None,
        transform: Transform | tuple[float, ...] | None = None,
    ) -> Font:
        """Return a copy with the given attributes replaced.

        Each argument replaces only its own attribute; ``None`` keeps it.
        """
        changes: dict[str, Any] = {}
        if size is not None:
            changes["size"] = float(size)
        if style is not None:
            changes["style"] = FontStyle(style)
        if transform is not None:
            changes["transform"] = as_transform(transform)
        return replace(self, **changes)

    def glyph_outline(self, char: str) -> list[tuple[str, tuple[Any, ...]]] | None:
        """Record the outline of ``char`` in font units scaled to ``size``.

        The point size scale is applied first, then :attr:`transform`.
        Coordinates keep the font's y-up orientation.

        Returns:
            RecordingPen value, or None if the font has no glyph for ``char``.
        """
        tt = self.ttfont
        glyph_name = (tt.getBestCmap() or {}).get(ord(char))
        if glyph_name is None:
            return None
        scale = self.size / self.units_per_em
        matrix = self.transform.transform(Transform().scale(scale))
        pen = RecordingPen()
        tt.getGlyphSet()[glyph_name].draw(TransformPen(pen, matrix))
        return pen.value

    def glyph_path(self, char: str, precision: int = 3) -> str | None:
        """SVG path data for ``char``; see :meth:`glyph_outline`."""
        recording = self.glyph_outline(char)
        if recording is None:
            return None
        return recording_to_svg_path(recording, precision)


def recording_to_svg_path(recording: list[tuple[str, tuple[Any, ...]]], precision: int = 3) -> str:
    """Convert a RecordingPen recording to SVG path commands."""
    fmt = f"{{:.{precision}f}}"

    def pt(p: tuple[float, float]) -> str:
        return f"{fmt.format(p[0])} {fmt.format(p[1])}"

    commands = []
    for op, args in recording:
        if op == "moveTo":
            commands.append(f"M {pt(args[0])}")
        elif op == "lineTo":
            commands.append(f"L {pt(args[0])}")
        elif op == "qCurveTo":
            if args[-1] is None:
                args = (*args[:-1], args[0])
            # TrueType quadratics may carry several off-curve points with
            # implied on-curve points halfway between them
            for i in range(len(args) - 1):
                ctrl = args[i]
                if i == len(args) - 2:
                    end = args[i + 1]
                else:
                    nxt = args[i + 1]
                    end = ((ctrl[0] + nxt[0]) / 2, (ctrl[1] + nxt[1]) / 2)
                commands.append(f"Q {pt(ctrl)} {pt(end)}")
        elif op == "curveTo":
            if len(args) >= 3:
                commands.append(f"C {pt(args[0])} {pt(args[1])} {pt(args[2])}")
        elif op == "closePath":
            commands.append("Z")
    return " ".join(commands)


def _style_from_names(subfamily: str, tt: TTFont) -> FontStyle:
    style = FontStyle.PLAIN
    if "OS/2" in tt:
        selection = tt["OS/2"].fsSelection
        if selection & 0x20:
            style |= FontStyle.BOLD
        if selection & 0x01:
            style |= FontStyle.ITALIC
    tokens = set(re.split(r"[\s\-_]+", subfamily.lower()))
    if "bold" in tokens:
        style |= FontStyle.BOLD
    if tokens & {"italic", "oblique"}:
        style |= FontStyle.ITALIC
    return style


def decode_font(name: str, data: bytes) -> Font:
    """Parse a TrueType/OpenType program into a plain, size-1 :class:`Font`.

    Style flags describe requested presentation and start out PLAIN even for
    faces that are bold or italic by design; see :func:`design_style`.

    Raises:
        fontTools.ttLib.TTLibError: If ``data`` is not a font program.
    """
    tt = TTFont(BytesIO(data), fontNumber=0)
    stem = posixpath.splitext(posixpath.basename(name))[0]
    family = _name(tt, [16, 1]) or stem
    full_name = _name(tt, [4]) or family
    ps_name = _name(tt, [6]) or full_name.replace(" ", "")
    return Font(data=data, family=family, font_name=ps_name, full_name=full_name)


def design_style(font: Font) -> FontStyle:
    """Style the face was designed with, from OS/2 and subfamily name."""
    subfamily = _name(font.ttfont, [17, 2]) or ""
    return _style_from_names(subfamily, font.ttfont)
