"""Pytest configuration and shared fixtures for bundled-assets tests.

The resource tree used by most tests is generated once per session:

    font/cronos-pro-regular.ttf, font/cronos-pro-italic.ttf
    font/special/menomonia.ttf, font/special/menomonia-italic.ttf
    images/red/20x20_red.{bmp,gif,ico,jpg,png,tif}
    images/green/20x20_green.{bmp,gif,ico,jpg,png,tif}
    language/{labels,messages,errors}*.properties
    config.properties, extra.properties
    broken/ (undecodable font, image and properties files)
"""

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from PIL import Image

from bundled_assets.discovery import ResourceRoot

IMAGE_FORMATS = ("bmp", "gif", "ico", "jpg", "png", "tif")

# (file name, family, style name, PostScript name, fsSelection)
FONTS = (
    ("font/cronos-pro-regular.ttf", "Cronos Pro", "Regular", "CronosPro-Regular", 0x40),
    ("font/cronos-pro-italic.ttf", "Cronos Pro", "Italic", "CronosPro-Italic", 0x01),
    ("font/special/menomonia.ttf", "Menomonia", "Regular", "Menomonia", 0x40),
    ("font/special/menomonia-italic.ttf", "Menomonia", "Italic", "Menomonia-Italic", 0x01),
)

PROPERTIES = {
    "language/labels.properties": "# Default labels\nok=OK\ncancel=Cancel\nname=Name\n",
    "language/labels_de_DE.properties": "ok=OK\ncancel=Abbrechen\n",
    "language/labels_fr_FR.properties": "ok=D'accord\ncancel=Annuler\n",
    "language/messages.properties": "greet=Hello {}!\nprogress={} of {} done\n",
    "language/messages_de.properties": "greet=Hallo {}!\n",
    "language/errors.properties": "not_found=Not found: {}\n",
    "config.properties": "# Demo configuration\napp.name=Demo\napp.version=1.0\n",
    "extra.properties": "app.name=Override\nfeature=on\n",
}


def build_font(path: Path, family: str, style: str, ps_name: str, fs_selection: int) -> None:
    """Write a minimal TrueType font with a triangular ``A`` glyph."""
    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder([".notdef", "A"])
    fb.setupCharacterMap({ord("A"): "A"})

    pen = TTGlyphPen(None)
    pen.moveTo((100, 0))
    pen.lineTo((500, 700))
    pen.lineTo((900, 0))
    pen.closePath()
    fb.setupGlyf({".notdef": TTGlyphPen(None).glyph(), "A": pen.glyph()})

    fb.setupHorizontalMetrics({".notdef": (500, 0), "A": (1000, 100)})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable(
        {
            "familyName": family,
            "styleName": style,
            "fullName": f"{family} {style}",
            "psName": ps_name,
        }
    )
    fb.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200, fsSelection=fs_selection)
    fb.setupPost()
    path.parent.mkdir(parents=True, exist_ok=True)
    fb.save(str(path))


def build_images(directory: Path, stem: str, color: str) -> None:
    """Write a 20x20 solid image in every test format."""
    directory.mkdir(parents=True, exist_ok=True)
    image = Image.new("RGB", (20, 20), color)
    for ext in IMAGE_FORMATS:
        target = directory / f"{stem}.{ext}"
        if ext == "ico":
            image.save(target, sizes=[(20, 20)])
        else:
            image.save(target)


@pytest.fixture(scope="session")
def resource_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Return a directory holding fonts, images and properties resources."""
    base = tmp_path_factory.mktemp("resources")
    for name, family, style, ps_name, fs_selection in FONTS:
        build_font(base / name, family, style, ps_name, fs_selection)
    build_images(base / "images" / "red", "20x20_red", "red")
    build_images(base / "images" / "green", "20x20_green", "green")
    for name, content in PROPERTIES.items():
        target = base / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")

    broken = base / "broken"
    broken.mkdir()
    (broken / "broken.ttf").write_bytes(b"not a font")
    (broken / "broken.png").write_bytes(b"not an image")
    (broken / "bad.properties").write_text("key=\\u12\n", encoding="utf-8")
    return base


@pytest.fixture
def resource_root(resource_dir: Path) -> ResourceRoot:
    """Return a ResourceRoot over the session resource tree."""
    return ResourceRoot(resource_dir)
