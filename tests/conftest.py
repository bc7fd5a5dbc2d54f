"""
Pytest configuration and fixtures for fontpack tests.
"""

import io
import zipfile
from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from fontpack.core.config import GeneratorConfig

GLYPH_ORDER = [".notdef", "space", "A", "B", "a", "b"]

ARCHIVE_ROOT = "dejavu-fonts-ttf-2.37"


def build_test_font(family: str = "Fontpack Test", style: str = "Regular") -> bytes:
    """Build a small but complete TrueType font."""
    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(GLYPH_ORDER)
    fb.setupCharacterMap({0x20: "space", 0x41: "A", 0x42: "B", 0x61: "a", 0x62: "b"})

    glyphs = {}
    for name in GLYPH_ORDER:
        pen = TTGlyphPen(None)
        if name != "space":
            pen.moveTo((100, 0))
            pen.lineTo((100, 700))
            pen.lineTo((500, 700))
            pen.lineTo((500, 0))
            pen.closePath()
        glyphs[name] = pen.glyph()
    fb.setupGlyf(glyphs)

    fb.setupHorizontalMetrics({name: (600, 100) for name in GLYPH_ORDER})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": family, "styleName": style})
    fb.setupOS2(sTypoAscender=800, sTypoDescender=-200, usWinAscent=800, usWinDescent=200)
    fb.setupPost()

    buf = io.BytesIO()
    fb.save(buf)
    return buf.getvalue()


def write_zip(path: Path, members: dict[str, bytes]) -> Path:
    """Write ``members`` into a deflated ZIP archive at ``path``."""
    with zipfile.ZipFile(path, "w", zipfile.ZIP_DEFLATED) as zf:
        for name, data in members.items():
            zf.writestr(name, data)
    return path


@pytest.fixture(scope="session")
def ttf_bytes():
    """Raw bytes of a generated TrueType font."""
    return build_test_font()


@pytest.fixture(scope="session")
def bold_ttf_bytes():
    """A second font so packages differ in content."""
    return build_test_font(style="Bold")


@pytest.fixture(scope="session")
def glyph_count():
    """Number of glyphs in the fonts built by build_test_font."""
    return len(GLYPH_ORDER)


@pytest.fixture
def make_archive(tmp_path):
    """Factory writing a ZIP archive with the given members into tmp_path."""

    def _make_archive(name: str, members: dict[str, bytes]) -> Path:
        return write_zip(tmp_path / name, members)

    return _make_archive


@pytest.fixture
def font_archive(tmp_path, ttf_bytes, bold_ttf_bytes):
    """A DejaVu-like release archive with fonts and non-font files."""
    return write_zip(
        tmp_path / "dejavu-fonts-ttf-2.37.zip",
        {
            f"{ARCHIVE_ROOT}/AUTHORS": b"DejaVu authors\n",
            f"{ARCHIVE_ROOT}/LICENSE": b"Bitstream Vera License\n",
            f"{ARCHIVE_ROOT}/ttf/DejaVu-Sans-Bold.ttf": bold_ttf_bytes,
            f"{ARCHIVE_ROOT}/ttf/DejaVu-Serif.ttf": ttf_bytes,
            f"{ARCHIVE_ROOT}/ttf/Upper-Case.TTF": ttf_bytes,
            f"{ARCHIVE_ROOT}/fontconfig/20-unhint-small-dejavu-sans.conf": b"<fontconfig/>\n",
        },
    )


@pytest.fixture
def output_dir(tmp_path):
    """Empty directory receiving generated packages."""
    out = tmp_path / "out"
    out.mkdir()
    return out


@pytest.fixture
def config(font_archive, output_dir):
    """Generator configuration pointing at the local test archive."""
    return GeneratorConfig(
        _env_file=None, src=str(font_archive), output_dir=output_dir, show_progress=False
    )
