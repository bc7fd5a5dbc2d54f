"""
Package Emitter
===============

Writes one generated package per font file: a directory named after the
package, a stub module exposing the font bytes as ``TTF``, and the font
file itself.
"""

import ast
import logging
from pathlib import Path

from ..core.config import GeneratorConfig
from ..core.exceptions import FontWriteError, PackageDirError, StubSyntaxError, StubWriteError
from .models import GeneratedPackage
from .names import font_name, package_name

logger = logging.getLogger(__name__)

STUB_TEMPLATE = '''\
# Code generated by fontpack; DO NOT EDIT.

"""Package {package} provides the "{font}" TrueType font
from the {family} font family.
"""

from pathlib import Path

__all__ = ["TTF"]

# TTF is the data for the "{font}" TrueType font.
TTF: bytes = (Path(__file__).parent / {ttf!r}).read_bytes()
'''


def render_stub(package: str, font: str, ttf_name: str, family: str = "DejaVu") -> str:
    """Render the stub module source for one package."""
    return STUB_TEMPLATE.format(package=package, font=font, ttf=ttf_name, family=family)


def check_stub(package: str, source: str) -> str:
    """Make sure ``source`` compiles as Python.

    Raises:
        FormatError: If the rendered text is not valid Python
    """
    try:
        ast.parse(source, filename=f"{package}/stub")
    except (SyntaxError, ValueError) as e:
        raise StubSyntaxError(package, str(e)) from e
    return source


def make_package_dir(directory: Path) -> Path:
    """Create ``directory``; an existing directory is reused."""
    try:
        directory.mkdir()
    except FileExistsError as e:
        if not directory.is_dir():
            raise PackageDirError(str(directory), str(e)) from e
    except OSError as e:
        raise PackageDirError(str(directory), str(e)) from e
    return directory


def emit_package(
    ttf_name: str, data: bytes, output_dir: Path, config: GeneratorConfig
) -> GeneratedPackage:
    """
    Generate the package for a single font file.

    Args:
        ttf_name: Base name of the font file, e.g. "DejaVu-Sans-Bold.ttf"
        data: Raw font bytes
        output_dir: Directory receiving the package directory
        config: Generator configuration

    Returns:
        GeneratedPackage describing the written files

    Raises:
        DirCreateError: If the package directory cannot be created
        FormatError: If the rendered stub is not valid Python
        WriteError: If either file cannot be written
    """
    font = font_name(ttf_name, config.suffix)
    package = package_name(ttf_name, config.suffix)

    directory = make_package_dir(Path(output_dir) / package)
    source = check_stub(package, render_stub(package, font, ttf_name, config.family))

    stub_path = directory / config.stub_filename
    try:
        stub_path.write_bytes(source.encode("utf-8"))
    except OSError as e:
        raise StubWriteError(str(stub_path), str(e)) from e

    font_path = directory / ttf_name
    try:
        font_path.write_bytes(data)
    except OSError as e:
        raise FontWriteError(str(font_path), str(e)) from e

    logger.debug(f"Wrote {stub_path} and {font_path}")

    return GeneratedPackage(
        ttf_name=ttf_name,
        font_name=font,
        package_name=package,
        directory=directory,
        stub_path=stub_path,
        font_path=font_path,
        size_bytes=len(data),
    )
