"""
Generation Pipeline
===================

Drives a run end to end: resolve the source archive, walk its font
entries and emit one package per entry. The first error stops the run and
propagates to the caller; packages written before it stay on disk.
"""

import logging
import zipfile
from pathlib import Path

from ..archive.entries import iter_font_entries, read_entry
from ..archive.source import resolve_archive
from ..core.config import GeneratorConfig
from ..core.context import RunContext
from ..core.exceptions import FontPackError, IdentifierCollisionError, PackageDirError
from .emitter import emit_package
from .models import FontEntry, GeneratedPackage, GenerationReport
from .names import base_name, font_name, package_name

logger = logging.getLogger(__name__)


def gen(
    archive: zipfile.ZipFile,
    info: zipfile.ZipInfo,
    output_dir: Path,
    config: GeneratorConfig,
) -> GeneratedPackage:
    """Decompress one archive entry and emit its package."""
    ttf_name = base_name(info.filename)
    logger.info(f"generating fonts package for {ttf_name!r}...")

    try:
        data = read_entry(archive, info)
        return emit_package(ttf_name, data, output_dir, config)
    except FontPackError as e:
        e.add_context(f"could not generate package for {ttf_name!r}", entry=info.filename)
        raise


def _check_collision(seen: dict[str, str], ttf_name: str, config: GeneratorConfig) -> None:
    package = package_name(ttf_name, config.suffix)
    previous = seen.get(package)
    if previous is not None:
        if config.fail_on_collision:
            raise IdentifierCollisionError(package, previous, ttf_name)
        logger.warning(
            f"package {package!r} from {ttf_name!r} overwrites the one generated from {previous!r}"
        )
    seen[package] = ttf_name


def _ensure_output_dir(output_dir: Path) -> Path:
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise PackageDirError(str(output_dir), str(e)) from e
    return output_dir


def generate(config: GeneratorConfig) -> GenerationReport:
    """
    Generate one package per font file of ``config.src``.

    Args:
        config: Generator configuration

    Returns:
        GenerationReport listing the generated packages in archive order

    Raises:
        FontPackError: The first error met; nothing after it is attempted
    """
    report = GenerationReport(src=config.src, output_dir=Path(config.output_dir))
    seen: dict[str, str] = {}

    with RunContext(config) as ctx, resolve_archive(config.src, ctx) as archive:
        output_dir = _ensure_output_dir(Path(config.output_dir))
        for info in iter_font_entries(archive, config.suffix):
            _check_collision(seen, base_name(info.filename), config)
            report.packages.append(gen(archive, info, output_dir, config))

    logger.info(f"Generated {len(report)} font packages in {report.output_dir}")
    return report


def list_fonts(config: GeneratorConfig) -> list[FontEntry]:
    """List the font entries of ``config.src`` without writing anything."""
    with RunContext(config) as ctx, resolve_archive(config.src, ctx) as archive:
        entries = []
        for info in iter_font_entries(archive, config.suffix):
            ttf_name = base_name(info.filename)
            entries.append(
                FontEntry(
                    archive_path=info.filename,
                    ttf_name=ttf_name,
                    font_name=font_name(ttf_name, config.suffix),
                    package_name=package_name(ttf_name, config.suffix),
                    size_bytes=info.file_size,
                )
            )
    return entries
