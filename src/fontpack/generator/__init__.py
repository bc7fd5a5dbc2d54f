"""Font Package Generation
=======================

Derives package names from font files and writes the generated packages.
"""

from .emitter import check_stub, emit_package, render_stub
from .models import FontEntry, GeneratedPackage, GenerationReport
from .names import font_name, package_name
from .pipeline import gen, generate, list_fonts

__all__ = [
    "FontEntry",
    "GeneratedPackage",
    "GenerationReport",
    "check_stub",
    "emit_package",
    "font_name",
    "gen",
    "generate",
    "list_fonts",
    "package_name",
    "render_stub",
]
