"""fontpack
========

Generates small Python packages that embed the TrueType fonts of an
upstream release archive, one package per font file, for use with a
font-parsing library such as fontTools.
"""

__version__ = "1.0.0"

from .core.config import GeneratorConfig
from .core.exceptions import FontPackError
from .generator import GeneratedPackage, GenerationReport, generate, list_fonts

__all__ = [
    "FontPackError",
    "GeneratedPackage",
    "GenerationReport",
    "GeneratorConfig",
    "generate",
    "list_fonts",
]
