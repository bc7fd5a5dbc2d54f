"""
Generation data models and types.
"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class FontEntry:
    """A font file selected from the source archive."""

    archive_path: str
    ttf_name: str
    font_name: str
    package_name: str
    size_bytes: int

    def __str__(self) -> str:
        return f"{self.package_name} ({self.font_name})"


@dataclass
class GeneratedPackage:
    """Files written for one font package."""

    ttf_name: str
    font_name: str
    package_name: str
    directory: Path
    stub_path: Path
    font_path: Path
    size_bytes: int

    def __str__(self) -> str:
        return f"{self.package_name} ({self.font_name}, {self.size_bytes} bytes)"


@dataclass
class GenerationReport:
    """Outcome of a successful generation run."""

    src: str
    output_dir: Path
    packages: list[GeneratedPackage] = field(default_factory=list)

    @property
    def package_names(self) -> list[str]:
        return [package.package_name for package in self.packages]

    @property
    def total_bytes(self) -> int:
        return sum(package.size_bytes for package in self.packages)

    def __len__(self) -> int:
        return len(self.packages)
