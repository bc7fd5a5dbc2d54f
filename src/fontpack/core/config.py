"""Configuration management for the font package generator."""

from pathlib import Path

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import (
    ConfigFileNotFoundError,
    ConfigLoadError,
    EmptyConfigFileError,
    InvalidYamlError,
)

DEFAULT_SOURCE = (
    "https://github.com/dejavu-fonts/dejavu-fonts/releases/download/"
    "version_2_37/dejavu-fonts-ttf-2.37.zip"
)


class GeneratorConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FONTPACK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    """Font package generation configuration."""

    # Source archive
    src: str = Field(DEFAULT_SOURCE, description="Remote ZIP URL or local ZIP path")
    suffix: str = Field(".ttf", description="Suffix of archive entries to package")

    # Output
    output_dir: Path = Field(Path("."), description="Directory receiving the packages")
    family: str = Field("DejaVu", description="Font family named in generated docs")
    stub_filename: str = Field("data.py", description="Generated stub file name")
    fail_on_collision: bool = Field(
        False, description="Abort when two fonts map to the same package name"
    )

    # HTTP transfer
    timeout_seconds: int = Field(60, ge=1, description="HTTP timeout in seconds")
    chunk_size: int = Field(8192, ge=1, description="Download chunk size in bytes")
    verify_ssl: bool = Field(True, description="Verify TLS certificates")
    user_agent: str = Field("fontpack/1.0.0", description="HTTP User-Agent header")
    show_progress: bool = Field(True, description="Show a download progress bar")

    log_level: str = Field("INFO", description="Application log level")

    @field_validator("src")
    @classmethod
    def validate_src(cls, v):
        if not v.strip():
            raise ValueError("src must not be empty")
        return v.strip()

    @field_validator("suffix")
    @classmethod
    def validate_suffix(cls, v):
        if not v.startswith(".") or len(v) < 2:
            raise ValueError("suffix must look like '.ttf'")
        return v

    @field_validator("stub_filename")
    @classmethod
    def validate_stub_filename(cls, v):
        if "/" in v or "\\" in v or not v.endswith(".py"):
            raise ValueError("stub_filename must be a bare '.py' file name")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {v}")
        return level

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> "GeneratorConfig":
        """Load configuration from YAML file."""
        return load_config_from_yaml(config_path, cls)

    def with_overrides(self, **overrides) -> "GeneratorConfig":
        """Return a copy with the non-None overrides applied and validated."""
        values = self.model_dump()
        values.update({key: value for key, value in overrides.items() if value is not None})
        return type(self).model_validate(values)


def load_config_from_yaml(config_path: str | Path, config_class: type) -> BaseSettings:
    """Load configuration from YAML file."""
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigFileNotFoundError(str(config_path))

    try:
        with config_path.open() as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise InvalidYamlError(str(config_path), str(e)) from e

    if config_data is None:
        raise EmptyConfigFileError(str(config_path))
    if not isinstance(config_data, dict):
        raise ConfigLoadError(str(config_path), "top level must be a mapping")

    try:
        # Values from the file win over the environment and .env
        return config_class(_env_file=None, **config_data)
    except ValueError as e:
        raise ConfigLoadError(str(config_path), str(e)) from e
