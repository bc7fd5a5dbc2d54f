"""
Command-line interface for fontpack
===================================

Generates one Python package per TrueType font of a release archive.
"""

import logging
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from .core.config import DEFAULT_SOURCE, GeneratorConfig
from .core.exceptions import FontPackError
from .generator.pipeline import generate, list_fonts

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def load_config(config_path: Path | None, **overrides) -> GeneratorConfig:
    """Build the run configuration from YAML or env, then apply CLI flags."""
    config = GeneratorConfig.from_yaml(config_path) if config_path else GeneratorConfig()
    return config.with_overrides(**overrides)


def src_option(func):
    return click.option(
        "--src",
        "-s",
        default=None,
        help=f"Remote ZIP URL or local ZIP path holding TTF files [default: {DEFAULT_SOURCE}]",
    )(func)


def config_option(func):
    return click.option(
        "--config",
        "-c",
        "config_path",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="Path to a YAML configuration file",
    )(func)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.version_option(package_name="fontpack")
@click.pass_context
def cli(ctx, verbose):
    """Generate Python packages embedding TrueType fonts."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


def apply_log_level(ctx: click.Context, config: GeneratorConfig) -> None:
    """Use the configured log level unless --verbose asked for DEBUG."""
    if not ctx.obj.get("verbose"):
        logging.getLogger().setLevel(config.log_level)


@cli.command(name="generate")
@src_option
@config_option
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory receiving the generated packages [default: .]",
)
@click.option(
    "--fail-on-collision",
    is_flag=True,
    help="Abort when two fonts map to the same package name",
)
@click.option("--no-progress", is_flag=True, help="Hide the download progress bar")
@click.pass_context
def generate_command(ctx, src, config_path, output_dir, fail_on_collision, no_progress):
    """Generate one package per font file of the source archive."""
    try:
        config = load_config(
            config_path,
            src=src,
            output_dir=output_dir,
            fail_on_collision=True if fail_on_collision else None,
            show_progress=False if no_progress else None,
        )
        apply_log_level(ctx, config)
        report = generate(config)
    except (FontPackError, ValidationError) as e:
        logger.error(f"could not generate fonts: {e}")
        sys.exit(1)

    click.echo(f"Generated {len(report)} font packages in {report.output_dir}")
    for package in report.packages:
        click.echo(f"  {package}")


@cli.command(name="list")
@src_option
@config_option
@click.pass_context
def list_command(ctx, src, config_path):
    """List the fonts of the source archive and their package names."""
    try:
        config = load_config(config_path, src=src, show_progress=False)
        apply_log_level(ctx, config)
        entries = list_fonts(config)
    except (FontPackError, ValidationError) as e:
        logger.error(f"could not list fonts: {e}")
        sys.exit(1)

    if not entries:
        click.echo("No fonts found.")
        return

    for entry in entries:
        click.echo(f"{entry.package_name}\t{entry.font_name}\t{entry.archive_path}")


def main():
    cli()


if __name__ == "__main__":
    main()
