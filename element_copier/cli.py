"""Click-based CLI for exporting saved element snapshots."""

import json
import os
import sys
from pathlib import Path

import click

from . import __version__
from .collectors.snapshot import load_snapshot
from .config import load_export_config
from .copier_logging import LogCategory, get_category_logger, setup_logging
from .errors import CopierError
from .orchestrator import ElementExporter

logger = get_category_logger(LogCategory.CLI)

OUTPUT_FORMATS = ("raw", "json", "html", "css", "utility")


def should_use_color(stream=None) -> bool:
    """Colorize only on a terminal, and never when NO_COLOR is set."""
    if "NO_COLOR" in os.environ:
        return False
    stream = stream or sys.stderr
    return hasattr(stream, "isatty") and stream.isatty()


def render_output(result, output_format: str) -> str:
    """Select the artifact(s) printed for an output format."""
    if output_format == "json":
        return json.dumps(result.to_dict(), indent=2)
    if output_format == "html":
        return result.markup
    if output_format == "css":
        return result.stylesheet
    if output_format == "utility":
        return result.utility_markup
    return result.format_raw()


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """Element Copier - export a rendered element as markup, CSS and Tailwind."""


@cli.command()
@click.argument("page", type=click.Path(path_type=Path))
@click.argument("styles", type=click.Path(path_type=Path))
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    help="Configuration file path",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default="raw",
    help="Artifact(s) to print",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    help="Write the output to a file instead of stdout",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-error output")
@click.option(
    "--log-file", type=click.Path(path_type=Path), help="Also log to this file"
)
@click.option(
    "--log-format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Log file format",
)
def export(
    page, styles, config_path, output_format, output, verbose, quiet, log_file, log_format
):
    """Export PAGE (element markup) using STYLES (resolved style snapshot)."""
    if quiet and verbose:
        click.echo("Error: --quiet and --verbose are mutually exclusive", err=True)
        sys.exit(1)

    setup_logging(
        quiet=quiet, verbose=verbose, log_file=log_file, log_format=log_format
    )

    try:
        config = load_export_config(config_path)
        root, resolver = load_snapshot(page, styles, config.ignored_id_prefix)
        result = ElementExporter(config).export(root, resolver)
    except CopierError as e:
        click.echo(e.format(use_color=should_use_color()), err=True)
        sys.exit(e.exit_code)

    text = render_output(result, output_format)
    if output:
        output.write_text(text + "\n", encoding="utf-8")
        logger.info(f"Wrote {output_format} output to {output}")
    else:
        click.echo(text)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
