"""CLI application entry point for docfonts.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from docfonts import __version__
from docfonts.cli.output import (
    console,
    print_error,
    print_families,
    print_family_checks,
    print_header,
    print_scan_summary,
    print_step,
    print_style,
    print_unknown_fonts,
)
from docfonts.config import DocFontsSettings, FontDiscoveryConfig, LoggingConfig
from docfonts.core import (
    KnownFamilyRegistry,
    parse_image_format,
    resolve_font_style,
    supported_image_formats,
)
from docfonts.domain import FormattingFlags
from docfonts.exceptions import ConfigurationError, DocFontsError, FormatNotSupportedError
from docfonts.io import SystemFontSource
from docfonts.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="docfonts",
    help="Inspect font families, run styles and image formats for document rendering.",
    add_completion=False,
    no_args_is_help=True,
)

FontDirOption = Annotated[
    list[Path] | None,
    typer.Option(
        "--font-dir",
        "-d",
        help="Extra directory to scan for fonts (repeatable)",
    ),
]
NoSystemOption = Annotated[
    bool,
    typer.Option(
        "--no-system",
        help="Do not scan the system font directories",
    ),
]
LogFileOption = Annotated[
    Path | None,
    typer.Option(
        "--log-file",
        help="Write detailed logs to file",
    ),
]
LogLevelOption = Annotated[
    str,
    typer.Option(
        "--log-level",
        help="Logging level (DEBUG|INFO|WARNING|ERROR)",
    ),
]
QuietOption = Annotated[
    bool,
    typer.Option(
        "--quiet",
        "-q",
        help="Only print results and errors (no header, scan summary or log lines)",
    ),
]

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]docfonts[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Inspect font families, run styles and image formats for document rendering."""


def _build_settings(
    font_dirs: list[Path] | None,
    no_system: bool,
    log_file: Path | None,
    log_level: str,
) -> DocFontsSettings:
    """Create settings from CLI arguments.

    Raises:
        ConfigurationError: If an argument is invalid
    """
    if log_level.upper() not in _LOG_LEVELS:
        raise ConfigurationError(
            f"Invalid log level: {log_level} (valid: {', '.join(_LOG_LEVELS)})"
        )

    for font_dir in font_dirs or []:
        if not font_dir.is_dir():
            raise ConfigurationError(f"Font directory not found: {font_dir}")

    return DocFontsSettings(
        discovery=FontDiscoveryConfig(
            font_dirs=font_dirs or [],
            include_system_dirs=not no_system,
        ),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level.upper(),
        ),
    )


def _scan_registry(
    settings: DocFontsSettings, quiet: bool
) -> tuple[KnownFamilyRegistry, SystemFontSource]:
    """Build a registry over the configured fonts and enumerate it."""
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    source = SystemFontSource(settings.discovery)
    registry = KnownFamilyRegistry(source)

    if not quiet:
        print_step("Scanning fonts")
    registry.get_known_families()
    if not quiet and source.last_stats is not None:
        print_scan_summary(source.last_stats)

    return registry, source


@app.command()
def families(
    font_dir: FontDirOption = None,
    no_system: NoSystemOption = False,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """List the font families installed on this machine."""
    try:
        settings = _build_settings(font_dir, no_system, log_file, log_level)
        if not quiet:
            print_header(__version__)
        registry, _ = _scan_registry(settings, quiet)
        print_families(registry.known_families)
    except DocFontsError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except OSError as e:
        print_error(f"Could not scan fonts: {e}")
        raise typer.Exit(code=1)


@app.command()
def check(
    family: Annotated[
        list[str],
        typer.Argument(
            help="Font family names to look up",
            show_default=False,
        ),
    ],
    font_dir: FontDirOption = None,
    no_system: NoSystemOption = False,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Report which font families are installed and which are missing.

    Example:
        docfonts check "Calibri" "DejaVu Sans"
    """
    try:
        settings = _build_settings(font_dir, no_system, log_file, log_level)
        if not quiet:
            print_header(__version__)
        registry, _ = _scan_registry(settings, quiet)
    except DocFontsError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except OSError as e:
        print_error(f"Could not scan fonts: {e}")
        raise typer.Exit(code=1)

    results = [(name, registry.check_family(name)) for name in family]
    print_family_checks(results)
    print_unknown_fonts(registry.unknown_fonts)


@app.command()
def style(
    bold: Annotated[bool, typer.Option("--bold", "-b", help="Bold flag (w:b)")] = False,
    bold_cs: Annotated[
        bool, typer.Option("--bold-cs", help="Complex-script bold flag (w:bCs)")
    ] = False,
    italic: Annotated[bool, typer.Option("--italic", "-i", help="Italic flag (w:i)")] = False,
    italic_cs: Annotated[
        bool, typer.Option("--italic-cs", help="Complex-script italic flag (w:iCs)")
    ] = False,
) -> None:
    """Show the font style a run with the given flags resolves to."""
    # Flags not given on the command line are absent, not false
    flags = FormattingFlags(
        bold=bold or None,
        bold_cs=bold_cs or None,
        italic=italic or None,
        italic_cs=italic_cs or None,
    )
    print_style(resolve_font_style(flags))


@app.command("image-format")
def image_format(
    name: Annotated[
        str,
        typer.Argument(help="Image format name, e.g. png or JPEG", show_default=False),
    ],
) -> None:
    """Resolve an image format name to its encoder/decoder identifier."""
    try:
        console.print(parse_image_format(name))
    except FormatNotSupportedError as e:
        print_error(
            f"Unsupported image format: {e.format}",
            details="Supported: " + ", ".join(supported_image_formats()),
        )
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
