"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from collections.abc import Iterable

from rich.console import Console
from rich.table import Table
from rich.text import Text

from docfonts.domain.style import FontStyleVariant
from docfonts.utils.logging import FontScanStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]docfonts[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_scan_summary(stats: FontScanStats) -> None:
    """Print font scan statistics.

    Args:
        stats: Statistics of the completed scan
    """
    error_style = "red" if stats.files_failed > 0 else "green"
    console.print(
        f"  {stats.files_scanned} files {SYM_DOT} {stats.families_found} families {SYM_DOT} "
        f"[{error_style}]{stats.files_failed} unreadable[/{error_style}] "
        f"{SYM_DOT} {_format_time(stats.duration_seconds)}"
    )


def print_families(families: Iterable[str]) -> None:
    """Print family names, one per line, sorted."""
    names = sorted(families, key=str.casefold)
    console.print(f"\n[bold]{len(names)} known families[/bold]\n")
    for name in names:
        # Text keeps markup characters in family names literal
        console.print(Text(f"  {name}"))


def print_family_checks(results: list[tuple[str, bool]]) -> None:
    """Print known/unknown status for each checked family.

    Args:
        results: (family name, is known) pairs in request order
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Family")
    table.add_column("Status")
    for name, known in results:
        status = f"[green]{SYM_OK} known[/green]" if known else f"[red]{SYM_ERR} unknown[/red]"
        table.add_row(Text(name), status)
    console.print(table)


def print_unknown_fonts(names: Iterable[str]) -> None:
    """Print the recorded unknown families."""
    names = list(names)
    if not names:
        console.print(f"\n[bold green]{SYM_OK} All families installed[/bold green]")
        return
    console.print(f"\n[bold]Unknown fonts[/bold] ({len(names)})")
    console.print(Text("  " + ", ".join(names)))


def print_style(variant: FontStyleVariant) -> None:
    """Print a style variant with its descriptor."""
    style = variant.font_style
    console.print(f"[bold]{variant.name}[/bold]")
    console.print(
        f"  weight {style.weight} {SYM_DOT} width {style.width} {SYM_DOT} {style.slant.value}"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    # Text keeps markup characters in user input literal
    line = Text("\n")
    line.append(f"{SYM_ERR} Error:", style="bold red")
    line.append(f" {message}")
    console.print(line, soft_wrap=True)
    if details:
        console.print(Text(f"  {details}"), soft_wrap=True)
