"""Command-line interface for docfonts.

This module provides the CLI using Typer with rich output.

Commands:
- families: List installed font families
- check: Report known/unknown families
- style: Resolve bold/italic flags to a style variant
- image-format: Resolve an image format name
"""

from docfonts.cli.app import cli, main

__all__ = ["cli", "main"]
