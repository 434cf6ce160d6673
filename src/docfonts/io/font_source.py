"""Enumeration of installed font families.

This module discovers font files in the platform's font directories and
reads their family names with fonttools. ``SystemFontSource`` is the host
facility behind the default known-family registry.
"""

import os
import sys
import time
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

import structlog
from fontTools.ttLib import TTCollection, TTFont

from docfonts.config.settings import DEFAULT_FONT_EXTENSIONS, FontDiscoveryConfig
from docfonts.exceptions import FontReadError
from docfonts.utils.logging import FontScanStats

logger = structlog.get_logger(__name__)

COLLECTION_EXTENSIONS = (".ttc", ".otc")

# name table IDs
TYPOGRAPHIC_FAMILY_NAME_ID = 16
FAMILY_NAME_ID = 1


def default_font_dirs() -> list[Path]:
    """Return the existing system and user font directories for this platform."""
    home = Path.home()
    candidates: list[Path] = []

    if sys.platform.startswith("win"):
        windir = os.environ.get("WINDIR") or os.environ.get("SystemRoot")
        if windir:
            candidates.append(Path(windir) / "Fonts")
        local = os.environ.get("LOCALAPPDATA")
        if local:
            candidates.append(Path(local) / "Microsoft" / "Windows" / "Fonts")
    elif sys.platform == "darwin":
        candidates.extend(
            [
                Path("/System/Library/Fonts"),
                Path("/Library/Fonts"),
                home / "Library" / "Fonts",
            ]
        )
    else:
        candidates.extend(
            [
                Path("/usr/share/fonts"),
                Path("/usr/local/share/fonts"),
                home / ".fonts",
                home / ".local" / "share" / "fonts",
            ]
        )

    return [d for d in candidates if d.is_dir()]


def _walk_error_handler(root: Path) -> Callable[[OSError], None]:
    """Return an os.walk error handler that fails on ``root`` and skips the rest."""

    def _on_error(error: OSError) -> None:
        if error.filename is None or Path(error.filename) == root:
            raise error
        logger.debug(
            "Skipping unreadable font directory", path=error.filename, reason=str(error)
        )

    return _on_error


def iter_font_files(
    dirs: Iterable[Path],
    extensions: Iterable[str] = DEFAULT_FONT_EXTENSIONS,
    recursive: bool = True,
    follow_symlinks: bool = False,
) -> Iterator[Path]:
    """Yield font files found in the given directories.

    Files are yielded once each, in sorted order.

    Args:
        dirs: Directories to scan
        extensions: Lowercase file extensions to accept
        recursive: Descend into subdirectories
        follow_symlinks: Follow symlinked directories when recursing

    Yields:
        Resolved paths of font files

    Raises:
        OSError: If a scanned root cannot be listed. Unreadable
            subdirectories are logged and skipped.
    """
    wanted = {ext.lower() for ext in extensions}
    found: set[Path] = set()

    for root in dirs:
        if not root.is_dir():
            logger.debug("Skipping missing font directory", path=str(root))
            continue

        if recursive:
            walk = os.walk(
                root, onerror=_walk_error_handler(root), followlinks=follow_symlinks
            )
            for dirpath, _dirnames, filenames in walk:
                for filename in filenames:
                    path = Path(dirpath) / filename
                    if path.suffix.lower() in wanted:
                        found.add(path.resolve())
        else:
            with os.scandir(root) as entries:
                for entry in entries:
                    path = Path(entry.path)
                    if entry.is_file() and path.suffix.lower() in wanted:
                        found.add(path.resolve())

    yield from sorted(found)


def _family_name(font: TTFont) -> str | None:
    """Return the typographic family name of a face, falling back to name ID 1."""
    name_table = font["name"]
    for name_id in (TYPOGRAPHIC_FAMILY_NAME_ID, FAMILY_NAME_ID):
        name = name_table.getDebugName(name_id)
        if name:
            return name.strip()
    return None


def read_family_names(path: Path) -> list[str]:
    """Read the family name of every face in a font file.

    Args:
        path: Path to a TTF/OTF font or a TTC/OTC collection

    Returns:
        Family names, one per face that declares one

    Raises:
        FontReadError: If the file cannot be parsed
    """
    try:
        if path.suffix.lower() in COLLECTION_EXTENSIONS:
            collection = TTCollection(str(path), lazy=True)
            try:
                names = [_family_name(font) for font in collection.fonts]
            finally:
                collection.close()
        else:
            font = TTFont(str(path), lazy=True)
            try:
                names = [_family_name(font)]
            finally:
                font.close()
    except Exception as e:
        raise FontReadError(str(path), str(e)) from e

    return [name for name in names if name]


class SystemFontSource:
    """Lists the font family names installed on this machine.

    Calling the source walks the configured directories and reads every
    font file it finds. Unreadable files are logged and skipped.

    Example:
        source = SystemFontSource()
        families = set(source())
    """

    def __init__(self, config: FontDiscoveryConfig | None = None) -> None:
        """Initialize the font source.

        Args:
            config: Discovery settings (defaults if None)
        """
        self.config = config or FontDiscoveryConfig()
        self.last_stats: FontScanStats | None = None

    def font_dirs(self) -> list[Path]:
        """Return the directories this source scans, in order."""
        dirs = list(self.config.font_dirs)
        if self.config.include_system_dirs:
            dirs.extend(d for d in default_font_dirs() if d not in dirs)
        return dirs

    def __call__(self) -> list[str]:
        """Enumerate family names.

        Returns:
            Family names in discovery order, without duplicates

        Raises:
            OSError: If a scanned directory root cannot be listed
        """
        stats = FontScanStats(start_time=time.time())
        families: dict[str, None] = {}

        for path in iter_font_files(
            self.font_dirs(),
            extensions=self.config.extensions,
            recursive=self.config.recursive,
            follow_symlinks=self.config.follow_symlinks,
        ):
            stats.files_scanned += 1
            try:
                names = read_family_names(path)
            except FontReadError as e:
                stats.files_failed += 1
                logger.debug("Font file skipped", path=e.path, reason=e.reason)
                continue

            stats.faces_read += len(names)
            for name in names:
                families.setdefault(name, None)

        stats.families_found = len(families)
        stats.end_time = time.time()
        self.last_stats = stats

        logger.info(
            "Font scan complete",
            files=stats.files_scanned,
            failed=stats.files_failed,
            families=stats.families_found,
            duration_ms=round(stats.duration_seconds * 1000, 2),
        )

        return list(families)
