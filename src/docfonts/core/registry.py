"""Registry of known and unknown font families.

The registry answers "is this family installed?" for the rendering
pipeline. The known set is enumerated from the host once, on first use, and
never changes afterwards. Families the pipeline asks for but cannot find are
collected in the registry's unknown-font set for diagnostics.
"""

import threading
from collections.abc import Callable, Iterable, Iterator

import structlog

from docfonts.config.settings import FontDiscoveryConfig
from docfonts.io.font_source import SystemFontSource

logger = structlog.get_logger(__name__)

FamilySource = Callable[[], Iterable[str]]


class UnknownFontSet:
    """Thread-safe, grow-only set of missing family names."""

    def __init__(self) -> None:
        self._names: set[str] = set()
        self._lock = threading.Lock()

    def add(self, name: str) -> None:
        """Record a family name. Recording the same name twice has no effect."""
        with self._lock:
            self._names.add(name)

    def snapshot(self) -> frozenset[str]:
        """Return the names recorded so far."""
        with self._lock:
            return frozenset(self._names)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._names

    def __len__(self) -> int:
        with self._lock:
            return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.snapshot()))


class KnownFamilyRegistry:
    """Lazily enumerated set of known font families.

    The family source is called at most once per registry. Concurrent first
    readers block on a lock while one of them enumerates; every reader gets
    the same fully built frozenset.

    Example:
        registry = KnownFamilyRegistry(SystemFontSource())
        if not registry.check_family("Calibri"):
            print(sorted(registry.unknown_fonts))
    """

    def __init__(self, source: FamilySource) -> None:
        """Initialize the registry.

        Args:
            source: Callable returning the host's family names
        """
        self._source = source
        self._known: frozenset[str] | None = None
        self._lock = threading.Lock()
        self.unknown_fonts = UnknownFontSet()

    @property
    def is_initialized(self) -> bool:
        """Whether the known families have been enumerated."""
        return self._known is not None

    @property
    def known_families(self) -> frozenset[str]:
        """Return the known family names, enumerating them on first access.

        Raises:
            Whatever the family source raises; the registry then stays
            uninitialized and the next access retries.
        """
        known = self._known
        if known is not None:
            return known

        with self._lock:
            if self._known is None:
                families = frozenset(self._source())
                logger.info("Known font families initialized", count=len(families))
                self._known = families
            return self._known

    def get_known_families(self) -> frozenset[str]:
        """Return the known family names."""
        return self.known_families

    def is_known(self, name: str) -> bool:
        """Check whether a family is installed."""
        return name in self.known_families

    def record_unknown_font(self, name: str) -> None:
        """Record a family that a document referenced but the host lacks.

        The name is not validated against the known families.
        """
        self.unknown_fonts.add(name)

    def check_family(self, name: str) -> bool:
        """Check a family and record it as unknown if it is not installed.

        Returns:
            True if the family is known
        """
        if self.is_known(name):
            return True
        logger.debug("Unknown font family", family=name)
        self.record_unknown_font(name)
        return False


_default_registry: KnownFamilyRegistry | None = None
_default_registry_lock = threading.Lock()


def get_font_registry(config: FontDiscoveryConfig | None = None) -> KnownFamilyRegistry:
    """Return the process-wide registry backed by the system fonts.

    The registry is created on the first call; ``config`` is only used then.
    """
    global _default_registry
    with _default_registry_lock:
        if _default_registry is None:
            _default_registry = KnownFamilyRegistry(SystemFontSource(config))
        return _default_registry


def reset_font_registry() -> None:
    """Drop the process-wide registry so the next call builds a fresh one."""
    global _default_registry
    with _default_registry_lock:
        _default_registry = None
