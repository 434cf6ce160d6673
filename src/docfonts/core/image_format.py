"""Image format name resolution.

Maps a human-readable format name ("png", "JPEG", ...) to the identifier
Pillow uses for that format. The vocabulary is whatever Pillow has registered
as a decoder or encoder, so formats added by Pillow plugins are picked up
without changes here.
"""

import threading
from collections.abc import Callable, Iterable

from PIL import Image

from docfonts.exceptions import FormatNotSupportedError

ImageFormat = str


def pillow_formats() -> list[ImageFormat]:
    """Return Pillow's registered format identifiers in registration order.

    Decoders come first, then encoders that have no decoder.
    """
    Image.init()
    formats: dict[str, None] = {}
    for fmt in list(Image.ID) + list(Image.SAVE):
        formats.setdefault(fmt, None)
    return list(formats)


class ImageFormatParser:
    """Case-insensitive lookup of image format identifiers.

    The lookup table is built on first use and reused afterwards.
    """

    def __init__(self, formats: Callable[[], Iterable[ImageFormat]] = pillow_formats) -> None:
        """Initialize the parser.

        Args:
            formats: Callable returning the supported identifiers
        """
        self._formats = formats
        self._table: dict[str, ImageFormat] | None = None
        self._lock = threading.Lock()

    def _lookup_table(self) -> dict[str, ImageFormat]:
        table = self._table
        if table is not None:
            return table

        with self._lock:
            if self._table is None:
                built: dict[str, ImageFormat] = {}
                for fmt in self._formats():
                    # first registration wins on a case-folded collision
                    built.setdefault(fmt.lower(), fmt)
                self._table = built
            return self._table

    def parse(self, format: str) -> ImageFormat:
        """Resolve a format name.

        Args:
            format: Format name, matched case-insensitively

        Returns:
            The format identifier

        Raises:
            FormatNotSupportedError: If no supported format has this name
        """
        try:
            return self._lookup_table()[format.lower()]
        except KeyError:
            raise FormatNotSupportedError(format) from None

    def is_supported(self, format: str) -> bool:
        """Check whether a format name resolves."""
        return format.lower() in self._lookup_table()

    def supported_formats(self) -> tuple[ImageFormat, ...]:
        """Return the supported identifiers in registration order."""
        return tuple(self._lookup_table().values())


_default_parser = ImageFormatParser()


def parse_image_format(format: str) -> ImageFormat:
    """Resolve a format name against Pillow's registered formats.

    Raises:
        FormatNotSupportedError: If the name is not a supported format
    """
    return _default_parser.parse(format)


def supported_image_formats() -> tuple[ImageFormat, ...]:
    """Return Pillow's supported format identifiers."""
    return _default_parser.supported_formats()
