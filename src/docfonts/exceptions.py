"""Exception hierarchy for docfonts."""


class DocFontsError(Exception):
    """Base exception for all docfonts errors."""

    pass


class FontError(DocFontsError):
    """Errors related to font discovery."""

    pass


class FontReadError(FontError):
    """Error reading family names from a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read font '{path}': {reason}")


class ImageFormatError(DocFontsError):
    """Errors related to image format resolution."""

    pass


class FormatNotSupportedError(ImageFormatError):
    """Image format name does not match any supported format."""

    def __init__(self, format: str) -> None:
        self.format = format
        super().__init__(f"Image format not supported: '{format}'")


class ConfigurationError(DocFontsError):
    """Invalid configuration or command-line input."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
