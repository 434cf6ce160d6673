"""docfonts - Font and image-format support for document rendering.

docfonts resolves bold/italic run formatting into a font style, tracks which
font families are installed versus referenced but missing, and maps image
format names to Pillow format identifiers.

Example:
    $ docfonts check "Calibri" "DejaVu Sans"

This reports which of the two families the machine has installed.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
