"""Configuration settings for docfonts."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

DEFAULT_FONT_EXTENSIONS = (".ttf", ".otf", ".ttc", ".otc")


class FontDiscoveryConfig(BaseModel):
    """Configuration for enumerating installed font families."""

    font_dirs: list[Path] = Field(
        default_factory=list,
        description="Extra directories to scan for font files",
    )
    include_system_dirs: bool = Field(
        default=True,
        description="Scan the platform's system and user font directories",
    )
    extensions: tuple[str, ...] = Field(
        default=DEFAULT_FONT_EXTENSIONS,
        description="Font file extensions to consider",
    )
    recursive: bool = Field(
        default=True,
        description="Descend into subdirectories",
    )
    follow_symlinks: bool = Field(
        default=False,
        description="Follow symlinked directories while scanning",
    )

    @field_validator("extensions")
    @classmethod
    def _normalize_extensions(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        """Lowercase extensions and make sure each starts with a dot."""
        return tuple(
            ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in value
        )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class DocFontsSettings(BaseModel):
    """Main application settings."""

    discovery: FontDiscoveryConfig = Field(default_factory=FontDiscoveryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> DocFontsSettings:
    """Get default application settings."""
    return DocFontsSettings()
