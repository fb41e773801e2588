"""Error types raised at the edges of the opacity fallback pipeline."""


class OpacityFallbackError(Exception):
    """Base error for all opacity_fallback errors."""


class StylesheetParseError(OpacityFallbackError):
    """Raised when CSS source cannot be parsed into a stylesheet tree."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


class ConfigError(OpacityFallbackError):
    """Raised when an options file cannot be read or has the wrong shape."""
