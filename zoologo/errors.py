"""Exceptions raised by the geometry model and the emission pipeline."""
from pathlib import Path


class LogoError(Exception):
    pass


class ConfigError(LogoError, ValueError):
    """Geometry that would produce malformed or degenerate markup."""


class EmitError(LogoError):
    """A single asset could not be rasterized or written."""

    def __init__(self, target: Path, size: int, cause: BaseException):
        self.target = Path(target)
        self.size = size
        self.cause = cause
        super().__init__(f"{self.target} ({size}px): {cause}")
