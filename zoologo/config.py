"""
Shared geometry for every logo variant.

All coordinates live on the 1024x1024 design canvas. The color composition
and the monochrome outline share the three primary circles; the mono outline
has its own, slightly larger, outer clip circle and ring.
"""
from dataclasses import dataclass, field
from typing import Tuple

from .errors import ConfigError


@dataclass(frozen=True)
class ColorGeometry:
    outer_x: float = 512
    outer_y: float = 511
    outer_radius: float = 270
    circle_radius: float = 234
    green_x: float = 513
    green_y: float = 369
    red_x: float = 365
    red_y: float = 595
    blue_x: float = 643
    blue_y: float = 595

    @property
    def centers(self) -> Tuple[Tuple[float, float], ...]:
        # green, red, blue
        return (
            (self.green_x, self.green_y),
            (self.red_x, self.red_y),
            (self.blue_x, self.blue_y),
        )


@dataclass(frozen=True)
class MonoGeometry:
    outer_x: float = 508
    outer_y: float = 510
    outer_radius: float = 283
    stroke_width: float = 33
    outer_stroke_width: float = 36

    @property
    def ring_radius(self) -> float:
        # outer edge of the ring sits on the clip boundary
        return self.outer_radius - self.outer_stroke_width / 2


@dataclass(frozen=True)
class Palette:
    green: str = "#00A652"
    red: str = "#ED1C24"
    blue: str = "#2E3192"
    yellow: str = "#FCF006"
    cyan: str = "#01ACF1"
    magenta: str = "#EA018E"
    white: str = "#FFFFFF"


@dataclass(frozen=True)
class LogoConfig:
    color: ColorGeometry = field(default_factory=ColorGeometry)
    mono: MonoGeometry = field(default_factory=MonoGeometry)
    palette: Palette = field(default_factory=Palette)
    canvas: float = 1024

    def validate(self) -> "LogoConfig":
        """Raise ConfigError unless every variant can be drawn from this config."""
        c, m = self.color, self.mono
        positive = {
            "canvas": self.canvas,
            "color.outer_radius": c.outer_radius,
            "color.circle_radius": c.circle_radius,
            "mono.outer_radius": m.outer_radius,
            "mono.stroke_width": m.stroke_width,
            "mono.outer_stroke_width": m.outer_stroke_width,
        }
        for name, value in positive.items():
            if not value > 0:
                raise ConfigError(f"{name} must be positive, got {value!r}")
        if m.stroke_width > c.circle_radius:
            raise ConfigError(
                f"mono.stroke_width ({m.stroke_width}) exceeds color.circle_radius ({c.circle_radius})"
            )
        if m.outer_stroke_width > m.outer_radius:
            raise ConfigError(
                f"mono.outer_stroke_width ({m.outer_stroke_width}) exceeds mono.outer_radius ({m.outer_radius})"
            )
        return self


DEFAULT_CONFIG = LogoConfig()
