"""
Placement policies: how a square logo lands on a raster canvas.

All arithmetic is integer floor: logo side = floor(base * fraction),
offset = (canvas - logo) // 2 per axis, so odd leftovers bias toward the
top-left.
"""
import math
from dataclasses import dataclass
from typing import NamedTuple, Optional, Union


@dataclass(frozen=True)
class Plain:
    """Scale the logo to exactly size x size, no background."""


@dataclass(frozen=True)
class Padded:
    bg_color: str = "#000000"
    corner_radius: int = 0
    logo_fraction: float = 0.8


@dataclass(frozen=True)
class FixedAspect:
    width: int
    height: int
    bg_color: str = "#000000"
    logo_fraction: float = 0.4
    corner_radius: int = 0


PlacementPolicy = Union[Plain, Padded, FixedAspect]


class Layout(NamedTuple):
    canvas_width: int
    canvas_height: int
    logo_size: int
    offset_x: int
    offset_y: int
    bg_color: Optional[str] = None
    corner_radius: int = 0


def logo_side(base: int, fraction: float) -> int:
    if not 0 < fraction <= 1:
        raise ValueError(f"logo_fraction must be in (0, 1], got {fraction!r}")
    side = math.floor(base * fraction)
    if side < 1:
        raise ValueError(f"logo would be empty: floor({base} * {fraction}) = {side}")
    return side


def layout(policy: PlacementPolicy, size: int) -> Layout:
    if size < 1:
        raise ValueError(f"size must be a positive integer, got {size!r}")
    if isinstance(policy, Plain):
        return Layout(size, size, size, 0, 0)
    if isinstance(policy, Padded):
        logo = logo_side(size, policy.logo_fraction)
        off = (size - logo) // 2
        return Layout(size, size, logo, off, off, policy.bg_color, policy.corner_radius)
    if isinstance(policy, FixedAspect):
        if policy.width < 1 or policy.height < 1:
            raise ValueError(f"canvas must be positive, got {policy.width}x{policy.height}")
        logo = logo_side(min(policy.width, policy.height), policy.logo_fraction)
        return Layout(
            policy.width,
            policy.height,
            logo,
            (policy.width - logo) // 2,
            (policy.height - logo) // 2,
            policy.bg_color,
            policy.corner_radius,
        )
    raise TypeError(f"unknown placement policy: {policy!r}")
