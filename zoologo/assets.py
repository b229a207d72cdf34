"""
The fixed catalogue of generated assets.

Every request reads its markup from the one LogoConfig passed in; sizes and
file names are the only literals here.
"""
import math
from pathlib import Path
from typing import Dict, List, Sequence

from .config import DEFAULT_CONFIG, LogoConfig
from .emit import RenderRequest, emit_ico
from .logos import Variant, render, render_favicon
from .placement import FixedAspect, Padded, Plain

STANDARD_SIZES = (16, 32, 64, 128, 256, 512, 1024)
MONO_SIZES = (16, 32, 64)
RETINA_BASES = (16, 32, 128, 256, 512)
DOCK_BASES = (16, 32, 128, 256, 512)
FAVICON_SIZES = (16, 32, 48, 64, 96, 128, 192, 256, 512)
FAVICON_ICO_SIZES = (16, 32, 48)
APPLE_TOUCH_SIZES = (57, 60, 72, 76, 114, 120, 144, 152, 180)
# base point size -> scales; 16pt is the classic macOS template, 22pt the tall bar
MENUBAR_SCALES = {16: (1, 1.5, 2, 3), 22: (1, 2)}
MENUBAR_TRAY = "tray-icon-macos.png"
# bundler names kept next to the icon_NxN set
DOCK_ALIASES = {"16x16.png": 16, "32x32.png": 32, "128x128.png": 128, "128x128@2x.png": 256}
DOCK_MARKETING = 1024
SOCIAL = {
    "og-image.png": (1200, 630),
    "twitter-card.png": (1200, 600),
    "social-square.png": (1200, 1200),
}

DOCK_MIN_PADDED = 128
DOCK_LOGO_FRACTION = 0.8
DOCK_CORNER = 0.22  # macOS-style squircle approximation
APPLE_LOGO_FRACTION = 0.65
APPLE_CORNER = 0.156
SOCIAL_LOGO_FRACTION = 0.4
BLACK = "#000000"

SVG_SOURCES = {
    "zoo-logo.svg": Variant.COLOR,
    "zoo-logo-cropped.svg": Variant.COLOR_CROPPED,
    "zoo-logo-mono.svg": Variant.MONO,
    "zoo-logo-white.svg": Variant.WHITE,
    "zoo-logo-menubar.svg": Variant.MENUBAR,
    "favicon.svg": Variant.FAVICON,
}


def scale_tag(scale) -> str:
    return "" if scale == 1 else f"@{scale}x"


def dock_policy(px: int):
    if px < DOCK_MIN_PADDED:
        return Plain()
    return Padded(BLACK, math.floor(px * DOCK_CORNER), DOCK_LOGO_FRACTION)


def apple_policy(px: int) -> Padded:
    return Padded(BLACK, math.floor(px * APPLE_CORNER), APPLE_LOGO_FRACTION)


def icon_requests(out: Path, config: LogoConfig) -> List[RenderRequest]:
    color = render(Variant.COLOR, config)
    mono = render(Variant.MONO, config)
    d = out / "icons"
    reqs = [RenderRequest(color, d / f"zoo-{s}.png", s) for s in STANDARD_SIZES]
    reqs += [RenderRequest(mono, d / f"zoo-mono-{s}.png", s) for s in MONO_SIZES]
    reqs += [RenderRequest(color, d / f"zoo-{b}@2x.png", b * 2) for b in RETINA_BASES]
    return reqs


def dock_requests(out: Path, config: LogoConfig) -> List[RenderRequest]:
    color = render(Variant.COLOR, config)
    d = out / "dock"
    reqs = []
    for base in DOCK_BASES:
        for scale in (1, 2):
            px = base * scale
            name = f"icon_{base}x{base}{scale_tag(scale)}.png"
            reqs.append(RenderRequest(color, d / name, px, dock_policy(px)))
    name = f"icon_{DOCK_MARKETING}x{DOCK_MARKETING}.png"
    reqs.append(RenderRequest(color, d / name, DOCK_MARKETING, dock_policy(DOCK_MARKETING)))
    for name, px in DOCK_ALIASES.items():
        reqs.append(RenderRequest(color, d / name, px, dock_policy(px)))
    return reqs


def menubar_requests(out: Path, config: LogoConfig) -> List[RenderRequest]:
    menubar = render(Variant.MENUBAR, config)
    d = out / "menubar"
    reqs = []
    for base, scales in MENUBAR_SCALES.items():
        stem = "iconTemplate" if base == 16 else f"iconTemplate{base}"
        for scale in scales:
            reqs.append(RenderRequest(menubar, d / f"{stem}{scale_tag(scale)}.png", int(base * scale)))
    reqs.append(RenderRequest(menubar, d / MENUBAR_TRAY, 16))
    return reqs


def favicon_requests(out: Path, config: LogoConfig) -> List[RenderRequest]:
    favicon = render_favicon()
    d = out / "favicon"
    return [RenderRequest(favicon, d / f"favicon-{s}.png", s) for s in FAVICON_SIZES]


def apple_requests(out: Path, config: LogoConfig) -> List[RenderRequest]:
    color = render(Variant.COLOR, config)
    d = out / "apple"
    reqs = [RenderRequest(color, d / f"apple-touch-icon-{s}x{s}.png", s, apple_policy(s)) for s in APPLE_TOUCH_SIZES]
    top = max(APPLE_TOUCH_SIZES)
    reqs.append(RenderRequest(color, d / "apple-touch-icon.png", top, apple_policy(top)))
    return reqs


def social_requests(out: Path, config: LogoConfig) -> List[RenderRequest]:
    color = render(Variant.COLOR, config)
    d = out / "social"
    return [
        RenderRequest(color, d / name, w, FixedAspect(w, h, BLACK, SOCIAL_LOGO_FRACTION))
        for name, (w, h) in SOCIAL.items()
    ]


BUILDERS = {
    "icons": icon_requests,
    "dock": dock_requests,
    "menubar": menubar_requests,
    "favicon": favicon_requests,
    "apple": apple_requests,
    "social": social_requests,
}
GROUPS = tuple(BUILDERS)


def build_requests(out, config: LogoConfig = DEFAULT_CONFIG, groups: Sequence[str] = GROUPS) -> List[RenderRequest]:
    out = Path(out)
    unknown = [g for g in groups if g not in BUILDERS]
    if unknown:
        raise ValueError(f"unknown asset group(s): {', '.join(unknown)}")
    reqs: List[RenderRequest] = []
    for group in groups:
        reqs += BUILDERS[group](out, config)
    return reqs


def write_svg_sources(out, config: LogoConfig = DEFAULT_CONFIG) -> Dict[str, Path]:
    svg_dir = Path(out) / "svg"
    svg_dir.mkdir(parents=True, exist_ok=True)
    written = {}
    for name, variant in SVG_SOURCES.items():
        path = svg_dir / name
        path.write_text(render(variant, config), encoding="utf-8")
        written[name] = path
    return written


def write_favicon_ico(out) -> Path:
    target = Path(out) / "favicon" / "favicon.ico"
    emit_ico(render_favicon(), target, FAVICON_ICO_SIZES)
    return target
