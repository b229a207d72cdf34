"""
SVG markup for every logo variant.

The color logo emulates three overlapping translucent disks with opaque fills
only: each pairwise (and the triple) overlap is repainted inside nested clip
groups, so later layers cover earlier ones exactly in the intersection.

Every function takes the LogoConfig explicitly and validates it before any
markup is built. The favicon is a separate small-size design and ignores it.
"""
from enum import Enum

from .config import DEFAULT_CONFIG, LogoConfig
from .svg import clip_circle, drawing, num, to_base64, to_data_url

CROP_PADDING = 20


class Variant(Enum):
    COLOR = "color"
    COLOR_CROPPED = "color-cropped"
    MONO = "mono"
    MENUBAR = "menubar"
    FAVICON = "favicon"
    WHITE = "white"


class LogoFormat(Enum):
    SVG = "svg"
    DATA_URL = "dataUrl"
    BASE64 = "base64"


def _circle(dwg, cx, cy, r, **extra):
    return dwg.circle(center=(num(cx), num(cy)), r=num(r), **extra)


def _color_drawing(config: LogoConfig, size, viewbox) -> str:
    c = config.color
    p = config.palette
    dwg = drawing(size, viewbox)
    outer = clip_circle(dwg, "outerCircleColor", c.outer_x, c.outer_y, c.outer_radius)
    green = clip_circle(dwg, "greenClip", c.green_x, c.green_y, c.circle_radius)
    red = clip_circle(dwg, "redClip", c.red_x, c.red_y, c.circle_radius)
    clip_circle(dwg, "blueClip", c.blue_x, c.blue_y, c.circle_radius)

    r = c.circle_radius
    body = dwg.g(clip_path=outer)
    body.add(_circle(dwg, c.green_x, c.green_y, r, fill=p.green))
    body.add(_circle(dwg, c.red_x, c.red_y, r, fill=p.red))
    body.add(_circle(dwg, c.blue_x, c.blue_y, r, fill=p.blue))

    # z-order: yellow, cyan, magenta, then white on top
    overlaps = (
        ((green,), (c.red_x, c.red_y), p.yellow),
        ((green,), (c.blue_x, c.blue_y), p.cyan),
        ((red,), (c.blue_x, c.blue_y), p.magenta),
        ((green, red), (c.blue_x, c.blue_y), p.white),
    )
    for clips, (cx, cy), fill in overlaps:
        top = group = dwg.g(clip_path=clips[0])
        for clip in clips[1:]:
            inner = dwg.g(clip_path=clip)
            group.add(inner)
            group = inner
        group.add(_circle(dwg, cx, cy, r, fill=fill))
        body.add(top)

    dwg.add(body)
    return dwg.tostring()


def render_color(config: LogoConfig = DEFAULT_CONFIG) -> str:
    config.validate()
    return _color_drawing(config, (config.canvas, config.canvas), (0, 0, config.canvas, config.canvas))


def render_color_cropped(config: LogoConfig = DEFAULT_CONFIG, padding: float = CROP_PADDING) -> str:
    """Color logo cropped to the outer silhouette plus ``padding`` on each side."""
    config.validate()
    if padding < 0:
        raise ValueError(f"padding must not be negative, got {padding!r}")
    c = config.color
    side = (c.outer_radius + padding) * 2
    min_x = c.outer_x - c.outer_radius - padding
    min_y = c.outer_y - c.outer_radius - padding
    return _color_drawing(config, (side, side), (min_x, min_y, side, side))


def _stroke_drawing(config: LogoConfig, size, viewbox, clip_id: str) -> str:
    c = config.color
    m = config.mono
    dwg = drawing(size, viewbox)
    outer = clip_circle(dwg, clip_id, m.outer_x, m.outer_y, m.outer_radius)
    body = dwg.g(clip_path=outer)
    for cx, cy in c.centers:
        body.add(_circle(dwg, cx, cy, c.circle_radius, fill="none", stroke="black", stroke_width=num(m.stroke_width)))
    body.add(
        _circle(dwg, m.outer_x, m.outer_y, m.ring_radius, fill="none", stroke="black", stroke_width=num(m.outer_stroke_width))
    )
    dwg.add(body)
    return dwg.tostring()


def render_mono(config: LogoConfig = DEFAULT_CONFIG) -> str:
    config.validate()
    return _stroke_drawing(config, (config.canvas, config.canvas), (0, 0, config.canvas, config.canvas), "outerCircleMono")


def menubar_viewbox(config: LogoConfig = DEFAULT_CONFIG):
    """Bounding box of the primary circles grown by radius + stroke width."""
    c = config.color
    grow = c.circle_radius + config.mono.stroke_width
    xs = [x for x, _ in c.centers]
    ys = [y for _, y in c.centers]
    min_x = min(xs) - grow
    min_y = min(ys) - grow
    return (min_x, min_y, max(xs) + grow - min_x, max(ys) + grow - min_y)


def render_menubar(config: LogoConfig = DEFAULT_CONFIG) -> str:
    config.validate()
    return _stroke_drawing(config, None, menubar_viewbox(config), "outerCircleMenu")


def render_white(config: LogoConfig = DEFAULT_CONFIG) -> str:
    return render_mono(config).replace('stroke="black"', 'stroke="white"')


def render_favicon() -> str:
    # tuned by eye for 16-64px, deliberately not derived from LogoConfig
    dwg = drawing(None, (0, 0, 64, 64))
    dwg.add(dwg.rect(insert=(0, 0), size=(64, 64), rx=8, fill="#000000"))
    dwg.add(dwg.circle(center=(32, 22), r=12, fill="#00A652"))
    dwg.add(dwg.circle(center=(21, 40), r=12, fill="#ED1C24"))
    dwg.add(dwg.circle(center=(43, 40), r=12, fill="#2E3192"))
    return dwg.tostring()


RENDERERS = {
    Variant.COLOR: render_color,
    Variant.COLOR_CROPPED: render_color_cropped,
    Variant.MONO: render_mono,
    Variant.MENUBAR: render_menubar,
    Variant.FAVICON: lambda config: render_favicon(),
    Variant.WHITE: render_white,
}


def render(variant: Variant, config: LogoConfig = DEFAULT_CONFIG) -> str:
    return RENDERERS[Variant(variant)](config)


def get_logo(variant: Variant = Variant.COLOR, fmt: LogoFormat = LogoFormat.SVG, config: LogoConfig = DEFAULT_CONFIG) -> str:
    """Markup, base64 or a data URL for inline embedding."""
    svg = render(variant, config)
    fmt = LogoFormat(fmt)
    if fmt is LogoFormat.DATA_URL:
        return to_data_url(svg)
    if fmt is LogoFormat.BASE64:
        return to_base64(svg)
    return svg
