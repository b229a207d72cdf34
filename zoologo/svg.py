"""Thin helpers around svgwrite shared by the logo variants."""
import base64
from typing import Optional, Tuple

import svgwrite

SVG_MIME = "image/svg+xml"


def num(value):
    """Integral floats print as integers (265.0 -> 265); nothing is rounded."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def drawing(size: Optional[Tuple[float, float]], viewbox: Tuple[float, float, float, float]) -> svgwrite.Drawing:
    # size=None leaves width/height off so the viewBox alone defines the aspect
    dwg = svgwrite.Drawing(size=None if size is None else (num(size[0]), num(size[1])))
    dwg.viewbox(*(num(v) for v in viewbox))
    return dwg


def clip_circle(dwg: svgwrite.Drawing, clip_id: str, cx, cy, r):
    clip = dwg.clipPath(id=clip_id)
    clip.add(dwg.circle(center=(num(cx), num(cy)), r=num(r)))
    dwg.defs.add(clip)
    return f"url(#{clip_id})"


def to_base64(svg: str) -> str:
    return base64.b64encode(svg.encode("utf-8")).decode("ascii")


def to_data_url(svg: str) -> str:
    return f"data:{SVG_MIME};base64,{to_base64(svg)}"
