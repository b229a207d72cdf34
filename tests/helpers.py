import re
import xml.etree.ElementTree as ET

SVG_NS = "{http://www.w3.org/2000/svg}"


def parse(svg: str) -> ET.Element:
    return ET.fromstring(svg)


def numbers(value: str):
    return [float(v) for v in re.split(r"[,\s]+", value.strip())]


def circles(root: ET.Element):
    return root.iter(f"{SVG_NS}circle")


def clip_circle(root: ET.Element, clip_id: str) -> ET.Element:
    for clip in root.iter(f"{SVG_NS}clipPath"):
        if clip.get("id") == clip_id:
            return clip.find(f"{SVG_NS}circle")
    raise AssertionError(f"no clipPath {clip_id!r}")


def full_bleed_svg(width: int, height: int, fill: str = "#FFFFFF") -> str:
    """An opaque rectangle covering its whole viewBox."""
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {width} {height}">'
        f'<rect x="0" y="0" width="{width}" height="{height}" fill="{fill}"/></svg>'
    )
