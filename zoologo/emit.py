"""
Emission pipeline: one SVG string + placement policy -> one PNG on disk.

cairosvg rasterizes the markup at the final logo size, Pillow draws the
optional rounded background, composites and encodes. Files are written to a
sibling temp file first and moved into place with os.replace.
"""
import os
import sys
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from io import BytesIO
from pathlib import Path
from typing import Callable, Iterable, List, Sequence, Tuple

import cairosvg
from PIL import Image, ImageColor, ImageDraw

from .errors import EmitError
from .placement import Layout, PlacementPolicy, Plain, layout

ICO_SIZES = (16, 32, 48)


@dataclass(frozen=True)
class RenderRequest:
    svg: str
    target: Path
    size: int
    policy: PlacementPolicy = field(default_factory=Plain)


@dataclass
class BatchResult:
    written: List[Path] = field(default_factory=list)
    failed: List[EmitError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


def _svg2image(svg: str, **size) -> Image.Image:
    png = cairosvg.svg2png(bytestring=svg.encode("utf-8"), **size)
    with Image.open(BytesIO(png)) as im:
        return im.convert("RGBA")


def rasterize(svg: str, size: int) -> Image.Image:
    """
    Square raster that covers size x size: a non-square drawing is scaled so
    its short side fits, then the long side is center-cropped.
    """
    img = _svg2image(svg, output_width=size)
    if img.height < size:
        img = _svg2image(svg, output_height=size)
    if img.size == (size, size):
        return img
    left = (img.width - size) // 2
    top = (img.height - size) // 2
    return img.crop((left, top, left + size, top + size))


def background(width: int, height: int, color: str, corner_radius: int = 0) -> Image.Image:
    """Rounded rectangle filling the whole canvas; radius 0 gives sharp corners."""
    fill = ImageColor.getcolor(color, "RGBA")
    canvas = Image.new("RGBA", (width, height), (0, 0, 0, 0))
    draw = ImageDraw.Draw(canvas)
    box = [0, 0, width - 1, height - 1]
    if corner_radius > 0:
        draw.rounded_rectangle(box, radius=corner_radius, fill=fill)
    else:
        draw.rectangle(box, fill=fill)
    return canvas


def compose(svg: str, lay: Layout) -> Image.Image:
    logo = rasterize(svg, lay.logo_size)
    if lay.bg_color is None:
        return logo
    canvas = background(lay.canvas_width, lay.canvas_height, lay.bg_color, lay.corner_radius)
    canvas.alpha_composite(logo, (lay.offset_x, lay.offset_y))
    return canvas


def _write_atomic(target: Path, save: Callable) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    tmp = target.with_name(f".{target.name}.{os.getpid()}.tmp")
    try:
        with open(tmp, "wb") as fh:
            save(fh)
        os.replace(tmp, target)
    except BaseException:
        if tmp.exists():
            tmp.unlink()
        raise


def emit(svg: str, target, size: int, policy: PlacementPolicy = Plain()) -> Tuple[int, int]:
    """Write exactly one PNG at ``target``; returns the canvas (width, height)."""
    target = Path(target)
    try:
        lay = layout(policy, size)
        img = compose(svg, lay)
        _write_atomic(target, lambda fh: img.save(fh, format="PNG"))
    except Exception as exc:
        raise EmitError(target, size, exc) from exc
    return img.size


def emit_request(request: RenderRequest) -> Tuple[int, int]:
    return emit(request.svg, request.target, request.size, request.policy)


def emit_ico(svg: str, target, sizes: Sequence[int] = ICO_SIZES) -> None:
    """Multi-resolution .ico from one rasterization at the largest size."""
    target = Path(target)
    biggest = max(sizes)
    try:
        img = rasterize(svg, biggest)
        _write_atomic(target, lambda fh: img.save(fh, format="ICO", sizes=[(s, s) for s in sizes]))
    except Exception as exc:
        raise EmitError(target, biggest, exc) from exc


def emit_all(requests: Iterable[RenderRequest], workers: int = 1, quiet: bool = False) -> BatchResult:
    """Emit every request; a failure is reported and the rest keep going."""
    requests = list(requests)
    result = BatchResult()

    def run(request: RenderRequest):
        try:
            return request, emit_request(request), None
        except EmitError as exc:
            return request, None, exc

    if workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            outcomes = list(pool.map(run, requests))
    else:
        outcomes = [run(r) for r in requests]

    for request, dims, error in outcomes:
        if error is not None:
            print(f"  ! Failed {request.target} ({request.size}px): {error.cause}", file=sys.stderr)
            result.failed.append(error)
            continue
        result.written.append(request.target)
        if not quiet:
            print(f"Wrote {request.target} ({dims[0]}x{dims[1]})")
    return result
