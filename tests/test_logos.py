import base64
import subprocess
import sys
from dataclasses import replace
from pathlib import Path

import pytest

from zoologo import (
    DEFAULT_CONFIG,
    LogoFormat,
    Variant,
    get_logo,
    render,
    render_color,
    render_color_cropped,
    render_favicon,
    render_menubar,
    render_mono,
    render_white,
)
from zoologo.logos import RENDERERS, menubar_viewbox
from zoologo.svg import num

from tests.helpers import SVG_NS, circles, clip_circle, numbers, parse

SHIFTED = replace(
    DEFAULT_CONFIG,
    color=replace(DEFAULT_CONFIG.color, green_x=500.5, green_y=380, red_x=350, blue_x=660, circle_radius=220),
    mono=replace(DEFAULT_CONFIG.mono, stroke_width=20.5),
)


class TestColor:
    @pytest.mark.parametrize("cfg", [DEFAULT_CONFIG, SHIFTED])
    def test_outer_clip_radius_matches_config(self, cfg):
        outer = clip_circle(parse(render_color(cfg)), "outerCircleColor")
        assert float(outer.get("r")) == cfg.color.outer_radius
        assert float(outer.get("cx")) == cfg.color.outer_x
        assert float(outer.get("cy")) == cfg.color.outer_y

    @pytest.mark.parametrize("cfg", [DEFAULT_CONFIG, SHIFTED])
    def test_primary_circles_use_configured_centers(self, cfg):
        root = parse(render_color(cfg))
        p = cfg.palette
        fills = {c.get("fill"): (float(c.get("cx")), float(c.get("cy"))) for c in circles(root) if c.get("fill")}
        assert fills[p.green] == (cfg.color.green_x, cfg.color.green_y)
        assert fills[p.red] == (cfg.color.red_x, cfg.color.red_y)
        assert fills[p.blue] == (cfg.color.blue_x, cfg.color.blue_y)

    def test_canvas_is_1024(self):
        root = parse(render_color())
        assert root.get("width") == "1024"
        assert root.get("height") == "1024"
        assert numbers(root.get("viewBox")) == [0, 0, 1024, 1024]

    def test_overlap_paint_order(self):
        root = parse(render_color())
        body = root.find(f"{SVG_NS}g")
        assert body.get("clip-path") == "url(#outerCircleColor)"
        base = [c.get("fill") for c in body.findall(f"{SVG_NS}circle")]
        assert base == ["#00A652", "#ED1C24", "#2E3192"]
        overlays = [c.get("fill") for g in body.findall(f"{SVG_NS}g") for c in g.iter(f"{SVG_NS}circle")]
        assert overlays == ["#FCF006", "#01ACF1", "#EA018E", "#FFFFFF"]

    def test_white_overlap_sits_in_nested_green_and_red_clips(self):
        body = parse(render_color()).find(f"{SVG_NS}g")
        last = body.findall(f"{SVG_NS}g")[-1]
        inner = last.find(f"{SVG_NS}g")
        assert last.get("clip-path") == "url(#greenClip)"
        assert inner.get("clip-path") == "url(#redClip)"
        assert inner.find(f"{SVG_NS}circle").get("fill") == "#FFFFFF"

    def test_deterministic(self):
        assert render_color() == render_color()

    def test_no_unit_suffixes_and_no_rounding(self):
        svg = render_color(SHIFTED)
        assert 'cx="500.5"' in svg
        assert "px" not in svg


class TestCropped:
    def test_viewbox_hugs_outer_circle(self):
        root = parse(render_color_cropped(padding=20))
        c = DEFAULT_CONFIG.color
        side = (c.outer_radius + 20) * 2
        assert numbers(root.get("viewBox")) == [c.outer_x - c.outer_radius - 20, c.outer_y - c.outer_radius - 20, side, side]
        assert float(root.get("width")) == side

    def test_negative_padding_rejected(self):
        with pytest.raises(ValueError):
            render_color_cropped(padding=-1)


class TestMono:
    def test_strokes_without_fill(self):
        root = parse(render_mono())
        drawn = [c for c in root.find(f"{SVG_NS}g").iter(f"{SVG_NS}circle")]
        assert len(drawn) == 4
        assert all(c.get("fill") == "none" and c.get("stroke") == "black" for c in drawn)
        assert [float(c.get("stroke-width")) for c in drawn] == [33, 33, 33, 36]

    def test_ring_radius(self):
        ring = list(parse(render_mono()).find(f"{SVG_NS}g").iter(f"{SVG_NS}circle"))[-1]
        assert float(ring.get("r")) == 265
        assert (float(ring.get("cx")), float(ring.get("cy"))) == (508, 510)

    def test_clip_uses_mono_outer_circle(self):
        outer = clip_circle(parse(render_mono()), "outerCircleMono")
        assert float(outer.get("r")) == 283

    def test_white_differs_only_in_stroke_color(self):
        for cfg in (DEFAULT_CONFIG, SHIFTED):
            mono, white = render_mono(cfg), render_white(cfg)
            assert 'stroke="black"' not in white
            assert white.count('stroke="white"') == mono.count('stroke="black"') == 4
            assert white.replace('stroke="white"', 'stroke="black"') == mono


class TestMenubar:
    @pytest.mark.parametrize("cfg", [DEFAULT_CONFIG, SHIFTED])
    def test_crop_is_exact(self, cfg):
        root = parse(render_menubar(cfg))
        min_x, min_y, width, height = numbers(root.get("viewBox"))
        c, sw = cfg.color, cfg.mono.stroke_width
        xs = [x for x, _ in c.centers]
        ys = [y for _, y in c.centers]
        assert width == 2 * (c.circle_radius + sw) + (max(xs) - min(xs))
        assert height == 2 * (c.circle_radius + sw) + (max(ys) - min(ys))
        assert min_x == min(xs) - c.circle_radius - sw
        assert min_y == min(ys) - c.circle_radius - sw

    def test_default_viewbox(self):
        assert menubar_viewbox() == (98, 102, 812, 760)

    def test_no_fixed_canvas(self):
        root = parse(render_menubar())
        assert root.get("width") is None
        assert root.get("height") is None

    def test_same_drawing_as_mono(self):
        def drawn(svg):
            g = parse(svg).find(f"{SVG_NS}g")
            return [dict(c.attrib) for c in g.iter(f"{SVG_NS}circle")]
        assert drawn(render_menubar()) == drawn(render_mono())


class TestFavicon:
    def test_fixed_64_grid(self):
        root = parse(render_favicon())
        assert numbers(root.get("viewBox")) == [0, 0, 64, 64]
        rect = root.find(f"{SVG_NS}rect")
        assert (rect.get("width"), rect.get("height"), rect.get("rx"), rect.get("fill")) == ("64", "64", "8", "#000000")
        assert [(c.get("cx"), c.get("cy"), c.get("r")) for c in circles(root)] == [
            ("32", "22", "12"), ("21", "40", "12"), ("43", "40", "12"),
        ]

    def test_ignores_config(self):
        assert render(Variant.FAVICON, SHIFTED) == render_favicon()


class TestDispatch:
    def test_every_variant_has_a_renderer(self):
        assert set(RENDERERS) == set(Variant)

    @pytest.mark.parametrize("variant", list(Variant))
    def test_every_variant_is_well_formed(self, variant):
        assert parse(render(variant)).tag == f"{SVG_NS}svg"

    def test_accepts_string_tag(self):
        assert render("mono") == render_mono()

    def test_unknown_tag(self):
        with pytest.raises(ValueError):
            render("sepia")


class TestFormats:
    def test_svg_is_default(self):
        assert get_logo() == render_color()

    def test_base64_round_trips_utf8(self):
        encoded = get_logo(Variant.WHITE, LogoFormat.BASE64)
        assert base64.b64decode(encoded).decode("utf-8") == render_white()

    def test_data_url(self):
        url = get_logo(Variant.MONO, "dataUrl")
        assert url.startswith("data:image/svg+xml;base64,")
        assert base64.b64decode(url.split(",", 1)[1]).decode("utf-8") == render_mono()


class TestNum:
    def test_integral_float_prints_as_int(self):
        assert num(265.0) == 265
        assert isinstance(num(265.0), int)

    def test_fraction_kept(self):
        assert num(16.5) == 16.5


class TestImports:
    def test_markup_does_not_load_the_rasterizer(self):
        code = "import sys, zoologo; zoologo.get_logo(); print('cairosvg' in sys.modules)"
        done = subprocess.run(
            [sys.executable, "-c", code],
            cwd=Path(__file__).resolve().parents[1],
            capture_output=True,
            text=True,
            check=True,
        )
        assert done.stdout.strip() == "False"
