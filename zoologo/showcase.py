"""Static HTML page previewing every generated file, for eyeballing a build."""
import html
from pathlib import Path
from typing import Iterable

from .assets import GROUPS, SVG_SOURCES, build_requests
from .config import DEFAULT_CONFIG, LogoConfig
from .emit import RenderRequest

PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>Zoo logo assets</title>
<style>
body {{ font-family: -apple-system, Helvetica, Arial, sans-serif; margin: 2rem; background: #f4f4f4; }}
section {{ margin-bottom: 2.5rem; }}
.grid {{ display: flex; flex-wrap: wrap; gap: 1rem; align-items: flex-end; }}
figure {{ margin: 0; padding: .75rem; background: #fff; border-radius: 8px; text-align: center; }}
figure.dark {{ background: #222; color: #eee; }}
figcaption {{ font-size: 12px; margin-top: .5rem; }}
img {{ max-width: 320px; image-rendering: auto; }}
</style>
</head>
<body>
<h1>Zoo logo assets</h1>
{sections}
</body>
</html>
"""


def _figure(src: str, caption: str, dark: bool = False) -> str:
    cls = ' class="dark"' if dark else ""
    return (
        f'<figure{cls}><img src="{html.escape(src)}" alt="{html.escape(caption)}">'
        f"<figcaption>{html.escape(caption)}</figcaption></figure>"
    )


def _section(title: str, figures: Iterable[str]) -> str:
    return f"<section><h2>{html.escape(title)}</h2><div class=\"grid\">{''.join(figures)}</div></section>"


def render_page(out, requests: Iterable[RenderRequest]) -> str:
    out = Path(out)
    sections = [
        _section(
            "SVG sources",
            (_figure(f"svg/{name}", name, dark=name.endswith("-white.svg")) for name in SVG_SOURCES),
        )
    ]
    by_group = {}
    for req in requests:
        rel = req.target.relative_to(out)
        by_group.setdefault(rel.parts[0], []).append(_figure(rel.as_posix(), f"{rel.name} ({req.size}px)"))
    for group, figures in by_group.items():
        sections.append(_section(group, figures))
    return PAGE.format(sections="\n".join(sections))


def write_showcase(out, config: LogoConfig = DEFAULT_CONFIG, groups=GROUPS) -> Path:
    out = Path(out)
    out.mkdir(parents=True, exist_ok=True)
    page = out / "index.html"
    page.write_text(render_page(out, build_requests(out, config, groups)), encoding="utf-8")
    return page
