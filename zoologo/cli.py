#!/usr/bin/env python3
"""
Zoo logo builder.

Usage:
  zoologo build [--out dist] [--workers 4] [--only icons dock ...] [--quiet]
  zoologo svg --variant mono --format dataUrl [--out logo.txt]
  zoologo showcase [--out dist]

Environment:
  ZOO_LOGO_OUT       default output directory (dist)
  ZOO_LOGO_WORKERS   default worker count for build (1)
"""
import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional

from .assets import GROUPS, build_requests, write_favicon_ico, write_svg_sources
from .config import DEFAULT_CONFIG
from .emit import emit_all
from .errors import EmitError, LogoError
from .logos import LogoFormat, Variant, get_logo
from .showcase import write_showcase


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise SystemExit(f"{name} must be an integer, got {raw!r}")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="zoologo", description="Generate Zoo logo SVGs and raster icons")
    sub = p.add_subparsers(dest="command", required=True)

    default_out = os.environ.get("ZOO_LOGO_OUT", "dist")

    b = sub.add_parser("build", help="Write SVG sources, every raster asset and index.html")
    b.add_argument("--out", default=default_out, help=f"Output directory (default: {default_out})")
    b.add_argument("--workers", type=int, default=_env_int("ZOO_LOGO_WORKERS", 1), help="Parallel emissions (default: 1)")
    b.add_argument("--only", nargs="+", choices=GROUPS, default=list(GROUPS), metavar="GROUP",
                   help=f"Asset groups to emit: {', '.join(GROUPS)}")
    b.add_argument("--quiet", action="store_true", help="Only report failures")

    s = sub.add_parser("svg", help="Print one variant as markup, base64 or a data URL")
    s.add_argument("--variant", default=Variant.COLOR.value, choices=[v.value for v in Variant])
    s.add_argument("--format", default=LogoFormat.SVG.value, choices=[f.value for f in LogoFormat])
    s.add_argument("--out", help="Write to this file instead of stdout")

    w = sub.add_parser("showcase", help="Regenerate index.html only")
    w.add_argument("--out", default=default_out, help=f"Output directory (default: {default_out})")
    return p.parse_args(argv)


def build(args: argparse.Namespace) -> int:
    out = Path(args.out)
    if args.workers < 1:
        raise SystemExit(f"--workers must be at least 1, got {args.workers}")
    try:
        sources = write_svg_sources(out, DEFAULT_CONFIG)
        requests = build_requests(out, DEFAULT_CONFIG, args.only)
    except LogoError as e:
        raise SystemExit(f"Invalid logo configuration: {e}")
    if not args.quiet:
        print(f"Wrote {len(sources)} SVG sources to {out / 'svg'}")

    result = emit_all(requests, workers=args.workers, quiet=args.quiet)
    if "favicon" in args.only:
        try:
            ico = write_favicon_ico(out)
            result.written.append(ico)
            if not args.quiet:
                print(f"Wrote {ico}")
        except EmitError as e:
            print(f"  ! Failed {e.target} ({e.size}px): {e.cause}", file=sys.stderr)
            result.failed.append(e)

    page = write_showcase(out, DEFAULT_CONFIG, args.only)
    print(f"Done. {len(result.written)} file(s) written, {len(result.failed)} failed. Preview: {page}")
    return 0 if result.ok else 1


def svg(args: argparse.Namespace) -> int:
    text = get_logo(Variant(args.variant), LogoFormat(args.format), DEFAULT_CONFIG)
    if args.out:
        out = Path(args.out)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(text, encoding="utf-8")
        print(f"Wrote {out}")
    else:
        sys.stdout.write(text + "\n")
    return 0


def showcase(args: argparse.Namespace) -> int:
    page = write_showcase(Path(args.out), DEFAULT_CONFIG)
    print(f"Wrote {page}")
    return 0


COMMANDS = {"build": build, "svg": svg, "showcase": showcase}


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    return COMMANDS[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
