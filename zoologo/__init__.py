"""
Zoo logo: parametric SVG variants and the raster icons derived from them.

Only the markup side is imported here; rasterization lives in zoologo.emit
and needs cairosvg's native cairo library.
"""
from .config import DEFAULT_CONFIG, ColorGeometry, LogoConfig, MonoGeometry, Palette
from .errors import ConfigError, EmitError, LogoError
from .logos import (
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
from .placement import FixedAspect, Layout, Padded, Plain, layout

__version__ = "1.0.0"
