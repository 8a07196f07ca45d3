from .builder import PackagePreview, build_previews, render_package
from .gallery import open_in_viewer, render_gallery, render_section, write_gallery
from .locator import FONT_SUFFIXES, FdFontLocator, FontLocator, PathFontLocator
from .rasterizer import (
    MagickRasterizer,
    PillowRasterizer,
    Rasterizer,
    RenderError,
    escape_label,
)

__all__ = [
    "FONT_SUFFIXES",
    "FdFontLocator",
    "FontLocator",
    "MagickRasterizer",
    "PackagePreview",
    "PathFontLocator",
    "PillowRasterizer",
    "Rasterizer",
    "RenderError",
    "build_previews",
    "escape_label",
    "open_in_viewer",
    "render_gallery",
    "render_package",
    "render_section",
    "write_gallery",
]
