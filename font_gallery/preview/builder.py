"""Turn font casks into one montage image each."""

from __future__ import annotations

import shutil
from pathlib import Path

from pydantic import BaseModel

from .locator import FontLocator
from .rasterizer import Rasterizer, RenderError


class PackagePreview(BaseModel):
    package: str
    image_path: Path
    font_count: int


def _sample_path(directory: Path, font_path: Path) -> Path:
    output = directory / f"{font_path.stem}.png"
    n = 2
    while output.exists():
        output = directory / f"{font_path.stem}-{n}.png"
        n += 1
    return output


def render_package(
    package: str,
    fonts: list[Path],
    rasterizer: Rasterizer,
    preview_dir: Path,
) -> PackagePreview:
    """Render every font of a package and montage them into ``<preview_dir>/<package>.png``.

    Per-font images are staged in ``<preview_dir>/<package>/`` and removed afterwards.

    Raises:
        RenderError: none of the fonts could be rendered.
    """
    staging = preview_dir / package
    staging.mkdir(parents=True, exist_ok=True)

    samples: list[Path] = []
    for font_path in fonts:
        output = _sample_path(staging, font_path)
        if rasterizer.render_sample(font_path, output):
            samples.append(output)

    if not samples:
        shutil.rmtree(staging, ignore_errors=True)
        raise RenderError(f"{package}: none of {len(fonts)} font files could be rendered")

    montage_path = preview_dir / f"{package}.png"
    try:
        rasterizer.montage(samples, montage_path)
    finally:
        shutil.rmtree(staging, ignore_errors=True)

    print(f"✓ {package} ({len(samples)}/{len(fonts)} fonts)")
    return PackagePreview(package=package, image_path=montage_path, font_count=len(samples))


def build_previews(
    packages: list[str],
    *,
    caskroom: Path,
    preview_dir: Path,
    locator: FontLocator,
    rasterizer: Rasterizer,
) -> list[PackagePreview]:
    """Build a montage per package, skipping packages without font files."""
    if preview_dir.exists():
        shutil.rmtree(preview_dir)
    preview_dir.mkdir(parents=True)

    print(f"\n📁 {preview_dir}\n📦 {len(packages)} packages\n")

    previews: list[PackagePreview] = []
    for package in packages:
        fonts = locator.find(caskroom / package)
        if not fonts:
            print(f"⚠️  {package}: no .ttf/.otf files under {caskroom / package}, skipping")
            continue
        previews.append(render_package(package, fonts, rasterizer, preview_dir))

    return previews


__all__ = ["PackagePreview", "build_previews", "render_package"]
