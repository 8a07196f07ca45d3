"""Sample-glyph rendering and per-package montages."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from ..casks.config import SAMPLE_TEXT
from ..casks.tools import IMAGEMAGICK, ToolSpec, run_command

PADDING = 20
LABEL_SIZE = 14
LABEL_GAP = 4


class RenderError(RuntimeError):
    """A package with font files produced no sample images."""


class Rasterizer(ABC):
    def __init__(
        self,
        *,
        foreground: str = "black",
        background: str = "white",
        width: int = 1600,
        pointsize: int = 32,
        gap: int = 10,
        sample_text: str = SAMPLE_TEXT,
    ) -> None:
        self.foreground = foreground
        self.background = background
        self.width = width
        self.pointsize = pointsize
        self.gap = gap
        self.sample_text = sample_text

    @property
    def required_tools(self) -> list[ToolSpec]:
        return []

    @abstractmethod
    def render_sample(self, font_path: Path, output_path: Path) -> bool:
        """Render the sample text in one font; False if the font could not be rendered."""
        raise NotImplementedError

    @abstractmethod
    def montage(self, images: list[Path], output_path: Path) -> None:
        """Stack labelled sample images vertically on a transparent background."""
        raise NotImplementedError


def escape_label(text: str) -> str:
    """Escape ImageMagick's ``%`` and ``\\`` sequences in label text."""
    return text.replace("\\", "\\\\").replace("%", "%%")


class MagickRasterizer(Rasterizer):
    """Render with ImageMagick's ``label:`` and ``montage``."""

    magick = "magick"

    @property
    def required_tools(self) -> list[ToolSpec]:
        return [IMAGEMAGICK.model_copy(update={"executable": self.magick})]

    def render_sample(self, font_path: Path, output_path: Path) -> bool:
        cmd = [
            self.magick,
            "-background", self.background,
            "-fill", self.foreground,
            "-font", str(font_path),
            "-pointsize", str(self.pointsize),
            "-size", f"{self.width}x",
            f"label:{escape_label(self.sample_text)}",
            str(output_path),
        ]
        result = run_command(cmd)
        if result.returncode != 0:
            print(f"✗ {font_path.name}: {result.stderr.strip()}")
            return False
        return True

    def montage(self, images: list[Path], output_path: Path) -> None:
        cmd = [
            self.magick,
            "montage",
            "-background", "none",
            "-fill", self.foreground,
            "-pointsize", str(LABEL_SIZE),
            "-label", "%t",
            *[str(p) for p in images],
            "-tile", "1x",
            "-geometry", f"+0+{self.gap}",
            str(output_path),
        ]
        result = run_command(cmd)
        if result.returncode != 0:
            raise RenderError(f"montage failed for {output_path.name}: {result.stderr.strip()}")


class PillowRasterizer(Rasterizer):
    """Render with Pillow's FreeType binding."""

    def render_sample(self, font_path: Path, output_path: Path) -> bool:
        try:
            font = ImageFont.truetype(str(font_path), self.pointsize)
        except Exception as e:
            print(f"✗ {font_path.name}: {e}")
            return False

        # Calculate dimensions
        dummy_draw = ImageDraw.Draw(Image.new("RGB", (1, 1)))
        _, top, _, bottom = dummy_draw.multiline_textbbox(
            (0, 0), self.sample_text, font=font
        )
        img_width = max(self.width, 1)
        img_height = int(bottom - min(top, 0) + 2 * PADDING)

        img = Image.new("RGB", (img_width, img_height), self.background)
        draw = ImageDraw.Draw(img)
        draw.multiline_text(
            (PADDING, PADDING - min(top, 0)),
            self.sample_text,
            font=font,
            fill=self.foreground,
        )
        img.save(output_path)
        return True

    def montage(self, images: list[Path], output_path: Path) -> None:
        if not images:
            raise RenderError(f"no images to montage for {output_path.name}")

        label_font = ImageFont.load_default()
        tiles: list[tuple[str, Image.Image]] = []
        for path in images:
            with Image.open(path) as img:
                tiles.append((path.stem, img.convert("RGBA")))

        measure = ImageDraw.Draw(Image.new("RGBA", (1, 1)))
        label_h = measure.textbbox((0, 0), "Ag", font=label_font)[3] + LABEL_GAP

        grid_w = max(max(img.width for _, img in tiles), 1)
        grid_h = sum(label_h + img.height for _, img in tiles) + self.gap * (len(tiles) + 1)
        grid = Image.new("RGBA", (grid_w, grid_h), (0, 0, 0, 0))
        draw = ImageDraw.Draw(grid)

        y = self.gap
        for label, img in tiles:
            grid.paste(img, (0, y + label_h))
            draw.text((0, y), label, font=label_font, fill=self.foreground)
            y += label_h + img.height + self.gap

        grid.save(output_path)


__all__ = [
    "MagickRasterizer",
    "PillowRasterizer",
    "Rasterizer",
    "RenderError",
    "escape_label",
]
