"""Run configuration, read once from the environment."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict
from pydantic.functional_validators import BeforeValidator
from typing_extensions import Annotated

Toolchain = Literal["external", "pillow"]

TMP_DIR = Path(tempfile.gettempdir())

# Punctuation, uppercase, lowercase, digits (one line each)
SAMPLE_TEXT = "\n".join(
    [
        "!\"#$%&'()*+,-./:;<=>?@[]^_{|}~",
        "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
        "abcdefghijklmnopqrstuvwxyz",
        "0123456789",
    ]
)


def parse_int(value: Union[int, float, str]) -> int:
    """Parse a value to integer."""
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        return int(float(value.strip()))
    raise TypeError(f"Cannot parse {type(value)} to int")


IntField = Annotated[int, BeforeValidator(parse_int)]


class GalleryConfig(BaseModel):
    """Settings shared by every phase of a review run."""

    model_config = ConfigDict(frozen=True)

    brew: str = "brew"
    brew_prefix: Path = Path("/opt/homebrew")
    preview_dir: Path = TMP_DIR / "font-previews"
    error_log: Path = TMP_DIR / "font-install-errors.log"
    html_path: Path = TMP_DIR / "font-preview.html"

    foreground: str = "black"
    background: str = "white"
    width: IntField = 1600
    pointsize: IntField = 32
    montage_gap: IntField = 10
    sample_text: str = SAMPLE_TEXT

    installed_pattern: str = r"font.*mono"
    available_pattern: str = r"^font-.*-mono$"
    search_query: str = "/font-.*-mono/"

    toolchain: Toolchain = "external"
    assume_yes: bool = False
    skip_install: bool = False
    open_viewer: bool = True
    verbose: bool = False

    @property
    def caskroom(self) -> Path:
        return self.brew_prefix / "Caskroom"

    @property
    def uninstall_verb(self) -> str:
        return f"{self.brew} uninstall"

    def package_dir(self, package: str) -> Path:
        return self.caskroom / package

    @classmethod
    def from_env(
        cls, environ: Mapping[str, str] | None = None, **overrides
    ) -> "GalleryConfig":
        """Build a config from ``HOMEBREW_PREFIX`` and ``FONT_PREVIEW_*`` variables."""
        env = os.environ if environ is None else environ
        mapping = {
            "HOMEBREW_PREFIX": "brew_prefix",
            "FONT_PREVIEW_DIR": "preview_dir",
            "FONT_PREVIEW_FG": "foreground",
            "FONT_PREVIEW_BG": "background",
            "FONT_PREVIEW_WIDTH": "width",
            "FONT_PREVIEW_POINTSIZE": "pointsize",
            "FONT_PREVIEW_TOOLCHAIN": "toolchain",
        }
        values = {field: env[var] for var, field in mapping.items() if env.get(var)}
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


__all__ = ["GalleryConfig", "IntField", "SAMPLE_TEXT", "Toolchain", "parse_int"]
