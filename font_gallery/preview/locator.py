"""Font file discovery under a cask's install directory."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from ..casks.tools import FD, ToolSpec, run_command

FONT_SUFFIXES = {".ttf", ".otf"}


class FontLocator(ABC):
    @property
    def required_tools(self) -> list[ToolSpec]:
        return []

    @abstractmethod
    def find(self, directory: Path) -> list[Path]:
        raise NotImplementedError


class PathFontLocator(FontLocator):
    """Walk the directory with ``pathlib``."""

    def find(self, directory: Path) -> list[Path]:
        if not directory.exists():
            return []
        return sorted(
            p
            for p in directory.rglob("*")
            if p.is_file() and p.suffix.lower() in FONT_SUFFIXES
        )


class FdFontLocator(FontLocator):
    """List fonts with ``fd -e ttf -e otf``."""

    def __init__(self, fd: str = "fd") -> None:
        self.fd = fd

    @property
    def required_tools(self) -> list[ToolSpec]:
        return [FD.model_copy(update={"executable": self.fd})]

    def find(self, directory: Path) -> list[Path]:
        if not directory.exists():
            return []
        cmd = [self.fd, "--type", "f", "--no-ignore", "--follow"]
        for suffix in sorted(FONT_SUFFIXES):
            cmd += ["--extension", suffix.lstrip(".")]
        cmd += [".", str(directory)]
        result = run_command(cmd)
        if result.returncode != 0:
            raise RuntimeError(f"fd failed in {directory}: {result.stderr.strip()}")
        return sorted(Path(ln) for ln in result.stdout.splitlines() if ln.strip())


__all__ = ["FONT_SUFFIXES", "FdFontLocator", "FontLocator", "PathFontLocator"]
