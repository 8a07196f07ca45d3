from __future__ import annotations

import shutil
from pathlib import Path
from types import SimpleNamespace

from PIL import Image

from font_gallery.casks import CommandResult, PackageRepository, Prompter
from font_gallery.preview import FontLocator, Rasterizer


def completed(stdout: str = "", returncode: int = 0, stderr: str = ""):
    """Object compatible with the result of run_command()."""
    return SimpleNamespace(stdout=stdout, stderr=stderr, returncode=returncode)


class FakeRepository(PackageRepository):
    def __init__(
        self,
        installed: list[str],
        available: list[str],
        failing: set[str] | None = None,
    ) -> None:
        self.installed = list(installed)
        self.available = list(available)
        self.failing = set(failing or ())
        self.install_calls: list[str] = []
        self.formula_calls: list[str] = []

    def list_installed(self) -> list[str]:
        return list(self.installed)

    def list_available(self) -> list[str]:
        return list(self.available)

    def install(self, package: str) -> CommandResult:
        self.install_calls.append(package)
        if package in self.failing:
            return CommandResult(ok=False, output=f"Error: {package} download failed\n")
        self.installed.append(package)
        return CommandResult(ok=True, output=f"🍺 {package} was successfully installed!\n")

    def install_formula(self, formula: str) -> bool:
        self.formula_calls.append(formula)
        return True


class ScriptedPrompter(Prompter):
    """Answers prompts from a fixed list, recording the questions."""

    def __init__(self, *answers: bool) -> None:
        self.answers = list(answers)
        self.questions: list[str] = []

    def confirm(self, question: str, default: bool = False) -> bool:
        self.questions.append(question)
        return self.answers.pop(0) if self.answers else default


class FakeLocator(FontLocator):
    def __init__(self, fonts: dict[str, list[str]]) -> None:
        self.fonts = fonts

    def find(self, directory: Path) -> list[Path]:
        return [directory / name for name in self.fonts.get(directory.name, [])]


class FakeRasterizer(Rasterizer):
    """Writes solid-colour images instead of rendering glyphs."""

    def __init__(self, broken: set[str] | None = None) -> None:
        super().__init__()
        self.broken = set(broken or ())
        self.rendered: list[Path] = []
        self.montages: list[tuple[list[str], Path]] = []

    def render_sample(self, font_path: Path, output_path: Path) -> bool:
        if font_path.name in self.broken:
            return False
        Image.new("RGB", (40, 10), "white").save(output_path)
        self.rendered.append(output_path)
        return True

    def montage(self, images: list[Path], output_path: Path) -> None:
        self.montages.append(([p.name for p in images], output_path))
        shutil.copy(images[0], output_path)


def make_preview_image(path: Path, size: tuple[int, int] = (60, 20)) -> Path:
    Image.new("RGB", size, "white").save(path)
    return path
