"""External tool plumbing: command runner, prompts and the preflight check."""

from __future__ import annotations

import shutil
import subprocess
import sys
from abc import ABC, abstractmethod
from typing import Callable, Iterable, Optional

from pydantic import BaseModel


class PreflightError(RuntimeError):
    """A required external tool is missing and was not installed."""


def run_command(
    cmd: list[str],
    *,
    input: str | None = None,
    verbose: bool = False,
) -> subprocess.CompletedProcess[str]:
    """Run command and return result; never raises on a non-zero exit."""
    if verbose:
        print(f"$ {' '.join(cmd)}")
    return subprocess.run(cmd, input=input, capture_output=True, text=True)


class ToolSpec(BaseModel):
    """An executable the workflow shells out to."""

    name: str
    executable: str
    formula: Optional[str] = None  # brew formula offering the executable
    version_args: tuple[str, ...] = ()

    @property
    def installable(self) -> bool:
        return self.formula is not None


BREW = ToolSpec(name="Homebrew", executable="brew", version_args=("--version",))
IMAGEMAGICK = ToolSpec(name="ImageMagick", executable="magick", formula="imagemagick")
RIPGREP = ToolSpec(name="ripgrep", executable="rg", formula="ripgrep")
FD = ToolSpec(name="fd", executable="fd", formula="fd")


class Prompter(ABC):
    @abstractmethod
    def confirm(self, question: str, default: bool = False) -> bool:
        raise NotImplementedError


class TerminalPrompter(Prompter):
    """Line-based yes/no prompt on stdin."""

    def __init__(self, assume_yes: bool = False) -> None:
        self.assume_yes = assume_yes

    def confirm(self, question: str, default: bool = False) -> bool:
        if self.assume_yes:
            print(f"{question} [auto: yes]")
            return True
        hint = "Y/n" if default else "y/N"
        while True:
            try:
                answer = input(f"{question} [{hint}]: ").strip().lower()
            except EOFError:
                # closed stdin never approves anything
                print()
                return False
            if answer == "":
                return default
            if answer in ("y", "yes"):
                return True
            if answer in ("n", "no"):
                return False


def tool_available(tool: ToolSpec, which: Callable[[str], Optional[str]]) -> bool:
    if which(tool.executable) is None:
        return False
    if tool.version_args:
        result = run_command([tool.executable, *tool.version_args])
        return result.returncode == 0
    return True


def check_tools(
    tools: Iterable[ToolSpec],
    prompter: Prompter,
    install: Callable[[str], bool],
    *,
    which: Callable[[str], Optional[str]] = shutil.which,
) -> None:
    """Verify every tool is on PATH, offering a one-shot brew install where possible.

    Raises:
        PreflightError: a tool is missing and cannot be, or was not, installed.
    """
    for tool in tools:
        if tool_available(tool, which):
            print(f"✓ {tool.name} ({tool.executable})")
            continue

        if not tool.installable:
            raise PreflightError(
                f"{tool.name} ('{tool.executable}') is required but was not found"
            )

        print(f"⚠️  {tool.name} ('{tool.executable}') is not installed", file=sys.stderr)
        if not prompter.confirm(f"Install {tool.name} with 'brew install {tool.formula}'?"):
            raise PreflightError(f"{tool.name} is required; installation declined")

        if not install(tool.formula or "") or not tool_available(tool, which):
            raise PreflightError(f"Failed to install {tool.name} ({tool.formula})")
        print(f"✓ {tool.name} installed")


__all__ = [
    "BREW",
    "FD",
    "IMAGEMAGICK",
    "PreflightError",
    "Prompter",
    "RIPGREP",
    "TerminalPrompter",
    "ToolSpec",
    "check_tools",
    "run_command",
    "tool_available",
]
