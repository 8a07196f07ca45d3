"""Homebrew cask listing, search and installation."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Iterable

from pydantic import BaseModel

from .tools import BREW, RIPGREP, ToolSpec, run_command


class CommandResult(BaseModel):
    ok: bool
    output: str = ""


# Name filters ----------------------------------------------------------------


class NameFilter(BaseModel, ABC):
    """Select package names matching a pattern, one name per line."""

    @property
    def required_tools(self) -> list[ToolSpec]:
        return []

    @abstractmethod
    def select(self, lines: Iterable[str], pattern: str) -> list[str]:
        raise NotImplementedError


def _clean(lines: Iterable[str]) -> list[str]:
    # brew prints "==> Casks" style headers around search results
    return [ln.strip() for ln in lines if ln.strip() and not ln.startswith("==>")]


class RegexFilter(NameFilter):
    def select(self, lines: Iterable[str], pattern: str) -> list[str]:
        regex = re.compile(pattern)
        return sorted({ln for ln in _clean(lines) if regex.search(ln)})


class RipgrepFilter(NameFilter):
    """Pipe the listing through ``rg``."""

    rg: str = "rg"

    @property
    def required_tools(self) -> list[ToolSpec]:
        return [RIPGREP]

    def select(self, lines: Iterable[str], pattern: str) -> list[str]:
        text = "\n".join(_clean(lines))
        if not text:
            return []
        result = run_command([self.rg, "--no-line-number", "-e", pattern], input=text + "\n")
        # rg exits 1 when nothing matched
        if result.returncode not in (0, 1):
            raise RuntimeError(f"rg failed: {result.stderr.strip()}")
        return sorted({ln.strip() for ln in result.stdout.splitlines() if ln.strip()})


# Repositories ----------------------------------------------------------------


class PackageRepository(ABC):
    """Where font casks are listed, searched and installed."""

    @property
    def required_tools(self) -> list[ToolSpec]:
        return []

    @abstractmethod
    def list_installed(self) -> list[str]:
        raise NotImplementedError

    @abstractmethod
    def list_available(self) -> list[str]:
        raise NotImplementedError

    @abstractmethod
    def install(self, package: str) -> CommandResult:
        raise NotImplementedError

    @abstractmethod
    def install_formula(self, formula: str) -> bool:
        raise NotImplementedError


class BrewRepository(PackageRepository):
    def __init__(
        self,
        *,
        brew: str = "brew",
        name_filter: NameFilter | None = None,
        installed_pattern: str = r"font.*mono",
        available_pattern: str = r"^font-.*-mono$",
        search_query: str = "/font-.*-mono/",
        verbose: bool = False,
    ) -> None:
        self.brew = brew
        self.name_filter = name_filter or RegexFilter()
        self.installed_pattern = installed_pattern
        self.available_pattern = available_pattern
        self.search_query = search_query
        self.verbose = verbose

    @property
    def required_tools(self) -> list[ToolSpec]:
        brew = BREW.model_copy(update={"executable": self.brew})
        return [brew, *self.name_filter.required_tools]

    def _lines(self, *args: str) -> list[str]:
        result = run_command([self.brew, *args], verbose=self.verbose)
        if result.returncode != 0:
            raise RuntimeError(
                f"'{self.brew} {' '.join(args)}' failed: {result.stderr.strip()}"
            )
        return result.stdout.splitlines()

    def list_installed(self) -> list[str]:
        lines = self._lines("list", "--cask", "-1")
        return self.name_filter.select(lines, self.installed_pattern)

    def list_available(self) -> list[str]:
        lines = self._lines("search", "--cask", self.search_query)
        return self.name_filter.select(lines, self.available_pattern)

    def install(self, package: str) -> CommandResult:
        result = run_command(
            [self.brew, "install", "--cask", package], verbose=self.verbose
        )
        return CommandResult(
            ok=result.returncode == 0, output=result.stdout + result.stderr
        )

    def install_formula(self, formula: str) -> bool:
        print(f"⬇ {formula}...", flush=True)
        result = run_command([self.brew, "install", formula], verbose=self.verbose)
        if result.returncode != 0:
            print(f"✗ {formula}: {result.stderr.strip()}")
        return result.returncode == 0


__all__ = [
    "BrewRepository",
    "CommandResult",
    "NameFilter",
    "PackageRepository",
    "RegexFilter",
    "RipgrepFilter",
]
