from __future__ import annotations

from .config import GalleryConfig, IntField, SAMPLE_TEXT, Toolchain, parse_int
from .installer import InstallStats, install_missing
from .inventory import ReviewState, compute_missing, take_inventory
from .repository import (
    BrewRepository,
    CommandResult,
    NameFilter,
    PackageRepository,
    RegexFilter,
    RipgrepFilter,
)
from .tools import (
    BREW,
    FD,
    IMAGEMAGICK,
    RIPGREP,
    PreflightError,
    Prompter,
    TerminalPrompter,
    ToolSpec,
    check_tools,
    run_command,
)

__all__ = [
    "BREW",
    "BrewRepository",
    "CommandResult",
    "FD",
    "GalleryConfig",
    "IMAGEMAGICK",
    "InstallStats",
    "IntField",
    "NameFilter",
    "PackageRepository",
    "PreflightError",
    "Prompter",
    "RIPGREP",
    "RegexFilter",
    "ReviewState",
    "RipgrepFilter",
    "SAMPLE_TEXT",
    "TerminalPrompter",
    "ToolSpec",
    "Toolchain",
    "check_tools",
    "compute_missing",
    "install_missing",
    "parse_int",
    "run_command",
    "take_inventory",
]
