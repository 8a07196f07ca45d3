"""Installed vs. available font casks."""

from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel

from .repository import PackageRepository


class ReviewState(BaseModel):
    """Accumulator threaded through the install and preview phases."""

    installed: list[str] = []
    available: list[str] = []
    missing: list[str] = []
    preview: list[str] = []
    failed: list[str] = []

    def exclude(self, package: str) -> None:
        """Drop a package from the preview candidates by exact name."""
        self.preview = [p for p in self.preview if p != package]


def compute_missing(available: Iterable[str], installed: Iterable[str]) -> list[str]:
    """Available names not installed, in sorted order."""
    have = set(installed)
    return [name for name in sorted(set(available)) if name not in have]


def take_inventory(repository: PackageRepository) -> ReviewState:
    installed = sorted(set(repository.list_installed()))
    available = sorted(set(repository.list_available()))
    missing = compute_missing(available, installed)

    print(f"📦 {len(installed)} installed | {len(available)} available | {len(missing)} missing")

    return ReviewState(
        installed=installed,
        available=available,
        missing=missing,
        # previously and newly installed casks are reviewed together
        preview=list(available),
    )


__all__ = ["ReviewState", "compute_missing", "take_inventory"]
