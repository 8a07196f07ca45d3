"""Install missing font casks, one at a time."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel

from .inventory import ReviewState
from .repository import PackageRepository


class InstallStats(BaseModel):
    """Install statistics."""

    total: int = 0
    success: int = 0
    failed: int = 0

    @property
    def success_rate(self) -> float:
        return (self.success / self.total * 100) if self.total else 0.0


def install_missing(
    state: ReviewState, repository: PackageRepository, error_log: Path
) -> InstallStats:
    """Install every missing cask, logging output and excluding failures from preview.

    The error log is truncated first; each install appends its output.
    """
    error_log.parent.mkdir(parents=True, exist_ok=True)
    error_log.write_text("", encoding="utf-8")

    stats = InstallStats(total=len(state.missing))

    for package in state.missing:
        print(f"⬇ {package}...", end=" ", flush=True)
        result = repository.install(package)

        with error_log.open("a", encoding="utf-8") as log:
            log.write(f"==> {package}\n{result.output}")
            if result.output and not result.output.endswith("\n"):
                log.write("\n")

        if result.ok:
            print("✓")
            stats.success += 1
        else:
            print(f"✗ failed (see {error_log})")
            stats.failed += 1
            state.failed.append(package)
            state.exclude(package)

    print(f"\n✓ Installed: {stats.success} | ✗ Failed: {stats.failed}")
    print(f"📊 Success rate: {stats.success_rate:.1f}%")
    return stats


__all__ = ["InstallStats", "install_missing"]
