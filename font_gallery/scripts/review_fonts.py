#!/usr/bin/env python3
"""Install missing monospace font casks and review them in an HTML gallery.

Usage:
    uv run python -m font_gallery.scripts.review_fonts [--toolchain pillow] [-y]

Environment:
    HOMEBREW_PREFIX, FONT_PREVIEW_DIR, FONT_PREVIEW_FG, FONT_PREVIEW_BG,
    FONT_PREVIEW_WIDTH, FONT_PREVIEW_POINTSIZE, FONT_PREVIEW_TOOLCHAIN
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable

from pydantic import BaseModel, ConfigDict, ValidationError

from font_gallery.casks import (
    BrewRepository,
    GalleryConfig,
    PackageRepository,
    PreflightError,
    Prompter,
    RegexFilter,
    RipgrepFilter,
    TerminalPrompter,
    ToolSpec,
    check_tools,
    install_missing,
    take_inventory,
)
from font_gallery.preview import (
    FdFontLocator,
    FontLocator,
    MagickRasterizer,
    PathFontLocator,
    PillowRasterizer,
    Rasterizer,
    RenderError,
    build_previews,
    open_in_viewer,
    write_gallery,
)


class Backends(BaseModel):
    """The external capabilities a review run depends on."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    repository: PackageRepository
    locator: FontLocator
    rasterizer: Rasterizer

    def required_tools(self) -> list[ToolSpec]:
        tools: list[ToolSpec] = []
        seen: set[str] = set()
        for tool in [
            *self.repository.required_tools,
            *self.rasterizer.required_tools,
            *self.locator.required_tools,
        ]:
            if tool.executable not in seen:
                seen.add(tool.executable)
                tools.append(tool)
        return tools


def make_backends(config: GalleryConfig) -> Backends:
    external = config.toolchain == "external"
    repository = BrewRepository(
        brew=config.brew,
        name_filter=RipgrepFilter() if external else RegexFilter(),
        installed_pattern=config.installed_pattern,
        available_pattern=config.available_pattern,
        search_query=config.search_query,
        verbose=config.verbose,
    )
    rasterizer_cls = MagickRasterizer if external else PillowRasterizer
    rasterizer = rasterizer_cls(
        foreground=config.foreground,
        background=config.background,
        width=config.width,
        pointsize=config.pointsize,
        gap=config.montage_gap,
        sample_text=config.sample_text,
    )
    locator = FdFontLocator() if external else PathFontLocator()
    return Backends(repository=repository, locator=locator, rasterizer=rasterizer)


def review(
    config: GalleryConfig,
    backends: Backends,
    prompter: Prompter,
    opener: Callable[[Path], object] = open_in_viewer,
) -> int:
    """Run the whole workflow and return the process exit status."""
    repository = backends.repository

    print("🔎 Checking required tools")
    try:
        check_tools(backends.required_tools(), prompter, repository.install_formula)
    except PreflightError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    state = take_inventory(repository)

    if config.skip_install:
        state.preview = list(state.installed)
    elif not state.missing:
        print(f"✅ All {len(state.available)} available fonts are already installed")
        if not prompter.confirm(
            f"Preview all {len(state.available)} available fonts?", default=True
        ):
            print("Nothing to do.")
            return 0
        state.preview = list(state.available)
    else:
        print("\n📋 Missing:")
        for name in state.missing:
            print(f"    {name}")
        if not prompter.confirm(
            f"Install {len(state.missing)} missing font casks?", default=True
        ):
            print("Declined, nothing to do.")
            return 0

        stats = install_missing(state, repository, config.error_log)
        if stats.failed:
            print(f"⚠️  {stats.failed} installs failed, details in {config.error_log}")

        if stats.success == 0:
            if not prompter.confirm(
                "No fonts were installed. Preview all installed fonts instead?"
            ):
                print("Nothing to do.")
                return 0
            state.preview = sorted(set(repository.list_installed()))

    try:
        previews = build_previews(
            state.preview,
            caskroom=config.caskroom,
            preview_dir=config.preview_dir,
            locator=backends.locator,
            rasterizer=backends.rasterizer,
        )
    except RenderError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    if not previews:
        print("❌ Nothing to preview", file=sys.stderr)
        return 1

    html_path = write_gallery(previews, config.html_path, config.uninstall_verb)
    print(f"\n✅ {len(previews)}/{len(state.preview)} previews in {html_path}")

    if config.open_viewer:
        opener(html_path)

    print("👉 Tick the fonts to remove, copy the command and run it in a terminal.")
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Install missing monospace font casks and review them in an HTML gallery"
    )
    parser.add_argument(
        "--toolchain",
        choices=["external", "pillow"],
        default=None,
        help="external: ImageMagick + ripgrep + fd; pillow: render in-process "
        "(default: $FONT_PREVIEW_TOOLCHAIN or external)",
    )
    parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Answer yes to every prompt",
    )
    parser.add_argument(
        "--skip-install",
        action="store_true",
        help="Preview the installed fonts without installing missing ones",
    )
    parser.add_argument(
        "--no-open",
        action="store_true",
        help="Do not open the gallery in the default viewer",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="HTML gallery path",
    )
    parser.add_argument(
        "--preview-dir",
        type=Path,
        default=None,
        help="Directory for preview images (default: $FONT_PREVIEW_DIR)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Echo every brew command before running it",
    )
    args = parser.parse_args()

    try:
        config = GalleryConfig.from_env(
            toolchain=args.toolchain,
            html_path=args.output,
            preview_dir=args.preview_dir,
            assume_yes=args.yes,
            skip_install=args.skip_install,
            open_viewer=not args.no_open,
            verbose=args.verbose,
        )
    except ValidationError as e:
        print(f"❌ Invalid configuration:\n{e}", file=sys.stderr)
        sys.exit(1)

    try:
        code = review(config, make_backends(config), TerminalPrompter(config.assume_yes))
    except RuntimeError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        code = 1
    sys.exit(code)


if __name__ == "__main__":
    main()
