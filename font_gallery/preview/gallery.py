"""Static HTML gallery for picking font casks to uninstall."""

from __future__ import annotations

import html
import json
import webbrowser
from pathlib import Path
from string import Template
from typing import Iterable

from .builder import PackagePreview

PAGE_TEMPLATE = Template(
    """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>Font preview</title>
<style>
  body { font-family: -apple-system, Helvetica, Arial, sans-serif; margin: 2rem; background: #f4f4f4; color: #222; }
  header { position: sticky; top: 0; background: #f4f4f4; padding-bottom: 1rem; }
  textarea { width: 100%; height: 3.5rem; font-family: Menlo, monospace; font-size: 0.9rem; }
  button { margin-top: 0.5rem; padding: 0.4rem 1rem; }
  #copied { margin-left: 0.75rem; color: #2a7a2a; }
  section { background: #fff; border-radius: 8px; padding: 1rem; margin: 1rem 0; box-shadow: 0 1px 3px rgba(0, 0, 0, 0.15); }
  section h2 { font-size: 1.1rem; margin: 0 0 0.5rem; }
  section label { cursor: pointer; }
  section img { display: block; max-width: 100%; margin-top: 0.5rem; }
</style>
</head>
<body>
<header>
<h1>Font preview ($count packages)</h1>
<p>Tick the fonts to remove, then copy the command and run it in a terminal.</p>
<textarea id="command" readonly></textarea>
<button type="button" onclick="copyCommand()">Copy to clipboard</button><span id="copied" hidden>Copied!</span>
</header>
$sections
<script>
const UNINSTALL = $verb;
const selected = [];

function updateCommand() {
  const box = document.getElementById("command");
  box.value = selected.length ? UNINSTALL + " --cask " + selected.join(" ") : "";
}

function toggleFont(checkbox) {
  const index = selected.indexOf(checkbox.value);
  if (checkbox.checked && index === -1) {
    selected.push(checkbox.value);
  } else if (!checkbox.checked && index !== -1) {
    selected.splice(index, 1);
  }
  updateCommand();
}

// browsers may restore ticked boxes on reload or back navigation
function syncFromPage() {
  selected.length = 0;
  document.querySelectorAll('input[type="checkbox"]:checked').forEach(function (checkbox) {
    selected.push(checkbox.value);
  });
  updateCommand();
}

window.addEventListener("pageshow", syncFromPage);

function copyCommand() {
  const text = document.getElementById("command").value;
  navigator.clipboard.writeText(text).then(function () {
    const note = document.getElementById("copied");
    note.hidden = false;
    setTimeout(function () { note.hidden = true; }, 2000);
  });
}
</script>
</body>
</html>
"""
)

SECTION_TEMPLATE = Template(
    """<section id="$anchor">
<h2><label><input type="checkbox" value="$name" autocomplete="off" onchange="toggleFont(this)"> $name</label></h2>
<img src="$src" alt="$name preview">
</section>"""
)


def render_section(preview: PackagePreview) -> str:
    name = html.escape(preview.package, quote=True)
    return SECTION_TEMPLATE.substitute(
        anchor=name,
        name=name,
        src=html.escape(preview.image_path.absolute().as_uri(), quote=True),
    )


def render_gallery(previews: Iterable[PackagePreview], uninstall_verb: str = "brew uninstall") -> str:
    """Build the gallery page, one section per previewed package."""
    previews = list(previews)
    return PAGE_TEMPLATE.substitute(
        count=len(previews),
        sections="\n".join(render_section(p) for p in previews),
        # "</" inside a JS string would end the script element
        verb=json.dumps(uninstall_verb).replace("</", "<\\/"),
    )


def write_gallery(
    previews: Iterable[PackagePreview], output_path: Path, uninstall_verb: str = "brew uninstall"
) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_gallery(previews, uninstall_verb), encoding="utf-8")
    return output_path


def open_in_viewer(path: Path) -> bool:
    return webbrowser.open(path.resolve().as_uri())


__all__ = [
    "open_in_viewer",
    "render_gallery",
    "render_section",
    "write_gallery",
]
