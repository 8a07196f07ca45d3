import pytest

from font_gallery.casks import GalleryConfig


@pytest.fixture
def config(tmp_path):
    return GalleryConfig(
        brew_prefix=tmp_path / "homebrew",
        preview_dir=tmp_path / "previews",
        error_log=tmp_path / "errors.log",
        html_path=tmp_path / "gallery.html",
        open_viewer=False,
    )
