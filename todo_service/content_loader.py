"""Loading page files and splicing components into HTML."""

from __future__ import annotations

from pathlib import Path

from .state import StrPath

DEFAULT_COMPONENTS_DIR = "./templates/components"


def read_file(file_path: StrPath) -> str:
    """Return the whole text of a file; raise OSError if it cannot be read."""
    with open(file_path, encoding="utf-8", newline="") as handle:
        return handle.read()


def add_component(
    component_tag: str,
    html_data: str,
    components_dir: StrPath = DEFAULT_COMPONENTS_DIR,
) -> str:
    """Replace the component's <TAG>_HTML and <TAG>_CSS markers with its files.

    The component's files are <tag>.html and <tag>.css in components_dir.
    The HTML marker is replaced first, then the CSS marker.
    """
    css_tag = component_tag.upper() + "_CSS"
    html_tag = component_tag.upper() + "_HTML"
    directory = Path(components_dir)
    name = component_tag.lower()

    css_loaded = read_file(directory / f"{name}.css")
    html_loaded = read_file(directory / f"{name}.html")

    html_data = html_data.replace(html_tag, html_loaded)
    return html_data.replace(css_tag, css_loaded)