from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as pkg_version

project = "htmlguard"
author = "htmlguard contributors"

try:
    release = pkg_version("htmlguard")
except PackageNotFoundError:
    release = "0.0.0"
version = release

extensions = [
    "myst_parser",
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.doctest",
]

# Allowlist tables read best in the order they are declared.
autodoc_member_order = "bysource"
autodoc_typehints = "description"
napoleon_google_docstring = True
napoleon_numpy_docstring = False

source_suffix = {".md": "markdown"}
exclude_patterns = ["_build"]

myst_enable_extensions = [
    "colon_fence",
    "deflist",
]

html_theme = "furo"
html_title = f"htmlguard {release}"
