"""Sphinx configuration for the Urlsplit documentation."""

import os
import sys

sys.path.insert(0, os.path.abspath("../../src"))

from urlsplit.version import __version__  # noqa: E402

project = "Urlsplit"
author = "Urlsplit contributors"
copyright = f"2026, {author}"
version = ".".join(__version__.split(".")[:2])
release = __version__

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinx.ext.intersphinx",
    "myst_parser",
]

exclude_patterns = ["_build"]

# Markdown sources
myst_heading_anchors = 2
myst_enable_extensions = ["colon_fence", "deflist"]

# Docstrings use Google style sections (Args, Returns, Raises)
napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_use_rtype = False

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "jinja": ("https://jinja.palletsprojects.com/en/stable/", None),
}

# urlsplit re-exports its public names, so each one is documented twice
suppress_warnings = ["ref.python"]

autodoc_default_options = {
    "members": True,
    "show-inheritance": True,
}
autodoc_typehints = "description"
autodoc_member_order = "bysource"

# `sphinx-build -b man` produces urlsplit(1)
man_pages = [
    ("index", "urlsplit", "split a URL into shell variables", [author], 1),
]

html_theme = "furo"
html_title = f"Urlsplit {release}"
