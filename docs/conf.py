"""Sphinx configuration for genro-http documentation."""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path("..").resolve() / "src"))

from genro_http import __version__  # noqa: E402

# Project information
project = "genro-http"
copyright = "2025, Softwell S.r.l."
author = "Softwell S.r.l."
release = __version__

# Extensions
extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinx.ext.intersphinx",
    "sphinx_autodoc_typehints",
    "myst_parser",
]

# Sources
source_suffix = {".rst": "restructuredtext", ".md": "markdown"}
root_doc = "index"

# Templates
templates_path = ["_templates"]
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

# HTML output
html_theme = "sphinx_rtd_theme"

# Autodoc
autodoc_member_order = "bysource"
autodoc_default_options = {"members": True, "show-inheritance": True}

# Intersphinx
intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
}

# Napoleon settings
napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_include_init_with_doc = True
