"""Sphinx configuration for matplotguide docs."""

project = "matplotguide"
copyright = "2025, matplotguide developers"
author = "matplotguide developers"
release = "0.1.0"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "myst_parser",
]

templates_path = ["_templates"]
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

html_theme = "sphinx_rtd_theme"
html_static_path = ["_static"]

# MyST settings
myst_enable_extensions = ["colon_fence"]

autodoc_member_order = "bysource"
