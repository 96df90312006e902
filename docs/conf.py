# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

import sys
from pathlib import Path

# Make the src/ layout importable for autodoc without installing the package.
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

# -- Project information -----------------------------------------------------

project = 'quantarray'
author = 'quantarray developers'
copyright = '2025, quantarray developers'
html_title = 'quantarray Docs'

# -- General configuration ---------------------------------------------------

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
    'sphinx.ext.viewcode',
    'sphinx_copybutton',
    "myst_parser"
]

autodoc_member_order = "bysource"
autodoc_typehints = "description"
napoleon_numpy_docstring = True
napoleon_google_docstring = False

templates_path = []
exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store']

# -- Options for HTML output -------------------------------------------------

html_theme = "furo"

html_theme_options = {
    "sidebar_hide_name": False,
    "navigation_with_keys": True,
    "light_css_variables": {
        "color-brand-primary": "#2f7d6d",
        "color-brand-content": "#1d4f45",
    },
    "dark_css_variables": {
        "color-brand-primary": "#6fc2ad",
        "color-brand-content": "#a9e0d2",
    },
}

source_suffix = {
    ".rst": "restructuredtext",
    ".md": "markdown",
}
