"""
mkdocs-funcref — pipeline function reference partials for MkDocs.

Generates one documentation partial per pipeline function, per function
flag and per function group, plus the two reference index partials that
transclude them, ready to be imported by the documentation site.
"""

__version__ = "1.0.0"
