"""
Snipd formatting - podcast episode and snip notes from user templates

Renders episodes and their snips into Markdown notes using user-authored
templates with ``{{variable}}`` placeholders and ``[[header]]`` markers,
plus custom frontmatter properties.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
