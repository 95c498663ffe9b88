"""Frontmatter pipeline package.

Public API for reading the ``---`` delimited header of the website's event
markdown files and for locating those files on disk. Consumers should import
from this package rather than from its submodules.

Examples
--------
>>> from simg_tools.pipeline.frontmatter import parse_frontmatter, parse_list_value
>>> fm = parse_frontmatter('---\\ntags: ["AI", "GPU"]\\n---\\n')
>>> parse_list_value(fm["tags"])
['AI', 'GPU']
"""

from .file_handler import find_markdown_files, resolve_language_dirs
from .reader import parse_frontmatter, parse_list_value, read_frontmatter

__all__ = [
    "find_markdown_files",
    "parse_frontmatter",
    "parse_list_value",
    "read_frontmatter",
    "resolve_language_dirs",
]
