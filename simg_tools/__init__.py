"""SIMG content tooling package.

This package holds the authoring tools for the SIMG research group website.
Its main job is to turn event markdown files (or CLI options) into 1280x720
event thumbnails: an AI-generated PNG when the remote image service is
configured, otherwise a deterministic SVG "event card" rendered locally.

Package Structure
-----------------
- `pipeline/frontmatter/`:
    Frontmatter parsing for the site's event markdown files.
- `pipeline/image_backend/`:
    Configuration and asynchronous HTTP client for the remote image service.
- `pipeline/thumbnail_generator/`:
    Title layout, theme classification, SVG rendering, composition, batch
    runner and CLI.
- `config.py`: All configuration constants (paths, layout, colours, defaults).
- `exceptions.py`: Project-specific exception classes.

Examples
--------
>>> from simg_tools.pipeline.thumbnail_generator import cli
>>> # cli.main(["--all"])
"""
