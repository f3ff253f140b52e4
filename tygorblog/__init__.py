"""tygor blog builder.

This package renders the tygor blog: a handful of Markdown posts turned into
static HTML pages under ``blog/``, plus a cache-busting token kept in sync on
the site's landing page stylesheet link.

The main entry point is the CLI module, which exposes the ``build`` command.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
