"""Filesystem helpers for the tygor blog builder.

Functions:
    write_document: Write a rendered document, creating parent directories.
    display_path: Render a path relative to the site root for console output.
"""

from __future__ import annotations

from pathlib import Path


def write_document(path: Path, html: str) -> Path:
    """Write a rendered document, creating parent directories as needed.

    Existing files are overwritten. The write is not atomic; a crash may
    leave a partial file, which the next build replaces.

    Args:
        path: Target file path.
        html: Document text.

    Returns:
        The path written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(html)
    return path


def display_path(path: Path, root: Path) -> str:
    """Return ``path`` as a root-relative URL-style string.

    Examples:
        >>> display_path(Path("/site/blog/index.html"), Path("/site"))
        '/blog/'
    """
    try:
        rel = path.relative_to(root)
    except ValueError:
        return str(path)
    parts = list(rel.parts)
    if parts and parts[-1] == "index.html" and len(parts) > 1:
        return "/" + "/".join(parts[:-1]) + "/"
    return "/" + "/".join(parts)
