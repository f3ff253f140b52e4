"""Keep the landing page stylesheet link in sync with the build token.

The site's top-level ``index.html`` is authored by hand, outside the blog
build. Its stylesheet link carries the same ``?v=`` cache-busting token as
the generated pages; this module rewrites that one attribute in place.
"""

from __future__ import annotations

import re
from pathlib import Path

import click


def stylesheet_href_pattern(stylesheet: str) -> re.Pattern[str]:
    """Return a regex matching ``href="<stylesheet>"`` with an optional ``?v=`` query.

    Args:
        stylesheet: Stylesheet filename as it appears in the href.

    Returns:
        Compiled pattern.
    """
    return re.compile(r'href="' + re.escape(stylesheet) + r'(\?v=[0-9A-Za-z]*)?"')


def replace_stylesheet_token(html: str, stylesheet: str, token: str) -> tuple[str, int]:
    """Replace the first stylesheet href in ``html`` with one carrying ``token``.

    Args:
        html: Document text.
        stylesheet: Stylesheet filename to look for.
        token: Fingerprint token.

    Returns:
        Tuple of (new text, number of replacements made: 0 or 1).
    """
    replacement = f'href="{stylesheet}?v={token}"'
    return stylesheet_href_pattern(stylesheet).subn(
        lambda _match: replacement, html, count=1
    )


def patch_stylesheet_token(path: Path, stylesheet: str, token: str) -> int:
    """Rewrite the stylesheet token in a file on disk.

    When the expected href is absent the file is left untouched and a
    warning is printed; a renamed or moved link would otherwise silently
    stop receiving new tokens.

    Args:
        path: HTML file to patch.
        stylesheet: Stylesheet filename referenced by the file.
        token: Fingerprint token.

    Returns:
        Number of replacements made (0 or 1).

    Raises:
        OSError: If the file cannot be read or written.
    """
    with open(path, encoding="utf-8") as f:
        original = f.read()
    patched, count = replace_stylesheet_token(original, stylesheet, token)
    if count == 0:
        click.echo(
            click.style(
                f'Warning: no href="{stylesheet}" found in {path}; left unchanged',
                fg="yellow",
            ),
            err=True,
        )
        return 0
    if patched != original:
        with open(path, "w", encoding="utf-8") as f:
            f.write(patched)
    return count
