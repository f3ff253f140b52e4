"""Page templating for the tygor blog.

This module uses Jinja2 to wrap rendered post fragments and the post list
into complete HTML documents. Both documents share the same head, header and
footer; they differ only in body and in how deep below the site root they
are written, which decides the relative prefix for shared assets.

Key items:
- PageTemplater: Renders post pages and the blog index page.
- asset_prefix: Relative path from an output file back to the site root.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader
from markupsafe import Markup

from .content import Post

__all__ = ["FONTS_URL", "POST_DEPTH", "INDEX_DEPTH", "PageTemplater", "asset_prefix"]

_TEMPLATES_DIR = Path(__file__).parent / "templates"

FONTS_URL = (
    "https://fonts.googleapis.com/css2?family=Noto+Sans:wght@400;700"
    "&family=JetBrains+Mono:wght@400;600&display=swap"
)

# Must match where build.py writes: blog/<slug>/index.html and blog/index.html.
POST_DEPTH = 2
INDEX_DEPTH = 1


def asset_prefix(depth: int) -> str:
    """Return the relative prefix from a page ``depth`` levels down to the root.

    Args:
        depth: Number of directories between the site root and the page.

    Returns:
        ``..`` for depth 1, ``../..`` for depth 2, and so on.

    Raises:
        ValueError: If depth is less than 1.

    Examples:
        >>> asset_prefix(2)
        '../..'
    """
    if depth < 1:
        raise ValueError(f"depth must be at least 1, got {depth}")
    return "/".join([".."] * depth)


class PageTemplater:
    """Renders complete HTML documents for posts and the post index.

    Rendering is pure: the same inputs always give the same document.

    Attributes:
        site: Site settings (``site_name``, ``repo_url``, ``license``,
            ``logo_icon``, ``logo_text``, ``stylesheets``) from the loaded
            configuration.
        token: Cache-busting fingerprint appended to stylesheet links.
        env: Jinja2 environment over the packaged templates.
    """

    def __init__(
        self,
        site: Mapping[str, Any],
        token: str,
        templates_dir: Path | None = None,
    ):
        """Initialize the templater.

        Args:
            site: Site settings mapping.
            token: Fingerprint token shared by every page of this build.
            templates_dir: Optional override for the template directory.
        """
        self.site = site
        self.token = token
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir or _TEMPLATES_DIR)),
            # Titles, sublines and dates are authored content.
            autoescape=False,
            keep_trailing_newline=True,
        )

    def _context(self, depth: int) -> dict[str, Any]:
        return {
            "site": self.site,
            "prefix": asset_prefix(depth),
            "token": self.token,
            "fonts_url": FONTS_URL,
            "stylesheets": list(self.site.get("stylesheets", [])),
        }

    def render_post(self, post: Post, content: str, depth: int = POST_DEPTH) -> str:
        """Render a full post page.

        Args:
            post: Post metadata.
            content: Rendered HTML fragment of the post body.
            depth: Directory levels between the site root and the page.

        Returns:
            Complete HTML document.
        """
        template = self.env.get_template("post.html.jinja")
        return template.render(post=post, content=Markup(content), **self._context(depth))

    def render_index(self, posts: Iterable[Post], depth: int = INDEX_DEPTH) -> str:
        """Render the blog index listing every post in the given order.

        Args:
            posts: Posts to list.
            depth: Directory levels between the site root and the page.

        Returns:
            Complete HTML document.
        """
        listed: Sequence[Post] = list(posts)
        template = self.env.get_template("index.html.jinja")
        return template.render(posts=listed, **self._context(depth))
