"""Post records for the tygor blog.

This module holds the Post dataclass and the in-source table of posts that
the builder renders. Posts are authored configuration: they are defined
before a build starts and never mutated during one.

Key items:
- Post: Dataclass describing one blog entry.
- DEFAULT_POSTS: The hand-maintained list of published posts.
- posts_from_config: Build Post records from a ``posts`` config section.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

SLUG_RE = re.compile(r"^[a-z0-9][a-z0-9._-]*$")


class ConfigError(ValueError):
    """Raised when the post table or site configuration is malformed."""


@dataclass(frozen=True)
class Post:
    """Represents one blog entry.

    Attributes:
        slug: Output directory name and URL path segment.
        title: Display title, inserted into HTML as-is.
        date: Free-text display date (may be a placeholder like "Draft").
        source_path: Markdown source, relative paths resolve against the site root.
        subline: Optional short description shown on the index page.
    """

    slug: str
    title: str
    date: str
    source_path: Path
    subline: str | None = None

    @property
    def url(self) -> str:
        """Root-relative URL of the rendered post."""
        return f"/blog/{self.slug}/"

    def resolve_source(self, root: Path) -> Path:
        """Return the Markdown source path anchored at the site root."""
        if self.source_path.is_absolute():
            return self.source_path
        return root / self.source_path


DEFAULT_POSTS: tuple[Post, ...] = (
    Post(
        slug="hello-tygor",
        title="Hello tygor",
        subline="Type-Safe RPC from Go to TypeScript",
        date="Draft, planned to publish soon",
        source_path=Path("..") / ".." / "BLOG_01.md",
    ),
)


def validate_posts(posts: Iterable[Post]) -> list[Post]:
    """Check slugs are filesystem/URL safe and unique.

    Args:
        posts: Posts in display order.

    Returns:
        The posts as a list, order preserved.

    Raises:
        ConfigError: If a slug is malformed or used twice.
    """
    seen: set[str] = set()
    result = []
    for post in posts:
        if not SLUG_RE.match(post.slug):
            raise ConfigError(f"Invalid slug {post.slug!r}")
        if post.slug in seen:
            raise ConfigError(f"Duplicate slug {post.slug!r}")
        seen.add(post.slug)
        result.append(post)
    return result


def posts_from_config(entries: Iterable[Mapping[str, Any]]) -> list[Post]:
    """Build Post records from the ``posts`` section of blog.yaml.

    Each entry needs ``slug``, ``title``, ``date`` and ``source`` (or
    ``source_path``); ``subline`` is optional.

    Args:
        entries: Sequence of mappings loaded from YAML.

    Returns:
        Validated list of Post objects in the given order.

    Raises:
        ConfigError: If an entry is not a mapping or misses a required key.
    """
    posts = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            raise ConfigError(f"posts[{index}] must be a mapping")
        source = entry.get("source", entry.get("source_path"))
        missing = [key for key in ("slug", "title", "date") if not entry.get(key)]
        if not source:
            missing.append("source")
        if missing:
            raise ConfigError(f"posts[{index}] is missing {', '.join(missing)}")
        subline = entry.get("subline")
        posts.append(
            Post(
                slug=str(entry["slug"]),
                title=str(entry["title"]),
                date=str(entry["date"]),
                source_path=Path(str(source)),
                subline=str(subline) if subline else None,
            )
        )
    return validate_posts(posts)
