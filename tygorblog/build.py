"""Site building for the tygor blog.

This module contains the build sequence: load configuration, fingerprint the
stylesheets, render and write each post, write the post index, and finally
update the cache-busting token on the landing page.

Key functions:
- build_site: Main function to build the blog.
- load_config: Loads site configuration from blog.yaml.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import click
import yaml

from .content import DEFAULT_POSTS, ConfigError, Post, posts_from_config, validate_posts
from .fingerprint import compute_fingerprint
from .patcher import patch_stylesheet_token
from .renderers import MarkdownRenderer
from .templates import INDEX_DEPTH, POST_DEPTH, PageTemplater
from .utils import display_path, write_document


class BuildError(Exception):
    """Error during site build with file context.

    Attributes:
        source_path: Path to the source file that caused the error.
        message: Human-readable error message.
        original_error: The original exception that was caught.
    """

    def __init__(
        self,
        source_path: Path,
        message: str,
        original_error: Exception | None = None,
    ):
        self.source_path = source_path
        self.message = message
        self.original_error = original_error
        super().__init__(f"{source_path}: {message}")


# Post URLs (Post.url) assume this directory.
BLOG_DIR = "blog"

DEFAULT_CONFIG = {
    "site_name": "tygor",
    "repo_url": "https://github.com/broady/tygor",
    "license": "MIT License",
    "logo_icon": "tygor-tiger.svg",
    "logo_text": "tygor-text.svg",
    "stylesheets": ["landing.css", "blog.css"],
    "patch_target": "index.html",
    "patch_stylesheet": "landing.css",
}


@dataclass
class BuildResult:
    """Result of a blog build.

    Attributes:
        posts: Posts rendered, in index order.
        written: Files written, in write order.
        token: Stylesheet fingerprint used for every page.
        patched: Whether the landing page token was replaced.
    """

    posts: list[Post]
    written: list[Path]
    token: str
    patched: bool


def load_config(project_root: Path) -> dict[str, Any]:
    """Load site configuration from blog.yaml.

    Args:
        project_root: Root directory of the site.

    Returns:
        Dictionary containing configuration values with defaults applied.
        ``posts`` always holds a validated list of Post objects.

    Raises:
        ConfigError: If blog.yaml cannot be parsed or a section is malformed.
    """
    config_path = project_root / "blog.yaml"
    config: dict[str, Any] = DEFAULT_CONFIG.copy()
    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            try:
                loaded = yaml.safe_load(f) or {}
            except (yaml.YAMLError, UnicodeDecodeError) as exc:
                raise ConfigError(f"Cannot parse {config_path}: {exc}") from exc
            if isinstance(loaded, dict):
                config.update(loaded)
    entries = config.get("posts")
    if entries is None:
        config["posts"] = validate_posts(DEFAULT_POSTS)
    elif isinstance(entries, list):
        config["posts"] = posts_from_config(entries)
    else:
        raise ConfigError("posts must be a list")
    stylesheets = config.get("stylesheets")
    if not isinstance(stylesheets, list) or not stylesheets:
        raise ConfigError("stylesheets must be a non-empty list")
    return config


def build_site(project_root: Path, config: dict[str, Any] | None = None) -> BuildResult:
    """Build the blog pages and refresh the landing page token.

    Any I/O failure aborts the build. Hashing runs first, so a missing
    stylesheet aborts before anything is written.

    Args:
        project_root: Site root holding the stylesheets and landing page.
        config: Optional preloaded configuration; read from blog.yaml if omitted.

    Returns:
        BuildResult describing what was written.

    Raises:
        BuildError: If a post source cannot be read or decoded, or the
            landing page is not valid UTF-8.
        OSError: On stylesheet, write, or landing page errors.
    """
    if config is None:
        config = load_config(project_root)
    posts: list[Post] = list(config["posts"])
    token = compute_fingerprint(project_root / name for name in config["stylesheets"])

    templater = PageTemplater(config, token)
    renderer = MarkdownRenderer()
    blog_dir = project_root / BLOG_DIR
    written: list[Path] = []

    for post in posts:
        source = post.resolve_source(project_root)
        try:
            with open(source, encoding="utf-8") as f:
                markdown = f.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise BuildError(source, f"Cannot read post source: {exc}", exc) from exc
        html = templater.render_post(post, renderer.render(markdown), depth=POST_DEPTH)
        target = write_document(blog_dir / post.slug / "index.html", html)
        written.append(target)
        click.echo(f"Built: {display_path(target, project_root)}")

    index_path = write_document(
        blog_dir / "index.html", templater.render_index(posts, depth=INDEX_DEPTH)
    )
    written.append(index_path)
    click.echo(f"Built: {display_path(index_path, project_root)}")

    landing = project_root / config["patch_target"]
    try:
        count = patch_stylesheet_token(landing, config["patch_stylesheet"], token)
    except UnicodeDecodeError as exc:
        raise BuildError(landing, f"Landing page is not valid UTF-8: {exc}", exc) from exc
    patched = count > 0
    if patched:
        click.echo(
            f"Updated: {display_path(landing, project_root)} (cache bust: {token})"
        )
    return BuildResult(posts=posts, written=written, token=token, patched=patched)
