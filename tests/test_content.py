from pathlib import Path

import pytest

from tygorblog.build import load_config
from tygorblog.content import (
    DEFAULT_POSTS,
    ConfigError,
    Post,
    posts_from_config,
    validate_posts,
)


def test_default_posts_table():
    assert [p.slug for p in DEFAULT_POSTS] == ["hello-tygor"]
    post = DEFAULT_POSTS[0]
    assert post.title == "Hello tygor"
    assert post.subline == "Type-Safe RPC from Go to TypeScript"
    assert post.url == "/blog/hello-tygor/"


def test_resolve_source_relative_and_absolute(tmp_path):
    post = Post(slug="a", title="A", date="d", source_path=Path("posts/a.md"))
    assert post.resolve_source(tmp_path) == tmp_path / "posts" / "a.md"
    absolute = tmp_path / "elsewhere.md"
    post = Post(slug="a", title="A", date="d", source_path=absolute)
    assert post.resolve_source(Path("/ignored")) == absolute


def test_posts_from_config_keeps_order_and_optional_subline():
    posts = posts_from_config(
        [
            {"slug": "one", "title": "One", "date": "2024-01-01", "source": "one.md",
             "subline": "First"},
            {"slug": "two", "title": "Two", "date": "Draft", "source_path": "two.md"},
        ]
    )
    assert [p.slug for p in posts] == ["one", "two"]
    assert posts[0].subline == "First"
    assert posts[1].subline is None
    assert posts[1].source_path == Path("two.md")


def test_posts_from_config_reports_missing_keys():
    with pytest.raises(ConfigError, match="missing title, source"):
        posts_from_config([{"slug": "one", "date": "x"}])
    with pytest.raises(ConfigError, match="must be a mapping"):
        posts_from_config(["one"])


def test_validate_posts_rejects_bad_and_duplicate_slugs():
    good = Post(slug="hello-world", title="t", date="d", source_path=Path("x.md"))
    with pytest.raises(ConfigError, match="Duplicate"):
        validate_posts([good, good])
    bad = Post(slug="../escape", title="t", date="d", source_path=Path("x.md"))
    with pytest.raises(ConfigError, match="Invalid slug"):
        validate_posts([bad])
    with pytest.raises(ConfigError):
        validate_posts([Post(slug="Hello World", title="t", date="d", source_path=Path("x"))])


def test_load_config_defaults(tmp_path):
    config = load_config(tmp_path)
    assert config["site_name"] == "tygor"
    assert config["stylesheets"] == ["landing.css", "blog.css"]
    assert config["patch_target"] == "index.html"
    assert config["posts"] == list(DEFAULT_POSTS)


def test_load_config_overrides_from_yaml(tmp_path):
    (tmp_path / "blog.yaml").write_text(
        "site_name: acme\n"
        "posts:\n"
        "  - slug: hello-world\n"
        "    title: Hello World\n"
        "    date: '2024-01-01'\n"
        "    source: hello.md\n",
        encoding="utf-8",
    )
    config = load_config(tmp_path)
    assert config["site_name"] == "acme"
    assert config["repo_url"] == "https://github.com/broady/tygor"
    assert config["posts"] == [
        Post(slug="hello-world", title="Hello World", date="2024-01-01",
             source_path=Path("hello.md"))
    ]


def test_load_config_ignores_non_mapping_yaml(tmp_path):
    (tmp_path / "blog.yaml").write_text("- just\n- a list\n", encoding="utf-8")
    assert load_config(tmp_path)["site_name"] == "tygor"


def test_load_config_rejects_bad_sections(tmp_path):
    (tmp_path / "blog.yaml").write_text("posts: nope\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="posts must be a list"):
        load_config(tmp_path)
    (tmp_path / "blog.yaml").write_text("stylesheets: []\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="stylesheets"):
        load_config(tmp_path)


def test_load_config_wraps_yaml_syntax_errors(tmp_path):
    (tmp_path / "blog.yaml").write_text("posts: [\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Cannot parse"):
        load_config(tmp_path)
