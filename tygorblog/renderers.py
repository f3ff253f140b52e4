"""Markdown rendering for blog posts.

Posts are authored content, so raw HTML in the source passes through
untouched. Footnotes are collected and rendered at the end of the fragment.

Key classes:
- MarkdownRenderer: Renders a Markdown document to an HTML fragment.
"""

from __future__ import annotations

import mistune
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

PLUGINS = ["strikethrough", "footnotes", "table", "url"]


class _HighlightRenderer(mistune.HTMLRenderer):
    """HTML renderer with Pygments syntax highlighting for fenced code."""

    def __init__(self):
        super().__init__(escape=False)

    def block_code(self, code: str, info: str | None = None) -> str:
        """Render a code block with Pygments syntax highlighting.

        Args:
            code: The code content.
            info: Language identifier (e.g., 'go', 'typescript').

        Returns:
            HTML string with highlighted code.
        """
        lang = info.split()[0] if info and info.strip() else None
        if lang:
            try:
                lexer = get_lexer_by_name(lang, stripall=True)
            except ClassNotFound:
                lexer = None
            if lexer is not None:
                formatter = HtmlFormatter(nowrap=False, cssclass="highlight")
                return highlight(code, lexer, formatter)
        escaped = code.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
        lang_class = f' class="language-{lang}"' if lang else ""
        return f"<pre><code{lang_class}>{escaped}</code></pre>\n"


class MarkdownRenderer:
    """Renders Markdown content to an HTML fragment.

    A fresh mistune parser is built per call because the footnotes plugin
    keeps per-document state.
    """

    def render(self, content: str) -> str:
        """Render Markdown content to HTML.

        Args:
            content: Markdown source content.

        Returns:
            Rendered HTML fragment.
        """
        markdown = mistune.create_markdown(renderer=_HighlightRenderer(), plugins=PLUGINS)
        return markdown(content)
