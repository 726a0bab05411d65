"""Markdown to HTML rendering for post content.

A renderer is assembled for every call from an explicit ``RenderOptions``
value, so rendering is a pure function of ``(content, options)``.
"""
from __future__ import annotations

import html
from dataclasses import dataclass

import mistune
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import TextLexer, get_lexer_by_name, guess_lexer
from pygments.util import ClassNotFound

__all__ = ["DEFAULT_RENDER_OPTIONS", "RenderOptions", "highlight_code", "markdown_to_html"]

LINK_ICON_HTML = (
    '<i class="material-icons" style="font-size: 16px; vertical-align: baseline">'
    "launch</i>"
)
MENTION_PREFIX = "<code>@#"


@dataclass(frozen=True)
class RenderOptions:
    """Configuration for a single markdown render.

    Attributes:
        hard_wrap: Render soft line breaks as ``<br />``.
        escape_html: Escape raw HTML found in the source.
        link_icon_html: Markup appended inside external links.
        highlight_css_class: Prefix for Pygments token CSS classes.
    """

    hard_wrap: bool = True
    escape_html: bool = True
    link_icon_html: str = LINK_ICON_HTML
    highlight_css_class: str = ""


DEFAULT_RENDER_OPTIONS = RenderOptions()


def highlight_code(code: str, lang: str | None, css_class_prefix: str = "") -> str:
    """Return ``code`` as Pygments token spans.

    The lexer named by ``lang`` is used when it exists; otherwise the
    language is guessed from the code itself, falling back to plain text.
    """
    lexer = None
    if lang:
        try:
            lexer = get_lexer_by_name(lang)
        except ClassNotFound:
            lexer = None
    if lexer is None:
        try:
            lexer = guess_lexer(code)
        except ClassNotFound:
            lexer = TextLexer()
    formatter = HtmlFormatter(nowrap=True, classprefix=css_class_prefix)
    return highlight(code, lexer, formatter)


class PostHTMLRenderer(mistune.HTMLRenderer):
    """HTML renderer with external-link decoration and highlighted code."""

    def __init__(self, options: RenderOptions) -> None:
        super().__init__(escape=options.escape_html)
        self.options = options

    def link(self, text: str, url: str, title: str | None = None) -> str:
        # [`@#name`](...) is an author mention, not an external link.
        if text.startswith(MENTION_PREFIX):
            mention = text.replace(MENTION_PREFIX, "@", 1).replace("</code>", "", 1)
            return mention + " "

        title_attr = f' title="{html.escape(title)}"' if title else ""
        return (
            f'<a target="_blank" href="{self.safe_url(url)}" rel="noopener noreferrer"'
            f"{title_attr}>{text}{self.options.link_icon_html}</a>"
        )

    def block_code(self, code: str, info: str | None = None) -> str:
        lang = info.strip().split(None, 1)[0] if info and info.strip() else None
        highlighted = highlight_code(code, lang, self.options.highlight_css_class)
        class_attr = f' class="language-{html.escape(lang)}"' if lang else ""
        return f"<pre><code{class_attr}>{highlighted}</code></pre>\n"


def markdown_to_html(content: str, options: RenderOptions = DEFAULT_RENDER_OPTIONS) -> str:
    """Render post markdown to HTML.

    HTML entities are decoded before parsing so that content escaped by a
    client renders as the characters the author typed.
    """
    markdown = mistune.create_markdown(
        renderer=PostHTMLRenderer(options),
        hard_wrap=options.hard_wrap,
        plugins=["strikethrough", "table", "url"],
    )
    return markdown(html.unescape(content))
