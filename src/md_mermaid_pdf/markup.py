"""Markdown to HTML, with ```mermaid fences emitted as diagram containers."""

import html

from markdown_it import MarkdownIt
from markdown_it.common.utils import unescapeAll

MERMAID_LANGUAGE = "mermaid"


def _fence_language(info: str) -> str:
    info = unescapeAll(info).strip() if info else ""
    return info.split(maxsplit=1)[0] if info else ""


def _render_fence(tokens, idx, options, env) -> str:
    token = tokens[idx]
    lang = _fence_language(token.info)
    code = token.content

    # Mermaid source goes into the page unescaped
    if lang == MERMAID_LANGUAGE:
        return f'<div class="mermaid">\n{code.rstrip()}\n</div>\n'

    class_attr = f' class="language-{html.escape(lang)}"' if lang else ""
    return f"<pre><code{class_attr}>{html.escape(code, quote=False)}</code></pre>\n"


def build_markdown_parser() -> MarkdownIt:
    """Create a CommonMark parser with tables, autolinks and the diagram fence rule."""
    md = (
        MarkdownIt("commonmark", {"html": True, "linkify": True})
        .enable("table")
        .enable("strikethrough")
        .enable("linkify")
    )
    md.renderer.rules["fence"] = _render_fence
    return md


def markdown_to_html(markdown_source: str) -> str:
    return build_markdown_parser().render(markdown_source)
