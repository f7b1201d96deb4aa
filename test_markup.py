#!/usr/bin/env python3
"""Tests for Markdown to HTML conversion and the mermaid fence rule."""

from md_mermaid_pdf.markup import markdown_to_html


def test_mermaid_fence_becomes_diagram_container():
    html = markdown_to_html("```mermaid\ngraph TD\nA-->B\n```\n")

    assert '<div class="mermaid">\ngraph TD\nA-->B\n</div>' in html
    assert "<pre>" not in html


def test_mermaid_content_is_not_escaped():
    html = markdown_to_html("```mermaid\ngraph LR\nA[\"<b>x</b>\"] --> B & C\n```\n")

    assert 'A["<b>x</b>"] --> B & C' in html
    assert "&lt;" not in html
    assert "&amp;" not in html


def test_other_language_fence_is_escaped_code_block():
    html = markdown_to_html("```python\nif a < b and c > d:\n    pass\n```\n")

    assert '<pre><code class="language-python">' in html
    assert "if a &lt; b and c &gt; d:" in html
    assert 'class="mermaid"' not in html


def test_fence_without_language_has_no_class():
    html = markdown_to_html("```\nplain & simple\n```\n")

    assert "<pre><code>plain &amp; simple\n</code></pre>" in html


def test_language_tag_uses_first_word_of_info_string():
    html = markdown_to_html("```mermaid title=flow\ngraph TD\nA-->B\n```\n")

    assert '<div class="mermaid">' in html


def test_stock_markdown_is_untouched():
    html = markdown_to_html("# Title\n\n| a | b |\n|---|---|\n| 1 | 2 |\n\n*em*\n")

    assert "<h1>Title</h1>" in html
    assert "<table>" in html
    assert "<em>em</em>" in html


def test_mixed_document_keeps_order():
    source = (
        "Intro\n\n"
        "```mermaid\nsequenceDiagram\nA->>B: hi\n```\n\n"
        "```js\nconst x = 1;\n```\n"
    )
    html = markdown_to_html(source)

    assert html.index('class="mermaid"') < html.index('class="language-js"')


def test_fence_info_escapes_are_unescaped():
    html = markdown_to_html("```c\\+\\+\nint x;\n```\n")

    assert '<pre><code class="language-c++">int x;' in html


def test_bare_urls_are_autolinked():
    html = markdown_to_html("See https://example.com for details.\n")

    assert '<a href="https://example.com">https://example.com</a>' in html
