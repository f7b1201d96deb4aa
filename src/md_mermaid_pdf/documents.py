"""HTML documents handed to the headless browser for rendering."""

from typing import Optional

from .config import MERMAID_SCRIPT_URL

DEFAULT_CSS = """
  body {
    font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif;
    line-height: 1.6;
    color: #333;
    max-width: 900px;
    margin: 0 auto;
    padding: 2rem;
  }

  h1, h2, h3, h4, h5, h6 {
    margin-top: 1.5em;
    margin-bottom: 0.5em;
    font-weight: 600;
  }

  h1 { font-size: 2.5em; border-bottom: 2px solid #eee; padding-bottom: 0.3em; }
  h2 { font-size: 2em; border-bottom: 1px solid #eee; padding-bottom: 0.3em; }
  h3 { font-size: 1.5em; }

  code {
    background-color: #f6f8fa;
    padding: 0.2em 0.4em;
    border-radius: 3px;
    font-family: 'SFMono-Regular', Consolas, 'Liberation Mono', Menlo, monospace;
    font-size: 0.9em;
  }

  pre {
    background-color: #f6f8fa;
    padding: 1em;
    border-radius: 6px;
    overflow-x: auto;
  }

  pre code {
    background-color: transparent;
    padding: 0;
  }

  blockquote {
    border-left: 4px solid #ddd;
    padding-left: 1em;
    color: #666;
    margin-left: 0;
  }

  table {
    border-collapse: collapse;
    width: 100%;
    margin: 1em 0;
  }

  table th, table td {
    border: 1px solid #ddd;
    padding: 0.5em;
    text-align: left;
  }

  table th {
    background-color: #f6f8fa;
    font-weight: 600;
  }

  .mermaid {
    display: flex;
    justify-content: center;
    margin: 2em 0;
  }
"""


def _mermaid_script() -> str:
    return f'''<script type="module">
    import mermaid from '{MERMAID_SCRIPT_URL}';
    mermaid.initialize({{
      startOnLoad: true,
      theme: 'default',
      securityLevel: 'loose'
    }});
  </script>'''


def create_html_document(body_html: str, custom_css: Optional[str] = None) -> str:
    """Wrap converted Markdown in a page that loads Mermaid.

    ``custom_css`` is appended after the default rules unmodified, so it
    wins wherever selectors tie.
    """
    return f'''<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Markdown to PDF</title>
  {_mermaid_script()}
  <style>
    {DEFAULT_CSS}
    {custom_css or ''}
  </style>
</head>
<body>
  {body_html}
</body>
</html>'''


def create_mermaid_only_html(mermaid_code: str) -> str:
    """Generate a page holding a single centered diagram."""
    return f'''<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Mermaid Diagram</title>
  {_mermaid_script()}
  <style>
    body {{
      margin: 0;
      padding: 20px;
      display: flex;
      justify-content: center;
      align-items: center;
      min-height: 100vh;
      background: white;
    }}
    .mermaid {{
      max-width: 100%;
    }}
  </style>
</head>
<body>
  <div class="mermaid">
{mermaid_code}
  </div>
</body>
</html>'''
