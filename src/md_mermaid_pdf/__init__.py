"""
Markdown Mermaid PDF
====================

MCP server that renders Markdown documents and Mermaid diagrams through
headless Chromium.

Tools:
- convert_md_to_pdf: Markdown with ```mermaid blocks -> PDF
- convert_mermaid_to_png: Mermaid source -> PNG
- convert_mermaid_to_pdf: Mermaid source -> PDF

Transport modes:
- STDIO (default): For Claude Desktop and other MCP clients
- SSE: Server-Sent Events over HTTP
- HTTP: Streamable HTTP transport
"""

__version__ = "1.0.0"

from .server import create_server, mcp

__all__ = ["create_server", "mcp", "__version__"]
