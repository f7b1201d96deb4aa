#!/usr/bin/env python3
"""
Markdown Mermaid PDF - Entry Point

Supports multiple transport modes:
- stdio: Standard I/O (default, for Claude Desktop)
- sse: Server-Sent Events over HTTP
- http: Streamable HTTP transport
"""

import argparse
import logging
import sys


def main():
    parser = argparse.ArgumentParser(
        description="MCP server converting Markdown and Mermaid diagrams to PDF/PNG",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run with STDIO transport (default, for Claude Desktop)
  md-mermaid-pdf

  # Run with SSE transport on port 8080
  md-mermaid-pdf --transport sse --port 8080

  # Allow slow diagrams up to 60 seconds to render
  md-mermaid-pdf --render-timeout 60000

Note: rendering requires Chromium for Playwright (playwright install chromium)
and network access to load Mermaid from the jsDelivr CDN.
"""
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse", "http"],
        default="stdio",
        help="Transport mode (default: stdio)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8080,
        help="Port for SSE/HTTP transport (default: 8080)"
    )
    parser.add_argument(
        "--host",
        type=str,
        default="0.0.0.0",
        help="Host to bind for SSE/HTTP transport (default: 0.0.0.0)"
    )
    parser.add_argument(
        "--render-timeout",
        type=int,
        default=None,
        help="Milliseconds to wait for Mermaid diagrams to render (default: 30000)"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level for stderr output (default: INFO)"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__import__('md_mermaid_pdf').__version__}"
    )

    args = parser.parse_args()

    from . import config
    from .server import mcp

    # CLI flags override the environment defaults
    if args.render_timeout is not None:
        config.RENDER_TIMEOUT_MS = args.render_timeout
    log_level = args.log_level or config.LOG_LEVEL

    # stdout belongs to the stdio transport
    logging.basicConfig(
        stream=sys.stderr,
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger = logging.getLogger("md_mermaid_pdf")

    if args.transport == "stdio":
        logger.info("Markdown Mermaid PDF MCP server running on stdio")
        try:
            mcp.run()
        except KeyboardInterrupt:
            logger.info("Interrupted, exiting")

    elif args.transport == "sse":
        try:
            import uvicorn
        except ImportError as e:
            print(f"Error: SSE transport requires additional dependencies: {e}", file=sys.stderr)
            print("Install with: pip install 'md-mermaid-pdf[sse]'", file=sys.stderr)
            sys.exit(1)

        logger.info(f"Starting SSE server on {args.host}:{args.port}")
        logger.info(f"SSE endpoint: http://{args.host}:{args.port}/sse")
        uvicorn.run(mcp.sse_app(), host=args.host, port=args.port)

    elif args.transport == "http":
        try:
            import uvicorn
        except ImportError as e:
            print(f"Error: HTTP transport requires additional dependencies: {e}", file=sys.stderr)
            print("Install with: pip install 'md-mermaid-pdf[http]'", file=sys.stderr)
            sys.exit(1)

        logger.info(f"Starting HTTP server on {args.host}:{args.port}")
        logger.info(f"MCP endpoint: http://{args.host}:{args.port}/mcp")
        uvicorn.run(mcp.streamable_http_app(), host=args.host, port=args.port)


if __name__ == "__main__":
    main()
