#!/usr/bin/env python3
"""
Markdown Mermaid PDF - Server Implementation
============================================

Exposes the converters as MCP tools.

Tools:
- convert_md_to_pdf: Markdown file (with ```mermaid blocks) -> PDF
- convert_mermaid_to_png: Mermaid source -> PNG cropped to the diagram
- convert_mermaid_to_pdf: Mermaid source -> PDF
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated, Optional

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from pydantic import Field

from . import converter
from .models import ConversionResult, DiagramConversionRequest, MarkdownConversionRequest

logger = logging.getLogger(__name__)

SERVER_NAME = "md-mmd-pdf-server"


@asynccontextmanager
async def server_lifespan(server: FastMCP):
    """Log startup and shutdown."""
    logger.info(f"{SERVER_NAME} ready")
    try:
        yield
    finally:
        logger.info(f"{SERVER_NAME} shutting down")


# Initialize the MCP server
mcp = FastMCP(SERVER_NAME, lifespan=server_lifespan)


def create_server() -> FastMCP:
    """Create and return the MCP server instance."""
    return mcp


def _respond(result: ConversionResult, success_message: str) -> str:
    if not result.success:
        raise ToolError(f"Conversion failed: {result.error}")
    return f"{success_message}\nOutput: {result.output_path}"


# ============================================================================
# Markdown to PDF
# ============================================================================

@mcp.tool()
async def convert_md_to_pdf(
    input_path: Annotated[str, Field(description="Absolute path to the input Markdown file")],
    output_path: Annotated[Optional[str], Field(
        description="Absolute path where the PDF should be saved (optional). "
                    "If not provided, will use the same name as input file with .pdf extension."
    )] = None,
    custom_css: Annotated[Optional[str], Field(
        description="Custom CSS styles to apply to the PDF (optional). "
                    "This will be added in addition to the default styling."
    )] = None,
) -> str:
    """Converts a Markdown file containing Mermaid diagrams to a PDF file.

    The Mermaid diagrams will be rendered as SVG graphics in the final PDF.

    Args:
        input_path: Absolute path to the Markdown file
        output_path: Optional PDF path (defaults to input path with .pdf)
        custom_css: Optional CSS appended after the default stylesheet

    Returns:
        Success message with the output path
    """
    if not input_path:
        raise ToolError("input_path is required")

    result = await converter.convert_markdown_to_pdf(MarkdownConversionRequest(
        input_path=input_path,
        output_path=output_path,
        custom_css=custom_css,
    ))
    return _respond(result, "Successfully converted Markdown to PDF!")


# ============================================================================
# Standalone Mermaid diagrams
# ============================================================================

def _diagram_request(mermaid_code: str, output_path: str) -> DiagramConversionRequest:
    if not mermaid_code or not output_path:
        raise ToolError("mermaid_code and output_path are required")
    return DiagramConversionRequest(mermaid_code=mermaid_code, output_path=output_path)


@mcp.tool()
async def convert_mermaid_to_png(
    mermaid_code: Annotated[str, Field(description='Raw Mermaid diagram code (e.g., "graph TD\\n  A-->B")')],
    output_path: Annotated[str, Field(description="Absolute path where the PNG file should be saved")],
) -> str:
    """Converts a standalone Mermaid diagram code to a PNG image file.

    Provide the raw Mermaid diagram code and specify where to save the PNG.
    """
    request = _diagram_request(mermaid_code, output_path)
    result = await converter.convert_mermaid_to_png(request)
    return _respond(result, "Successfully converted Mermaid diagram to PNG!")


@mcp.tool()
async def convert_mermaid_to_pdf(
    mermaid_code: Annotated[str, Field(description='Raw Mermaid diagram code (e.g., "graph TD\\n  A-->B")')],
    output_path: Annotated[str, Field(description="Absolute path where the PDF file should be saved")],
) -> str:
    """Converts a standalone Mermaid diagram code to a PDF file.

    Provide the raw Mermaid diagram code and specify where to save the PDF.
    """
    request = _diagram_request(mermaid_code, output_path)
    result = await converter.convert_mermaid_to_pdf(request)
    return _respond(result, "Successfully converted Mermaid diagram to PDF!")
