"""
Conversion Operations
=====================

Each conversion launches its own headless Chromium, loads an assembled HTML
page, waits for Mermaid to draw every diagram, then captures the result:

- convert_markdown_to_pdf: Markdown file -> paginated PDF
- convert_mermaid_to_png: Mermaid source -> PNG cropped to the diagram
- convert_mermaid_to_pdf: Mermaid source -> paginated PDF

The coroutines never raise. Every failure comes back as a
``ConversionResult`` with ``success=False``.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

from playwright.async_api import Page, TimeoutError as PlaywrightTimeoutError, async_playwright

from . import config
from .documents import create_html_document, create_mermaid_only_html
from .markup import markdown_to_html
from .models import ConversionResult, DiagramConversionRequest, MarkdownConversionRequest

logger = logging.getLogger(__name__)


class MermaidRenderError(Exception):
    """Mermaid did not produce the expected SVG output."""


class RenderTimeoutError(MermaidRenderError):
    """Diagrams were still unrendered when the deadline passed."""


# Vacuously ready when the document has no diagrams
ALL_DIAGRAMS_READY = """() => {
  const mermaidElements = document.querySelectorAll('.mermaid');
  if (mermaidElements.length === 0) return true;
  return Array.from(mermaidElements).every(el => el.querySelector('svg') !== null);
}"""

SINGLE_DIAGRAM_READY = """() => {
  const mermaidElement = document.querySelector('.mermaid');
  if (!mermaidElement) return false;
  return mermaidElement.querySelector('svg') !== null;
}"""


def _margins(size: str) -> dict:
    return {"top": size, "right": size, "bottom": size, "left": size}


@asynccontextmanager
async def _rendered_page(html: str, ready_predicate: str) -> AsyncIterator[Page]:
    """Yield a page showing ``html`` once ``ready_predicate`` holds.

    The browser is closed on exit whether or not the caller's capture
    succeeded.
    """
    async with async_playwright() as p:
        browser = await p.chromium.launch(headless=True, args=config.CHROMIUM_ARGS)
        try:
            page = await browser.new_page()
            await page.set_content(html, wait_until="networkidle")

            try:
                await page.wait_for_function(ready_predicate, timeout=config.RENDER_TIMEOUT_MS)
            except PlaywrightTimeoutError as e:
                raise RenderTimeoutError(
                    f"Mermaid diagram rendering timed out after "
                    f"{config.RENDER_TIMEOUT_MS / 1000:g}s: {e}"
                ) from e

            yield page
        finally:
            await browser.close()


def _prepare_output(output_path: str) -> str:
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    return output_path


async def convert_markdown_to_pdf(request: MarkdownConversionRequest) -> ConversionResult:
    """Convert a Markdown file with Mermaid diagrams to PDF."""
    try:
        markdown_content = Path(request.input_path).read_text(encoding="utf-8")
        output_path = request.resolved_output_path()
        logger.info(f"Converting Markdown '{request.input_path}' -> '{output_path}'")

        html = create_html_document(markdown_to_html(markdown_content), request.custom_css)

        async with _rendered_page(html, ALL_DIAGRAMS_READY) as page:
            await page.pdf(
                path=_prepare_output(output_path),
                format=config.PAGE_FORMAT,
                margin=_margins(config.MARKDOWN_PDF_MARGIN),
                print_background=True,
            )

        logger.info(f"PDF written: {output_path}")
        return ConversionResult.ok(output_path)

    except Exception as e:
        logger.warning(f"Markdown to PDF conversion failed for '{request.input_path}': {e}")
        return ConversionResult.failed(str(e) or type(e).__name__)


async def convert_mermaid_to_png(request: DiagramConversionRequest) -> ConversionResult:
    """Render standalone Mermaid source to a PNG sized to the diagram."""
    try:
        logger.info(f"Converting Mermaid diagram -> '{request.output_path}' (png)")
        html = create_mermaid_only_html(request.mermaid_code)

        async with _rendered_page(html, SINGLE_DIAGRAM_READY) as page:
            svg_element = await page.query_selector(".mermaid svg")
            if not svg_element:
                raise MermaidRenderError("Failed to render Mermaid diagram")

            await svg_element.screenshot(
                path=_prepare_output(request.output_path),
                type="png",
                omit_background=False,
            )

        logger.info(f"PNG written: {request.output_path}")
        return ConversionResult.ok(request.output_path)

    except Exception as e:
        logger.warning(f"Mermaid to PNG conversion failed: {e}")
        return ConversionResult.failed(str(e) or type(e).__name__)


async def convert_mermaid_to_pdf(request: DiagramConversionRequest) -> ConversionResult:
    """Render standalone Mermaid source to a PDF page."""
    try:
        logger.info(f"Converting Mermaid diagram -> '{request.output_path}' (pdf)")
        html = create_mermaid_only_html(request.mermaid_code)

        async with _rendered_page(html, SINGLE_DIAGRAM_READY) as page:
            await page.pdf(
                path=_prepare_output(request.output_path),
                format=config.PAGE_FORMAT,
                margin=_margins(config.DIAGRAM_PDF_MARGIN),
                print_background=True,
            )

        logger.info(f"PDF written: {request.output_path}")
        return ConversionResult.ok(request.output_path)

    except Exception as e:
        logger.warning(f"Mermaid to PDF conversion failed: {e}")
        return ConversionResult.failed(str(e) or type(e).__name__)
