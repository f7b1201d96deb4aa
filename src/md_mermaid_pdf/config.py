"""Runtime settings, read from the environment at import time."""

import os

# Milliseconds to wait for Mermaid to finish drawing before giving up
RENDER_TIMEOUT_MS = int(os.environ.get("MD_MERMAID_PDF_RENDER_TIMEOUT", "30000"))

LOG_LEVEL = os.environ.get("MD_MERMAID_PDF_LOG_LEVEL", "INFO").upper()

MERMAID_SCRIPT_URL = "https://cdn.jsdelivr.net/npm/mermaid@11/dist/mermaid.esm.min.mjs"

CHROMIUM_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]

PAGE_FORMAT = "A4"
MARKDOWN_PDF_MARGIN = "20mm"
DIAGRAM_PDF_MARGIN = "10mm"
