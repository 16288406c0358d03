"""PdfConverter — turns a written text report into a paginated PDF.

Conversion is additive: the text report is the record of truth and is left
in place whatever happens here. WeasyPrint, which needs the Cairo/Pango
system libraries, is imported on first use.
"""

from __future__ import annotations

import html
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

_PAGE_CSS = """
@page { size: A4; margin: 15mm; }
pre { font-family: "DejaVu Sans Mono", Menlo, Consolas, monospace; font-size: 9pt;
      white-space: pre-wrap; overflow-wrap: anywhere; tab-size: 4; }
"""

_HTML_TEMPLATE = """<!doctype html>
<html><head><meta charset="utf-8"><title>{title}</title><style>{css}</style></head>
<body><pre>{body}</pre></body></html>
"""


class ConversionError(Exception):
    """Raised when a text report could not be converted to PDF."""


class PdfConverter:
    """Writes ``<stem>.pdf`` next to each converted text report."""

    def convert(self, text_path: str | Path) -> Path:
        source = Path(text_path)
        target = source.with_suffix(".pdf")
        try:
            from weasyprint import HTML
        except (ImportError, OSError) as e:
            raise ConversionError(f"WeasyPrint is required for --pdf ({e})") from e

        try:
            text = source.read_text(encoding="utf-8")
            document = _HTML_TEMPLATE.format(
                title=html.escape(source.stem), css=_PAGE_CSS, body=html.escape(text)
            )
            HTML(string=document).write_pdf(str(target))
        except Exception as e:
            raise ConversionError(f"could not convert {source} to PDF ({type(e).__name__}: {e})") from e

        logger.debug("Converted %s to %s", source, target)
        return target
