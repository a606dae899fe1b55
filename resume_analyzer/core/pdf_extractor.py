from dataclasses import dataclass, field
from io import BytesIO
from typing import Any, List, Optional
import logging

import pdfplumber

from resume_analyzer.core.exceptions import DecodeError
from resume_analyzer.core.line_reconstructor import Glyph

logger = logging.getLogger(__name__)


@dataclass
class DecodedDocument:
    """Raw decoder output: page count plus unordered glyphs per page."""
    page_count: int
    pages: List[List[Glyph]] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)



def _page_glyphs(page: Any, *, x_tolerance: float = 3, y_tolerance: float = 3) -> List[Glyph]:
    """
    Convert a pdfplumber page into Glyphs.

    pdfplumber reports word boxes with 'top'/'bottom' measured from the top
    of the page. Glyph.y is flipped into PDF user space (baseline measured
    from the bottom) so that larger y means higher on the page.
    """
    words = page.extract_words(
        x_tolerance=x_tolerance,
        y_tolerance=y_tolerance,
        keep_blank_chars=False,
    )
    height = float(page.height)
    glyphs: List[Glyph] = []
    for w in words:
        text = (w.get("text") or "").strip()
        if not text:
            continue
        glyphs.append(Glyph(text=text, x=float(w["x0"]), y=height - float(w["bottom"])))
    return glyphs


def decode_pdf(pdf_bytes: bytes) -> DecodedDocument:
    """
    Decode raw PDF bytes into per-page glyph lists.

    A page whose text cannot be extracted contributes no glyphs and a
    warning; the remaining pages are still decoded.

    Raises:
        DecodeError: the bytes are empty, corrupt, encrypted, the document
            has no pages, or no page could be extracted. The underlying
            pdfplumber/pdfminer exception is chained as the cause.
    """
    if not pdf_bytes:
        raise DecodeError("Empty PDF payload")

    pages: List[List[Glyph]] = []
    warnings: List[str] = []
    last_error: Optional[Exception] = None
    try:
        with pdfplumber.open(BytesIO(pdf_bytes)) as pdf:
            page_count = len(pdf.pages)
            if page_count == 0:
                raise DecodeError("PDF has zero pages")
            for number, page in enumerate(pdf.pages, start=1):
                try:
                    pages.append(_page_glyphs(page))
                except Exception as e:
                    logger.warning(f"Text extraction failed on page {number}, skipping it: {e}")
                    warnings.append(f"Could not extract text from page {number}.")
                    pages.append([])
                    last_error = e
    except DecodeError:
        raise
    except Exception as e:
        raise DecodeError("Could not decode PDF", cause=e) from e

    if last_error is not None and len(warnings) == page_count:
        raise DecodeError("Could not extract text from any page", cause=last_error) from last_error

    logger.info(f"Decoded PDF with {page_count} page(s), {sum(len(p) for p in pages)} glyph(s)")
    return DecodedDocument(page_count=page_count, pages=pages, warnings=warnings)
