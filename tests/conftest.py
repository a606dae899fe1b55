"""Shared fixtures: in-memory PDFs and a deterministic name detector."""

import re
from typing import Callable, List, Sequence, Tuple

import pytest


def _escape_pdf_text(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def build_pdf(pages: Sequence[Sequence[Tuple[float, float, str]]]) -> bytes:
    """
    Build a minimal valid PDF.

    Each page is a list of (x, y, text) runs drawn in 11pt Helvetica, with y
    in PDF user space (origin bottom-left, page height 792).
    """
    page_count = len(pages)
    # Object numbering: 1 catalog, 2 pages, 3 font, then (page, content) pairs
    objects: List[bytes] = []
    kids = " ".join(f"{4 + 2 * i} 0 R" for i in range(page_count))
    objects.append(b"<< /Type /Catalog /Pages 2 0 R >>")
    objects.append(f"<< /Type /Pages /Kids [{kids}] /Count {page_count} >>".encode())
    objects.append(b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica /Encoding /WinAnsiEncoding >>")

    for i, runs in enumerate(pages):
        content_num = 5 + 2 * i
        stream = "\n".join(
            f"BT /F1 11 Tf {x:.2f} {y:.2f} Td ({_escape_pdf_text(text)}) Tj ET" for x, y, text in runs
        ).encode("latin-1")
        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                f"/Resources << /Font << /F1 3 0 R >> >> /Contents {content_num} 0 R >>"
            ).encode()
        )
        objects.append(b"<< /Length " + str(len(stream)).encode() + b" >>\nstream\n" + stream + b"\nendstream")

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for num, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{num} 0 obj\n".encode() + body + b"\nendobj\n"

    xref_at = len(out)
    out += f"xref\n0 {len(objects) + 1}\n".encode()
    out += b"0000000000 65535 f \n"
    for off in offsets:
        out += f"{off:010d} 00000 n \n".encode()
    out += f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\nstartxref\n{xref_at}\n%%EOF\n".encode()
    return bytes(out)


def pdf_from_lines(lines: Sequence[str], *, top: float = 740.0, leading: float = 16.0) -> bytes:
    """One page, one run per line, lines stacked from the top of the page."""
    runs = [(72.0, top - i * leading, line) for i, line in enumerate(lines)]
    return build_pdf([runs])


NAME_RE = re.compile(r"\b([A-Z][a-z]+ [A-Z][a-z]+)\b")


def fake_person_extractor(text: str) -> List[str]:
    """First two capitalized words in a row, enough for test resumes."""
    return NAME_RE.findall(text)


@pytest.fixture
def make_pdf() -> Callable[..., bytes]:
    return build_pdf


@pytest.fixture
def make_pdf_from_lines() -> Callable[..., bytes]:
    return pdf_from_lines


@pytest.fixture
def person_extractor() -> Callable[[str], List[str]]:
    return fake_person_extractor
