"""
Line reconstruction from positioned text glyphs.

A PDF page decodes into loose text runs, each with an (x, y) origin and no
reading order. This module groups them into lines by vertical position and
orders them the way a person reads the page: top to bottom, left to right.

y follows PDF user space, so larger y means higher on the page.
"""

from dataclasses import dataclass, field
from typing import List

from resume_analyzer.core.config import settings


@dataclass(frozen=True)
class Glyph:
    """A positioned text run as produced by the PDF decoder."""
    text: str
    x: float
    y: float


@dataclass
class Line:
    """Glyphs sharing an approximate vertical coordinate."""
    y: float
    glyphs: List[Glyph] = field(default_factory=list)
    text: str = ""


def group_glyphs_into_lines(
    glyphs: List[Glyph],
    y_threshold: float = settings.LINE_Y_THRESHOLD,
) -> List[Line]:
    """
    Group one page's glyphs into ordered lines.

    Strategy:
    1. Each glyph joins the first line whose stored y is within y_threshold
       (strictly less than), otherwise it starts a new line at its own y
    2. Lines are sorted by descending y (top of page first)
    3. Glyphs inside a line are sorted by ascending x and joined with single spaces

    Lines whose joined text is empty are dropped.

    Args:
        glyphs: Unordered glyphs of a single page
        y_threshold: Vertical distance under which two glyphs share a line

    Returns:
        Ordered list of Line objects
    """
    lines: List[Line] = []

    for glyph in glyphs:
        for line in lines:
            if abs(line.y - glyph.y) < y_threshold:
                line.glyphs.append(glyph)
                break
        else:
            lines.append(Line(y=glyph.y, glyphs=[glyph]))

    lines.sort(key=lambda ln: ln.y, reverse=True)

    for line in lines:
        line.glyphs.sort(key=lambda g: g.x)
        line.text = " ".join(g.text for g in line.glyphs).strip()

    return [line for line in lines if line.text]


def lines_from_text(text: str) -> List[Line]:
    """
    Build lines from an already linear plain-text block.

    Used for text uploads and for driving the pipeline without a PDF. Each
    non-empty text line becomes one Line; synthetic y values descend so the
    result has the same ordering contract as group_glyphs_into_lines.
    """
    raw_lines = [ln.strip() for ln in text.splitlines()]
    raw_lines = [ln for ln in raw_lines if ln]
    total = len(raw_lines)
    out: List[Line] = []
    for i, raw in enumerate(raw_lines):
        y = float(total - i)
        out.append(Line(y=y, glyphs=[Glyph(text=raw, x=0.0, y=y)], text=raw))
    return out
