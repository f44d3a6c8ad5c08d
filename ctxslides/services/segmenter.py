"""
ctxslides/services/segmenter.py -- Split top-level nodes into slides

Single pass over the document's top-level nodes:
  - a Header always opens a new slide, with the header as its first member
  - a HorizontalRule opens a new, empty slide and is itself dropped
  - anything else joins the current (last) slide

A rule as the very first node yields two empty slides, not one. Trailing
empty slides are kept; they render as blank frames.
"""

from __future__ import annotations

import logging
from typing import Iterable

from ctxslides.pandoc.models import Node, NodeKind, Slide

logger = logging.getLogger(__name__)


def segment(tokens: Iterable[Node]) -> list[Slide]:
    """Partition top-level nodes into slides, in document order."""
    slides: list[Slide] = []

    for token in tokens:
        if not slides:
            if token.kind == NodeKind.HORIZONTAL_RULE:
                slides.append(Slide())
                slides.append(Slide())
            else:
                slides.append(Slide(tokens=[token]))
        elif token.kind == NodeKind.HEADER:
            slides.append(Slide(tokens=[token]))
        elif token.kind == NodeKind.HORIZONTAL_RULE:
            slides.append(Slide())
        else:
            slides[-1].tokens.append(token)

    logger.debug("Segmented document into %d slides", len(slides))
    return slides
