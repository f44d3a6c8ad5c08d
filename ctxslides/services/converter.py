"""
ctxslides/services/converter.py -- End-to-End Conversion Pipeline

Coordinates the full flow:
  JSON text → decode → reconstruct → segment → render → ConTeXt text

The whole document is rendered into memory before anything is returned, so
a failure anywhere leaves no partial output behind.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional

from ctxslides.config import ConverterConfig
from ctxslides.errors import MalformedInput, UnsupportedNode
from ctxslides.pandoc.factory import reconstruct
from ctxslides.pandoc.models import Document, NodeKind, Slide, walk
from ctxslides.renderer.context_renderer import render_document

from .segmenter import segment

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    """Result from the conversion pipeline."""

    document: Document
    slides: list[Slide]
    output: str

    @property
    def slide_count(self) -> int:
        return len(self.slides)


def load_payload(text: str) -> Any:
    """Decode the JSON input. Raises MalformedInput if it is not valid JSON."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedInput(f"input is not valid JSON: {e}") from e
    except RecursionError as e:
        raise MalformedInput("input JSON is nested too deeply") from e


class SlideConverter:
    """
    Pandoc JSON → ConTeXt slides.

    Usage:
        conv = SlideConverter()
        result = conv.convert(sys.stdin.read())
        # result.output → complete ConTeXt source
    """

    def __init__(self, config: Optional[ConverterConfig] = None):
        self.config = config or ConverterConfig()

    def convert(self, text: str) -> ConversionResult:
        """Convert pandoc JSON text into a ConTeXt document."""
        return self.convert_payload(load_payload(text))

    def convert_payload(self, payload: Any) -> ConversionResult:
        """Convert an already decoded ``[metadata, blocks]`` payload."""
        doc = reconstruct(payload)
        self._check_raw_blocks(doc)

        slides = segment(doc.tokens)
        output = render_document(slides, self.config)

        logger.info("Converted %d top-level nodes into %d slides", len(doc.tokens), len(slides))
        return ConversionResult(document=doc, slides=slides, output=output)

    def _check_raw_blocks(self, doc: Document) -> None:
        if self.config.raw_block != "fail":
            return
        for node in walk(doc.tokens):
            if node.kind == NodeKind.RAW_BLOCK:
                raise UnsupportedNode(node.tag, "raw blocks are disabled (raw_block='fail')")


_default = SlideConverter()


def convert(text: str) -> ConversionResult:
    """Convert pandoc JSON text with the default configuration."""
    return _default.convert(text)
