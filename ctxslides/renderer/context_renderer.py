"""
ctxslides/renderer/context_renderer.py -- ConTeXt Rendering Engine

Converts typed pandoc nodes into ConTeXt markup, one standardmakeup frame
per slide. Deterministic: same input always produces the same output.

Each node kind has exactly one rendering rule, looked up in _RENDERERS.
Composite rules recurse depth-first, left to right.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ctxslides.config import ConverterConfig
from ctxslides.pandoc.models import Node, NodeKind, Slide

from .templates import SLIDE_START, SLIDE_STOP

logger = logging.getLogger(__name__)


def _join(nodes: Iterable[Node]) -> str:
    return "".join(render_node(n) for n in nodes)


# ── Per-kind renderers ────────────────────────────────────────────


def _render_str(node) -> str:
    return node.text


def _render_space(node) -> str:
    return " "


def _render_paragraph(node) -> str:
    return "\n\n" + _join(node.contents)


def _render_strong(node) -> str:
    return "{\\bf " + _join(node.contents) + "}"


def _render_emph(node) -> str:
    return "{\\emphasis " + _join(node.contents) + "}"


def _render_block_quote(node) -> str:
    # Paragraphs inside a quote would otherwise open with a blank line.
    body = "".join(render_node(n).strip() for n in node.contents)
    return "{\\italic\\quotation{ " + body + "}}"


def _render_plain_item(node) -> str:
    return "\\item " + _join(node.contents)


def _render_bullet_list(node) -> str:
    return "\n".join(
        [
            "\\startitemize",
            "\n".join(render_node(item) for item in node.items),
            "\\stopitemize",
        ]
    )


def _render_header(node) -> str:
    subject = "\\subject" if node.level == 1 else "\\subsubject"
    return subject + "{" + _join(node.contents) + "}"


def _render_code_block(node) -> str:
    # \definevimtyping names environments in upper case (RUBY, SH).
    env = node.language.upper() if node.language else "typing"
    return "\n".join([f"\\start{env}", node.code, f"\\stop{env}"])


def _render_horizontal_rule(node) -> str:
    return ""


def _render_raw_inline(node) -> str:
    return node.raw


def _render_raw_block(node) -> str:
    logger.debug("Passing RawBlock through verbatim: %r", node)
    return node.raw


_RENDERERS = {
    NodeKind.STR: _render_str,
    NodeKind.SPACE: _render_space,
    NodeKind.PARAGRAPH: _render_paragraph,
    NodeKind.STRONG: _render_strong,
    NodeKind.EMPH: _render_emph,
    NodeKind.BLOCK_QUOTE: _render_block_quote,
    NodeKind.PLAIN: _render_plain_item,
    NodeKind.BULLET_LIST: _render_bullet_list,
    NodeKind.HEADER: _render_header,
    NodeKind.CODE_BLOCK: _render_code_block,
    NodeKind.HORIZONTAL_RULE: _render_horizontal_rule,
    NodeKind.RAW_INLINE: _render_raw_inline,
    NodeKind.RAW_BLOCK: _render_raw_block,
}


# ── Public API ────────────────────────────────────────────────────


def render_node(node: Node) -> str:
    """Render a single node (and its children) to ConTeXt markup."""
    return _RENDERERS[node.kind](node)


def render_slide(slide: Slide) -> str:
    """Render one slide as a standardmakeup frame, members one per line."""
    return "\n".join(
        [
            SLIDE_START,
            "\n".join(render_node(t) for t in slide.tokens),
            SLIDE_STOP,
        ]
    )


def render_document(slides: list[Slide], config: Optional[ConverterConfig] = None) -> str:
    """Render the complete ConTeXt source: prologue, every slide, epilogue.

    Args:
        slides: Slides in segmentation order.
        config: Supplies the prologue/epilogue text. Defaults to ConverterConfig().

    Returns:
        The whole document as one string; nothing is written anywhere.
    """
    config = config or ConverterConfig()
    parts = [config.prologue]
    for slide in slides:
        parts.append(render_slide(slide) + "\n")
    parts.append(config.epilogue)

    logger.debug("Rendered %d slides", len(slides))
    return "".join(parts)
