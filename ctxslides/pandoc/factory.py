"""
ctxslides/pandoc/factory.py -- Generic record → typed node

Rebuilds typed nodes from pandoc's generic ``{"t": tag, "c": contents}``
records. Strict, unlike the DSL parser this project grew out of: an unknown
tag or an unexpected contents shape aborts the whole reconstruction.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from pydantic import ValidationError

from ctxslides.errors import MalformedInput, MalformedNode, UnknownVariant

from .models import (
    BlockQuote,
    BulletList,
    CodeBlock,
    Document,
    Emph,
    Header,
    HorizontalRule,
    Node,
    Paragraph,
    PlainItem,
    RawBlock,
    RawInline,
    Space,
    Str,
    Strong,
)

logger = logging.getLogger(__name__)

# Shape of "c" per tag, quoted in MalformedNode messages.
_SHAPES = {
    "Para": "a list of node records",
    "Plain": "a list of node records",
    "Strong": "a list of node records",
    "Emph": "a list of node records",
    "BlockQuote": "a list of node records",
    "Str": "a string",
    "Space": "no contents",
    "HorizontalRule": "no contents",
    "RawBlock": "a string or a [format, text] pair",
    "RawInline": "a [format, text] pair of strings",
    "Header": "[level, [identifier, ...], [node records]]",
    "CodeBlock": "[[identifier, [language, ...], attributes], code]",
    "BulletList": "a list of items, each a list starting with a Plain or Para record",
}

# Record kinds accepted as the content of a bullet list item.
_ITEM_TAGS = ("Plain", "Para")


def _expect(condition: bool, tag: str) -> None:
    if not condition:
        raise MalformedNode(tag, _SHAPES[tag])


def _is_text_pair(c: Any) -> bool:
    return isinstance(c, list) and len(c) == 2 and all(isinstance(v, str) for v in c)


def _children(c: Any, tag: str) -> list[Node]:
    _expect(isinstance(c, list), tag)
    return [build_node(record) for record in c]


# ── Per-kind builders ──────────────────────────────────────────────


def _build_str(c: Any) -> Str:
    _expect(isinstance(c, str), "Str")
    return Str(text=c)


def _build_raw_block(c: Any) -> RawBlock:
    if isinstance(c, str):
        return RawBlock(raw=c)
    _expect(_is_text_pair(c), "RawBlock")
    return RawBlock(format=c[0], raw=c[1])


def _build_raw_inline(c: Any) -> RawInline:
    _expect(_is_text_pair(c), "RawInline")
    return RawInline(format=c[0], raw=c[1])


def _build_header(c: Any) -> Header:
    _expect(isinstance(c, list) and len(c) == 3, "Header")
    level, attr, inlines = c
    _expect(
        isinstance(level, int)
        and not isinstance(level, bool)
        and isinstance(attr, list)
        and len(attr) > 0
        and isinstance(attr[0], str),
        "Header",
    )
    return Header(level=level, identifier=attr[0], contents=_children(inlines, "Header"))


def _build_code_block(c: Any) -> CodeBlock:
    _expect(isinstance(c, list) and len(c) == 2, "CodeBlock")
    attr, code = c
    _expect(
        isinstance(attr, list)
        and len(attr) == 3
        and isinstance(attr[1], list)
        and all(isinstance(cls, str) for cls in attr[1])
        and isinstance(code, str),
        "CodeBlock",
    )
    classes = attr[1]
    # No classes, or an empty first class, means no language.
    language = classes[0] if classes else None
    return CodeBlock(language=language or None, code=code)


def _build_bullet_list(c: Any) -> BulletList:
    _expect(isinstance(c, list), "BulletList")
    items: list[PlainItem] = []
    for item in c:
        # Each item wraps its blocks in one more list; only the first block is kept.
        _expect(isinstance(item, list) and len(item) > 0, "BulletList")
        inner = item[0]
        if len(item) > 1:
            logger.debug("Dropping %d extra block(s) from bullet list item", len(item) - 1)
        _expect(isinstance(inner, dict) and inner.get("t") in _ITEM_TAGS, "BulletList")
        items.append(PlainItem(contents=_children(inner.get("c"), inner["t"])))
    return BulletList(items=items)


def _simple(model: type) -> Callable[[Any], Node]:
    tag = model.model_fields["tag"].default

    def build(c: Any) -> Node:
        return model(contents=_children(c, tag))

    return build


# ── Registry ───────────────────────────────────────────────────────

_BUILDERS: dict[str, Callable[[Any], Node]] = {
    "Para": _simple(Paragraph),
    "Plain": _simple(PlainItem),
    "Strong": _simple(Strong),
    "Emph": _simple(Emph),
    "BlockQuote": _simple(BlockQuote),
    "Str": _build_str,
    "Space": lambda c: Space(),
    "HorizontalRule": lambda c: HorizontalRule(),
    "RawBlock": _build_raw_block,
    "RawInline": _build_raw_inline,
    "Header": _build_header,
    "CodeBlock": _build_code_block,
    "BulletList": _build_bullet_list,
}


# ── Public API ────────────────────────────────────────────────────


def build_node(record: Any) -> Node:
    """Reconstruct one typed node (and its children) from a generic record.

    Raises:
        UnknownVariant: the record's tag has no registered builder.
        MalformedNode: the record or its contents have the wrong shape.
    """
    if not isinstance(record, dict) or not isinstance(record.get("t"), str):
        raise MalformedNode(type(record).__name__, "a {'t': tag, 'c': contents} record")

    tag = record["t"]
    builder = _BUILDERS.get(tag)
    if builder is None:
        raise UnknownVariant(tag)

    try:
        return builder(record.get("c"))
    except ValidationError as e:
        raise MalformedNode(tag, _SHAPES[tag]) from e


def build_nodes(records: list) -> list[Node]:
    """Reconstruct a sequence of records, preserving reading order."""
    return [build_node(record) for record in records]


def reconstruct(payload: Any) -> Document:
    """Turn a decoded ``[metadata, [record, ...]]`` payload into a Document.

    Raises:
        MalformedInput: the payload is not a metadata mapping + record list,
            or the tree is nested deeper than the interpreter can recurse.
        UnknownVariant, MalformedNode: from any node in the tree.
    """
    if not isinstance(payload, list) or len(payload) != 2:
        raise MalformedInput("expected a two-element [metadata, blocks] array")
    meta, records = payload
    if not isinstance(meta, dict):
        raise MalformedInput("document metadata must be a JSON object")
    if not isinstance(records, list):
        raise MalformedInput("document blocks must be a JSON array")

    try:
        tokens = build_nodes(records)
    except RecursionError as e:
        raise MalformedInput("document tree is nested too deeply") from e

    doc = Document(meta=meta, tokens=tokens)
    logger.debug("Reconstructed %d top-level nodes", len(doc.tokens))
    return doc
