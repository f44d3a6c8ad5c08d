"""
ctxslides/pandoc/models.py -- Pydantic data models for pandoc documents

Typed representations of the pandoc JSON node kinds this converter
understands. The factory produces them, the segmenter groups them into
slides, the renderer reads them and the serializer turns them back into
generic records.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Iterable, Iterator, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# ── Enums ──────────────────────────────────────────────────────────


class NodeKind(str, Enum):
    """Pandoc tag of every supported node kind."""

    PARAGRAPH = "Para"
    CODE_BLOCK = "CodeBlock"
    HEADER = "Header"
    STR = "Str"
    SPACE = "Space"
    STRONG = "Strong"
    EMPH = "Emph"
    HORIZONTAL_RULE = "HorizontalRule"
    BLOCK_QUOTE = "BlockQuote"
    PLAIN = "Plain"
    BULLET_LIST = "BulletList"
    RAW_INLINE = "RawInline"
    RAW_BLOCK = "RawBlock"


# ── Base ───────────────────────────────────────────────────────────


class _NodeBase(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    @property
    def kind(self) -> NodeKind:
        return NodeKind(self.tag)


class _Composite(_NodeBase):
    """A node whose payload is an ordered run of child nodes."""

    contents: list[Node] = Field(default_factory=list)


# ── Leaves ─────────────────────────────────────────────────────────


class Str(_NodeBase):
    tag: Literal["Str"] = "Str"
    text: str


class Space(_NodeBase):
    tag: Literal["Space"] = "Space"


class HorizontalRule(_NodeBase):
    """Slide separator. Consumed by the segmenter, never rendered."""

    tag: Literal["HorizontalRule"] = "HorizontalRule"


class RawInline(_NodeBase):
    tag: Literal["RawInline"] = "RawInline"
    format: str  # "context", "tex", "html", ...
    raw: str


class RawBlock(_NodeBase):
    tag: Literal["RawBlock"] = "RawBlock"
    format: Optional[str] = None
    raw: str


class CodeBlock(_NodeBase):
    tag: Literal["CodeBlock"] = "CodeBlock"
    language: Optional[str] = None  # first class of the block's attributes
    code: str


# ── Composites ─────────────────────────────────────────────────────


class Paragraph(_Composite):
    tag: Literal["Para"] = "Para"


class Strong(_Composite):
    tag: Literal["Strong"] = "Strong"


class Emph(_Composite):
    tag: Literal["Emph"] = "Emph"


class BlockQuote(_Composite):
    tag: Literal["BlockQuote"] = "BlockQuote"


class PlainItem(_Composite):
    """Inline content of one bullet list item."""

    tag: Literal["Plain"] = "Plain"


class Header(_Composite):
    tag: Literal["Header"] = "Header"
    level: int = Field(ge=1)  # 1 = subject, anything deeper = subsubject
    identifier: str = ""


class BulletList(_NodeBase):
    tag: Literal["BulletList"] = "BulletList"
    items: list[PlainItem] = Field(default_factory=list)


Node = Annotated[
    Union[
        Paragraph,
        CodeBlock,
        Header,
        Str,
        Space,
        Strong,
        Emph,
        HorizontalRule,
        BlockQuote,
        PlainItem,
        BulletList,
        RawInline,
        RawBlock,
    ],
    Field(discriminator="tag"),
]

for _model in (_Composite, Paragraph, Strong, Emph, BlockQuote, PlainItem, Header, BulletList):
    _model.model_rebuild()


# ── Slide & Document ───────────────────────────────────────────────


class Slide(BaseModel):
    """One screen of content. Holds the document's nodes, not copies."""

    tokens: list[Node] = Field(default_factory=list)


class Document(BaseModel):
    """Pandoc metadata (passed through untouched) + top-level nodes."""

    model_config = ConfigDict(frozen=True)

    meta: dict[str, Any] = Field(default_factory=dict)
    tokens: list[Node] = Field(default_factory=list)


# ── Traversal ──────────────────────────────────────────────────────


def children(node: _NodeBase) -> list:
    """Direct child nodes of ``node`` (list items for a BulletList)."""
    if isinstance(node, BulletList):
        return list(node.items)
    if isinstance(node, _Composite):
        return list(node.contents)
    return []


def walk(nodes: Iterable[_NodeBase]) -> Iterator[_NodeBase]:
    """Depth-first, left-to-right iteration over nodes and their descendants."""
    for node in nodes:
        yield node
        yield from walk(children(node))


def outline(node: _NodeBase) -> tuple:
    """Tag tree of ``node`` as nested ``(tag, (child outlines...))`` tuples."""
    return (node.tag, tuple(outline(child) for child in children(node)))
