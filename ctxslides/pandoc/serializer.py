"""
ctxslides/pandoc/serializer.py -- Typed node → generic record

Converts nodes back to pandoc's ``{"t", "c"}`` form. Enables structural
round-tripping:
  build_node(serialize_node(node)) == node

Attributes the models do not keep (header classes, code block identifier,
key/value pairs) are written out empty.
"""

from __future__ import annotations

from .models import Document, NodeKind


class PandocSerializer:
    """Converts typed nodes back to pandoc JSON values."""

    def serialize(self, doc: Document) -> list:
        """Serialize a full document to a ``[meta, blocks]`` payload."""
        return [dict(doc.meta), [self.serialize_node(t) for t in doc.tokens]]

    def serialize_node(self, node) -> dict:
        kind = node.kind

        if kind == NodeKind.STR:
            return {"t": node.tag, "c": node.text}
        if kind in (NodeKind.SPACE, NodeKind.HORIZONTAL_RULE):
            return {"t": node.tag}
        if kind == NodeKind.RAW_INLINE:
            return {"t": node.tag, "c": [node.format, node.raw]}
        if kind == NodeKind.RAW_BLOCK:
            if node.format is None:
                return {"t": node.tag, "c": node.raw}
            return {"t": node.tag, "c": [node.format, node.raw]}
        if kind == NodeKind.CODE_BLOCK:
            classes = [node.language] if node.language else []
            return {"t": node.tag, "c": [["", classes, []], node.code]}
        if kind == NodeKind.HEADER:
            return {
                "t": node.tag,
                "c": [node.level, [node.identifier, [], []], self._children(node.contents)],
            }
        if kind == NodeKind.BULLET_LIST:
            return {"t": node.tag, "c": [[self.serialize_node(item)] for item in node.items]}

        # Para, Plain, Strong, Emph, BlockQuote
        return {"t": node.tag, "c": self._children(node.contents)}

    def _children(self, nodes) -> list:
        return [self.serialize_node(n) for n in nodes]
