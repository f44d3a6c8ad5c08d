"""
ctxslides/errors.py -- Conversion error taxonomy

Every error is fatal: the converter aborts before any markup is written.
"""

from __future__ import annotations


class ConversionError(Exception):
    """Base class for everything the converter refuses to process."""


class MalformedInput(ConversionError):
    """The payload is not a ``[metadata, [node, ...]]`` pair."""


class UnknownVariant(ConversionError):
    """A node record carries a tag with no registered builder."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"unknown node kind: {tag!r}")


class MalformedNode(ConversionError):
    """A node record's contents do not match its kind's shape."""

    def __init__(self, tag: str, expected: str):
        self.tag = tag
        self.expected = expected
        super().__init__(f"malformed {tag!r} node: expected {expected}")


class UnsupportedNode(ConversionError):
    """A node kind the current configuration refuses to render."""

    def __init__(self, tag: str, reason: str):
        self.tag = tag
        super().__init__(f"unsupported {tag!r} node: {reason}")
