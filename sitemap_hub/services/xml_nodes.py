from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from xml.etree.ElementTree import Element
from xml.sax.saxutils import escape, unescape

_QUOTE_ENTITIES = {'"': "&quot;", "'": "&apos;"}
_QUOTE_DECODE = {v: k for k, v in _QUOTE_ENTITIES.items()}


@dataclass(frozen=True)
class TextNode:
    """
    Character data for the body of one element.

    ElementTree escapes text exactly once when serializing. A node flagged
    ``asis`` already holds escaped text; it is decoded on attach so the
    serializer's single pass reproduces it unchanged.

    ElementTree has no hook for raw character data, so ``asis`` cannot bypass
    its escaping: the emitted bytes are the same as for default-escaped text.
    The flag records that the value was escaped upstream.
    """
    text: str
    asis: bool = False

    @classmethod
    def escaped(cls, raw: str) -> "TextNode":
        return cls(text=escape(raw, _QUOTE_ENTITIES), asis=True)

    def as_text(self) -> str:
        if self.asis:
            return unescape(self.text, _QUOTE_DECODE)
        return self.text


def as_text_node(value: Any) -> TextNode:
    if isinstance(value, TextNode):
        return value
    return TextNode(str(value))


def wrap_in(node: TextNode, tag: str) -> Element:
    elt = Element(tag)
    elt.text = node.as_text()
    return elt
