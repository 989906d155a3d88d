"""Output tree handed to the HTML serializer.

A rendered component is an ``Element`` whose attributes are fully resolved
(no option placeholders left) and whose ``class`` attribute, when present, is
a single deduplicated class string. Leaves are ``Text`` nodes.

Nodes are immutable; a rendered tree can be compared, snapshotted or
serialized any number of times.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Text:
    """Text leaf. ``safe`` marks pre-escaped markup that must not be escaped again."""

    value: str
    safe: bool = False


@dataclass(frozen=True, slots=True)
class Element:
    """An HTML element.

    Attributes:
        tag: Element name (``div``, ``modal-dialog``, ...)
        attributes: Final attribute values; ``True`` means a boolean attribute
        children: Child elements and text, in document order
    """

    tag: str
    attributes: dict[str, Any] = field(default_factory=dict)
    children: tuple[Node, ...] = ()

    @property
    def classes(self) -> str:
        """The ``class`` attribute, or ``""``."""
        return self.attributes.get("class", "")

    def iter(self) -> Iterator[Element]:
        """Depth-first, pre-order walk over this element and its descendants."""
        yield self
        for child in self.children:
            if isinstance(child, Element):
                yield from child.iter()

    def find_all(self, class_name: str) -> list[Element]:
        """Descendants (including self) carrying ``class_name``."""
        return [element for element in self.iter() if class_name in element.classes.split()]

    def text(self) -> str:
        """Concatenated text content."""
        parts: list[str] = []
        for child in self.children:
            parts.append(child.value if isinstance(child, Text) else child.text())
        return "".join(parts)


Node = Element | Text
