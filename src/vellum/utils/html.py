"""HTML serialization of rendered element trees.

Text is escaped unless it is ``Markup`` (or a ``Text`` node flagged safe);
attribute values are always escaped. ``render_html`` is the renderer side of
the engine: it knows nothing about components, options or slots.

Example:
    >>> render_html(Element("p", {"class": "note"}, (Text("a < b"),)))
    Markup('<p class="note">a &lt; b</p>')
"""

from __future__ import annotations

import html
import re
from collections.abc import Mapping
from typing import Any

from vellum.nodes import Element, Node, Text

# Elements that never have children or a closing tag.
VOID_ELEMENTS: frozenset[str] = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)

# Characters the HTML attribute-name grammar excludes.
_INVALID_ATTRIBUTE_NAME = re.compile(r"[\s\"'>/=\x00-\x1f\x7f]")


class Markup(str):
    """A string that is already safe HTML and must not be escaped again."""

    __slots__ = ()

    def __html__(self) -> Markup:
        return self

    def __add__(self, other: str) -> Markup:
        return Markup(super().__add__(html_escape(other)))

    def __repr__(self) -> str:
        return f"Markup({super().__repr__()})"


def html_escape(value: Any) -> Markup:
    """Escape ``value`` for HTML text or attribute context.

    Objects providing ``__html__`` (including ``Markup``) pass through.
    """
    if hasattr(value, "__html__"):
        return Markup(value.__html__())
    return Markup(html.escape(str(value), quote=True))


def is_valid_attribute_name(name: str) -> bool:
    """True if ``name`` can be written as an attribute name without breaking the tag."""
    return bool(name) and _INVALID_ATTRIBUTE_NAME.search(name) is None


def render_attributes(attributes: Mapping[str, Any]) -> str:
    """``' a="1" b'`` style attribute string, with a leading space when non-empty.

    Raises:
        ValueError: An attribute name contains whitespace, quotes, ``>``,
            ``/``, ``=`` or control characters.
    """
    parts: list[str] = []
    for name, value in attributes.items():
        if not is_valid_attribute_name(name):
            raise ValueError(f"Invalid HTML attribute name {name!r}")
        if value is None or value is False:
            continue
        if value is True:
            parts.append(f" {name}")
        else:
            parts.append(f' {name}="{html_escape(value)}"')
    return "".join(parts)


def _write(node: Node, out: list[str]) -> None:
    if isinstance(node, Text):
        out.append(node.value if node.safe else html_escape(node.value))
        return
    out.append(f"<{node.tag}{render_attributes(node.attributes)}>")
    if node.tag in VOID_ELEMENTS:
        return
    for child in node.children:
        _write(child, out)
    out.append(f"</{node.tag}>")


def render_html(node: Node | None) -> Markup:
    """Serialize an element tree. ``None`` (a component that chose not to
    render) serializes to an empty string."""
    if node is None:
        return Markup("")
    # StringBuilder: collect parts, join once.
    out: list[str] = []
    _write(node, out)
    return Markup("".join(out))
