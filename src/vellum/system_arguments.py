"""SystemArguments: the configuration bag threaded through every component.

A component's keyword arguments that are not its own options (``id``,
``aria``, ``data``, ``classes``, utility shorthands like ``mt=2``, any free-form
HTML attribute) end up here, next to the two designated entries:

- ``tag``: the element kind to render (``"div"`` unless set)
- ``classes``: the composed class string for the element

The bag is mutated only while the owning component is being constructed and
configured. The one sanctioned write from outside is a slot factory appending
classes to its parent, and it goes through a ``ClassAppender`` that can do
nothing else.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping, MutableMapping
from typing import Any

from vellum.classes import ClassContribution, class_names
from vellum.exceptions import ConfigurationError
from vellum.utilities import classify
from vellum.utils.html import is_valid_attribute_name

DEFAULT_TAG = "div"

# Nested mappings flattened into prefixed attributes: aria={"label": ...} -> aria-label
_PREFIXED = ("aria", "data")


def attribute_name(key: str) -> str:
    """Python keyword-argument name to HTML attribute name.

    ``for_`` becomes ``for``; remaining underscores become hyphens.
    """
    if key.endswith("_"):
        key = key[:-1]
    return key.replace("_", "-")


class ClassAppender:
    """Restricted handle that can only append classes to one element.

    Handed to slot factories in place of the parent component, so a child can
    contribute structural marker classes (``LayoutBeta--has-header``) to its
    parent's wrapper without any other access to parent state.
    """

    __slots__ = ("_append",)

    def __init__(self, append: Callable[[tuple[ClassContribution, ...]], None]) -> None:
        self._append = append

    def add_classes(self, *contributions: ClassContribution) -> None:
        """Append ``contributions`` after the element's existing classes."""
        self._append(contributions)


class SystemArguments(MutableMapping[str, Any]):
    """Mutable attribute bag owned by a single component.

    Args:
        arguments: Initial entries, usually the component's ``**kwargs``.
        owner: Name of the owning component, used in error messages.
    """

    __slots__ = ("_data", "owner")

    def __init__(self, arguments: Mapping[str, Any] | None = None, /, *, owner: str | None = None) -> None:
        self._data: dict[str, Any] = dict(arguments or {})
        self.owner = owner

    # -- MutableMapping ------------------------------------------------------

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        owner = f"{self.owner}: " if self.owner else ""
        return f"SystemArguments({owner}{self._data!r})"

    # -- Designated entries --------------------------------------------------

    @property
    def tag(self) -> str:
        return str(self._data.get("tag") or DEFAULT_TAG)

    @tag.setter
    def tag(self, value: str) -> None:
        self._data["tag"] = value

    @property
    def classes(self) -> str:
        return self._data.get("classes") or ""

    def set(self, key: str, value: Any) -> None:
        """Assign ``key``; the last write wins."""
        self._data[key] = value

    def copy(self) -> SystemArguments:
        return SystemArguments(self._data, owner=self.owner)

    # -- Construction helpers ------------------------------------------------

    def disallow(self, *keys: str, suggestion: str | None = None) -> None:
        """Reject caller-supplied ``keys`` the component fixes itself.

        Raises:
            ConfigurationError: If any of ``keys`` is present.
        """
        present = [key for key in keys if key in self._data]
        if not present:
            return
        owner = self.owner or "this component"
        names = ", ".join(repr(key) for key in present)
        raise ConfigurationError(
            f"{names} not allowed for {owner}",
            keys=present,
            component=self.owner,
            suggestion=suggestion or f"{owner} sets {names} itself; remove the argument",
        )

    def deny_tag_argument(self) -> None:
        """``disallow("tag")`` for components with a fixed element kind."""
        self.disallow("tag")

    def merge_classes(self, *contributions: ClassContribution) -> str:
        """Compose ``contributions`` and store the result as ``classes``.

        Replaces the previous value. Include ``self.classes`` among the
        contributions to keep what was there.
        """
        composed = class_names(*contributions)
        self._data["classes"] = composed
        return composed

    def append_classes(self, *contributions: ClassContribution) -> str:
        """``merge_classes(self.classes, *contributions)``."""
        return self.merge_classes(self.classes, *contributions)

    def handle(self) -> ClassAppender:
        """A ``ClassAppender`` bound to this bag."""
        return ClassAppender(lambda contributions: self.append_classes(*contributions))

    # -- Output --------------------------------------------------------------

    def to_attributes(self) -> dict[str, Any]:
        """Flatten into final HTML attributes.

        ``class`` comes first (omitted when empty), utility arguments are
        folded into it, ``aria``/``data`` mappings are expanded, ``True``
        values stay ``True`` (boolean attributes), ``False``/``None`` are
        dropped, ``Markup`` is kept as is and everything else is stringified.

        Raises:
            ConfigurationError: A key does not make a valid HTML attribute
                name (whitespace, quotes, ``>``, ``/``, ``=``, control
                characters).
        """
        utility_classes, rest = classify(self._data)
        rest.pop("tag", None)
        attributes: dict[str, Any] = {}
        composed = class_names(rest.pop("classes", None), utility_classes)
        if composed:
            attributes["class"] = composed
        for key, value in rest.items():
            if key in _PREFIXED and isinstance(value, Mapping):
                for sub_key, sub_value in value.items():
                    _put(attributes, f"{key}-{attribute_name(str(sub_key))}", sub_value)
            else:
                _put(attributes, attribute_name(key), value)

        invalid = [name for name in attributes if not is_valid_attribute_name(name)]
        if invalid:
            owner = self.owner or "this component"
            raise ConfigurationError(
                f"Invalid attribute name(s) for {owner}: " + ", ".join(repr(name) for name in invalid),
                keys=invalid,
                component=self.owner,
                suggestion="Attribute names cannot contain whitespace, quotes, '>', '/' or '='",
            )
        return attributes


def _put(attributes: dict[str, Any], name: str, value: Any) -> None:
    if value is None or value is False:
        return
    if value is True or hasattr(value, "__html__"):
        attributes[name] = value
    else:
        attributes[name] = str(value)
