"""Button: the design system's button element."""

from __future__ import annotations

from typing import Any

from vellum.component import Component
from vellum.options import OptionMap

SCHEME = OptionMap(
    {
        "default": "",
        "primary": "btn-primary",
        "danger": "btn-danger",
        "outline": "btn-outline",
        "invisible": "btn-invisible",
        "link": "btn-link",
    },
    default="default",
    name="scheme",
)

SIZE = OptionMap(
    {
        "small": "btn-sm",
        "medium": "",
        "large": "btn-large",
    },
    default="medium",
    name="size",
)

TAG = OptionMap(("button", "a", "summary"), default="button", name="tag")

TYPE = OptionMap(("button", "reset", "submit"), default="button", name="type")


class Button(Component):
    """A button, link styled as a button, or ``<summary>`` toggle.

    Args:
        scheme: Color scheme, one of ``SCHEME``.
        size: One of ``SIZE``.
        block: Stretch to the container's width.
        tag: ``button``, ``a`` or ``summary``.
        type: Button type; only rendered for ``tag="button"``.
        **system_arguments: Forwarded to the element.
    """

    def __init__(
        self,
        *,
        scheme: str = SCHEME.default,
        size: str = SIZE.default,
        block: bool = False,
        tag: str = TAG.default,
        type: str = TYPE.default,
        **system_arguments: Any,
    ) -> None:
        super().__init__(**system_arguments)
        self.scheme = SCHEME.resolve(scheme)

        args = self.system_arguments
        args.tag = TAG.resolve(tag)
        if args.tag == "button":
            args["type"] = TYPE.resolve(type)
        args.merge_classes(
            "btn",
            SCHEME.classes_for(self.scheme),
            SIZE.classes_for(size),
            {"btn-block": block},
            args.classes,
        )
