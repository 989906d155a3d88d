"""Utility system arguments: spacing, border and container shorthands.

Any component accepts these as keyword arguments next to its own options;
``SystemArguments.to_attributes()`` turns them into utility classes instead of
HTML attributes:

    ==============  ===========================  =================
    Argument        Values                       Class
    ==============  ===========================  =================
    ``mt=3``        0-6 (margins also "auto")    ``mt-3``
    ``px=2``        0-6                          ``px-2``
    ``border=True`` True, top/right/bottom/left  ``border``,
                                                 ``border-top``, ...
    ``container=``  sm, md, lg, xl               ``container-md``
    ==============  ===========================  =================

Invalid values are dropped through the same fallback path as component
options; a bad utility never fails a render.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from vellum.options import OptionMap, is_allowed, report_fallback

SPACING_SCALE: tuple[int, ...] = (0, 1, 2, 3, 4, 5, 6)

MARGIN_KEYS: frozenset[str] = frozenset({"m", "mt", "mr", "mb", "ml", "mx", "my"})
PADDING_KEYS: frozenset[str] = frozenset({"p", "pt", "pr", "pb", "pl", "px", "py"})

# Vertical-only margins have no "auto" counterpart.
_AUTO_MARGIN_KEYS: frozenset[str] = frozenset({"m", "mr", "ml", "mx"})

BORDER_SIDES: tuple[str, ...] = ("top", "right", "bottom", "left")

CONTAINER = OptionMap(
    {
        "sm": "container-sm",
        "md": "container-md",
        "lg": "container-lg",
        "xl": "container-xl",
    },
    default="md",
    name="container",
)

UTILITY_KEYS: frozenset[str] = MARGIN_KEYS | PADDING_KEYS | {"border", "container"}


def _spacing_values(key: str) -> tuple[Any, ...]:
    if key in _AUTO_MARGIN_KEYS:
        return (*SPACING_SCALE, "auto")
    return SPACING_SCALE


def utility_class(key: str, value: Any) -> str | None:
    """Return the class for one utility argument, or ``None`` to drop it.

    ``None`` and ``False`` mean "not set" and are dropped silently.
    """
    if value is None or value is False:
        return None
    if key in MARGIN_KEYS or key in PADDING_KEYS:
        allowed = _spacing_values(key)
        if not is_allowed(value, allowed):
            report_fallback(value, None, allowed, name=key)
            return None
        return f"{key}-{value}"
    if key == "border":
        if value is True:
            return "border"
        if not is_allowed(value, BORDER_SIDES):
            report_fallback(value, None, (True, *BORDER_SIDES), name=key)
            return None
        return f"border-{value}"
    if key == "container":
        if value not in CONTAINER:
            report_fallback(value, None, CONTAINER.options, name=key)
            return None
        return CONTAINER.classes_for(value)
    return None


def classify(arguments: Mapping[str, Any]) -> tuple[list[str], dict[str, Any]]:
    """Split ``arguments`` into utility classes and remaining arguments.

    Returns:
        ``(classes, rest)``: utility classes in argument order, and every
        non-utility argument untouched.
    """
    classes: list[str] = []
    rest: dict[str, Any] = {}
    for key, value in arguments.items():
        if key in UTILITY_KEYS:
            utility = utility_class(key, value)
            if utility:
                classes.append(utility)
        else:
            rest[key] = value
    return classes, rest
