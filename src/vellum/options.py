"""Enumerated option resolution with silent fallback.

Every enumerated component argument (spacing scales, tags, schemes, ...) is
resolved through this module exactly once, at component construction:

    >>> OUTER_SPACING = OptionMap(
    ...     {"none": "", "normal": "LayoutBeta--outer-spacing-normal"},
    ...     default="none",
    ...     name="outer_spacing",
    ... )
    >>> OUTER_SPACING.resolve("normal")
    'normal'
    >>> OUTER_SPACING.resolve("huge")  # not allowed: falls back, never raises
    'none'
    >>> OUTER_SPACING.classes_for("normal")
    'LayoutBeta--outer-spacing-normal'

Malformed caller input degrades to the default instead of failing the render.
How loudly that happens is governed by ``Settings.fallback_policy``. A default
that is not itself allowed is a bug in the component definition and raises
``OptionDefinitionError`` when the OptionMap is created.

"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from vellum.exceptions import OptionDefinitionError
from vellum.settings import get_settings

logger = logging.getLogger(__name__)


def is_allowed(candidate: Any, allowed: Iterable[Any]) -> bool:
    """Membership test that never raises and keeps bools apart from ints.

    ``True in [1]`` is true in Python; for option sets ``True`` and ``1``
    are different values.
    """
    for value in allowed:
        if type(value) is type(candidate) and value == candidate:
            return True
        # Numeric tower (e.g. 2 vs 2.0) is fine, bool is not part of it here.
        if (
            isinstance(value, (int, float))
            and isinstance(candidate, (int, float))
            and not isinstance(value, bool)
            and not isinstance(candidate, bool)
            and value == candidate
        ):
            return True
    return False


def report_fallback(
    candidate: Any,
    default: Any,
    allowed: Iterable[Any],
    *,
    name: str | None = None,
) -> None:
    """Emit the fallback diagnostic selected by the current settings."""
    policy = get_settings().fallback_policy
    if policy == "ignore":
        return
    label = f"{name!r} " if name else ""
    choices = ", ".join(repr(value) for value in allowed)
    message = (
        f"Invalid {label}option {candidate!r}; falling back to {default!r} "
        f"(allowed: {choices})"
    )
    if policy == "warn":
        warnings.warn(message, UserWarning, stacklevel=3)
    else:
        logger.warning(message)


def fetch_or_fallback(
    allowed: Iterable[Any],
    candidate: Any,
    default: Any,
    *,
    name: str | None = None,
) -> Any:
    """Return ``candidate`` if it is in ``allowed``, else ``default``.

    Never raises for a bad candidate. The caller is responsible for
    ``default`` being allowed; ``OptionMap`` checks that up front.
    """
    allowed = tuple(allowed)
    if is_allowed(candidate, allowed):
        return candidate
    report_fallback(candidate, default, allowed, name=name)
    return default


class OptionMap:
    """An enumerated option set with a default, optionally mapped to classes.

    Args:
        mappings: Either a mapping of option value to CSS class token (empty
            string or ``None`` for "no class"), or a plain iterable of allowed
            values.
        default: Value used when a candidate is not allowed. Must be one of
            the allowed values.
        name: Argument name, used in fallback diagnostics.

    Raises:
        OptionDefinitionError: If ``default`` is not an allowed value.
    """

    __slots__ = ("_mappings", "default", "name")

    def __init__(
        self,
        mappings: Mapping[Any, str | None] | Iterable[Any],
        *,
        default: Any,
        name: str | None = None,
    ) -> None:
        if isinstance(mappings, Mapping):
            self._mappings: dict[Any, str | None] = dict(mappings)
        else:
            self._mappings = dict.fromkeys(mappings)
        self.name = name
        if not is_allowed(default, self._mappings):
            label = f" for {name!r}" if name else ""
            raise OptionDefinitionError(
                f"Default {default!r}{label} is not one of the allowed options "
                f"{tuple(self._mappings)!r}",
                suggestion="Add the default to the option set or pick an allowed default",
            )
        self.default = default

    @property
    def options(self) -> tuple[Any, ...]:
        """Allowed values in declaration order."""
        return tuple(self._mappings)

    def resolve(self, candidate: Any) -> Any:
        """Return ``candidate`` when allowed, otherwise the default."""
        return fetch_or_fallback(self._mappings, candidate, self.default, name=self.name)

    def classes_for(self, candidate: Any) -> str | None:
        """Resolve ``candidate`` and return its mapped class token."""
        return self._mappings[self.resolve(candidate)]

    def __contains__(self, candidate: object) -> bool:
        return is_allowed(candidate, self._mappings)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._mappings)

    def __len__(self) -> int:
        return len(self._mappings)

    def __repr__(self) -> str:
        label = f"{self.name}: " if self.name else ""
        return f"OptionMap({label}{self.options!r}, default={self.default!r})"
