"""Class-name composition.

``class_names()`` is the single place CSS class strings are built. It is pure
and order-stable: the same contributions always produce the same string,
which keeps rendered markup comparable across runs.

Contributions:
    - ``"a b"``: whitespace-separated tokens, in order
    - ``{"a": True, "b": False}``: keys whose condition is truthy, in mapping order
    - ``["a", {"b": True}]``: nested lists/tuples, flattened depth-first
    - ``None``, ``False``, ``""``, ``{}``: skipped

Tokens are deduplicated across the whole sequence; the first occurrence keeps
its position.

Example:
    >>> class_names("a b", {"c": True, "d": False}, "a")
    'a b c'

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Union

ClassContribution = Union[
    str,
    Mapping[str, object],
    "list[ClassContribution]",
    "tuple[ClassContribution, ...]",
    None,
    bool,
]


def iter_tokens(contribution: ClassContribution) -> Iterator[str]:
    """Yield the class tokens of a single contribution, in order."""
    if not contribution:
        return
    if isinstance(contribution, str):
        yield from contribution.split()
    elif isinstance(contribution, Mapping):
        for key, condition in contribution.items():
            if condition:
                yield from str(key).split()
    elif isinstance(contribution, (list, tuple)):
        for item in contribution:
            yield from iter_tokens(item)
    # Anything else (True, numbers) carries no class name.


def compose(contributions: Iterable[ClassContribution]) -> str:
    """Merge ``contributions`` into one deduplicated, space-separated string."""
    # dict preserves insertion order: first occurrence wins.
    seen: dict[str, None] = {}
    for contribution in contributions:
        for token in iter_tokens(contribution):
            seen.setdefault(token, None)
    return " ".join(seen)


def class_names(*contributions: ClassContribution) -> str:
    """Variadic form of ``compose()``."""
    return compose(contributions)
