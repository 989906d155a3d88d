"""Vellum Settings: library configuration scoped with a ContextVar.

Settings are read wherever the engine needs a policy decision: how loudly
to report option fallbacks, and how to mint element ids for components that
wire ARIA references (e.g. Dialog). They are immutable; ``configure()``
installs an overridden copy for the duration of a ``with`` block and restores
the previous settings on exit.

Example:
    >>> from vellum.settings import configure
    >>> with configure(fallback_policy="warn"):
    ...     Layout(outer_spacing="huge")  # UserWarning, falls back to "none"

Environment:
    VELLUM_FALLBACK_POLICY: default fallback policy for ``Settings.from_env()``
    (``ignore``, ``log`` or ``warn``).

"""

from __future__ import annotations

import os
import secrets
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field, replace
from typing import Any, Literal

from vellum.exceptions import InvalidSettingError

FallbackPolicy = Literal["ignore", "log", "warn"]

FALLBACK_POLICIES: frozenset[str] = frozenset({"ignore", "log", "warn"})

ENV_FALLBACK_POLICY = "VELLUM_FALLBACK_POLICY"


def random_hex_id() -> str:
    """Eight hex characters, unique enough to disambiguate ids on one page."""
    return secrets.token_hex(4)


@dataclass(frozen=True, slots=True)
class Settings:
    """Engine-wide policy knobs.

    Attributes:
        fallback_policy: What happens when an option value is not allowed and
            the default is substituted. ``"ignore"`` stays silent, ``"log"``
            logs a warning on the ``vellum.options`` logger, ``"warn"`` emits
            a ``UserWarning``. The value always falls back; none of the
            policies raise.
        id_prefix: Prepended to every generated element id.
        id_factory: Zero-argument callable returning the unique part of a
            generated id. Tests swap in a deterministic counter.
    """

    fallback_policy: FallbackPolicy = "log"
    id_prefix: str = ""
    id_factory: Callable[[], str] = field(default=random_hex_id, compare=False)

    def __post_init__(self) -> None:
        if self.fallback_policy not in FALLBACK_POLICIES:
            raise InvalidSettingError(
                f"Unknown fallback_policy {self.fallback_policy!r}",
                keys=("fallback_policy",),
                suggestion="Use one of: " + ", ".join(sorted(FALLBACK_POLICIES)),
            )
        if not callable(self.id_factory):
            raise InvalidSettingError(
                "id_factory must be callable",
                keys=("id_factory",),
            )

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> Settings:
        """Build settings from environment variables, defaulting the rest."""
        environ = os.environ if environ is None else environ
        policy = environ.get(ENV_FALLBACK_POLICY, "").strip().lower()
        if not policy:
            return cls()
        return cls(fallback_policy=policy)  # type: ignore[arg-type]

    def generate_id(self, stem: str, unique: str | None = None) -> str:
        """Return ``"{prefix}{stem}-{unique}"``, minting ``unique`` when not given.

        Pass the same ``unique`` to build related ids (a title and the
        description next to it) that share one suffix.
        """
        if unique is None:
            unique = self.id_factory()
        return f"{self.id_prefix}{stem}-{unique}"


_settings: ContextVar[Settings | None] = ContextVar("vellum_settings", default=None)

_DEFAULT_SETTINGS: Settings | None = None


def _default_settings() -> Settings:
    global _DEFAULT_SETTINGS
    if _DEFAULT_SETTINGS is None:
        _DEFAULT_SETTINGS = Settings.from_env()
    return _DEFAULT_SETTINGS


def get_settings() -> Settings:
    """Current settings: the innermost ``configure()`` block, else defaults."""
    current = _settings.get()
    if current is None:
        return _default_settings()
    return current


@contextmanager
def configure(**overrides: Any) -> Iterator[Settings]:
    """Install settings overridden with ``overrides`` for the block.

    Overrides apply on top of the current settings, so nested blocks
    compose.

    Raises:
        InvalidSettingError: Unknown setting name or unusable value.
    """
    base = get_settings()
    unknown = set(overrides) - set(Settings.__dataclass_fields__)
    if unknown:
        raise InvalidSettingError(
            "Unknown setting(s): " + ", ".join(sorted(unknown)),
            keys=sorted(unknown),
        )
    new = replace(base, **overrides)
    token: Token[Settings | None] = _settings.set(new)
    try:
        yield new
    finally:
        _settings.reset(token)
