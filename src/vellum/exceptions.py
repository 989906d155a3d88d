"""Exceptions for the Vellum component engine.

Exception Hierarchy:
ComponentError (base)
├── ConfigurationError        # Caller supplied a structurally forbidden key
│   ├── UnknownSlotError      # Population of a slot the component never declared
│   └── InvalidSettingError   # Settings override with an unusable value
├── PreconditionError         # render() on a component whose predicate is false
├── ReuseError                # Populate/render after the component was rendered
└── DefinitionError           # Bug in a component class definition
    ├── OptionDefinitionError # Option default is not an allowed value
    └── SlotDefinitionError   # Slot declared twice on the same class

Invalid option *values* are never errors: they fall back to the option's
default (see ``vellum.options``). Everything listed here propagates to the
immediate caller unmodified.

Example:
    ```
    V-CFG-001: 'tag' is not allowed for Dialog
      Hint: Dialog fixes its rendered element; remove the 'tag' argument
    ```

"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from vellum.utils import terminal


class ErrorCode(Enum):
    """Searchable error codes.

    Format: V-{CATEGORY}-{NUMBER}
    Categories: CFG (configuration), REN (render lifecycle), DEF (definition)
    """

    # Configuration errors (V-CFG-xxx)
    DISALLOWED_ARGUMENT = "V-CFG-001"
    UNKNOWN_SLOT = "V-CFG-002"
    INVALID_SETTING = "V-CFG-003"

    # Render lifecycle errors (V-REN-xxx)
    RENDER_PRECONDITION = "V-REN-001"
    COMPONENT_REUSE = "V-REN-002"

    # Definition errors (V-DEF-xxx)
    INVALID_OPTION_DEFAULT = "V-DEF-001"
    DUPLICATE_SLOT = "V-DEF-002"

    @property
    def category(self) -> str:
        """Error category (e.g., 'configuration', 'render', 'definition')."""
        prefix = self.value.split("-")[1]
        return {
            "CFG": "configuration",
            "REN": "render",
            "DEF": "definition",
        }.get(prefix, "unknown")


class ComponentError(Exception):
    """Base exception for all Vellum component errors.

    Attributes:
        message: Error description without code or hint.
        component: Name of the component class involved, if known.
        suggestion: Actionable fix, shown as a hint.
        code: ErrorCode for searchable identification.
    """

    code: ErrorCode | None = None

    def __init__(
        self,
        message: str,
        *,
        component: str | None = None,
        suggestion: str | None = None,
    ):
        self.message = message
        self.component = component
        self.suggestion = suggestion
        super().__init__(message)

    def format_compact(self) -> str:
        """Format the error as a short, styled terminal diagnostic.

        Format::

            V-REN-001: Layout cannot render without its required slots
              Component: Layout
              Hint: populate both 'main' and 'pane'
        """
        parts = [terminal.format_error_header(self.code.value if self.code else None, self.message)]
        if self.component:
            parts.append(f"  {terminal.dim_text('Component:')} {terminal.component_name(self.component)}")
        if self.suggestion:
            parts.append(f"  {terminal.hint('Hint:')} {self.suggestion}")
        return "\n".join(parts)


class ConfigurationError(ComponentError):
    """The caller supplied configuration the component structurally forbids.

    Raised by ``SystemArguments.disallow()`` when, for example, a caller tries
    to override the tag of a component whose element kind is fixed.

    Attributes:
        keys: The forbidden keys that were present.
    """

    code: ErrorCode | None = ErrorCode.DISALLOWED_ARGUMENT

    def __init__(
        self,
        message: str,
        *,
        keys: Iterable[str] = (),
        component: str | None = None,
        suggestion: str | None = None,
    ):
        self.keys = tuple(keys)
        super().__init__(message, component=component, suggestion=suggestion)


class UnknownSlotError(ConfigurationError):
    """A slot name was used that the component does not declare."""

    code: ErrorCode | None = ErrorCode.UNKNOWN_SLOT

    def __init__(self, name: str, *, component: str, available: Iterable[str] = ()):
        self.slot_name = name
        available = tuple(available)
        suggestion = None
        if available:
            from difflib import get_close_matches

            matches = get_close_matches(name, available, n=1, cutoff=0.6)
            if matches:
                suggestion = f"Did you mean '{terminal.suggestion(matches[0])}'?"
            else:
                suggestion = "Declared slots: " + ", ".join(available)
        super().__init__(
            f"{component} has no slot named '{name}'",
            keys=(name,),
            component=component,
            suggestion=suggestion,
        )


class InvalidSettingError(ConfigurationError):
    """A settings override has a value the library cannot use."""

    code: ErrorCode | None = ErrorCode.INVALID_SETTING


class PreconditionError(ComponentError):
    """render() was called on a component whose render predicate is false.

    Pass ``allow_empty=True`` to ``render()`` to receive ``None`` instead.
    """

    code: ErrorCode | None = ErrorCode.RENDER_PRECONDITION


class ReuseError(ComponentError):
    """A rendered component was populated or rendered again.

    Components are built for exactly one render pass; construct a new
    instance for every render.
    """

    code: ErrorCode | None = ErrorCode.COMPONENT_REUSE


class DefinitionError(ComponentError):
    """A component class is internally inconsistent.

    Raised while component classes and their option sets are being defined,
    normally at import time, never in response to caller input.
    """


class OptionDefinitionError(DefinitionError):
    """An option set was defined with a default that is not an allowed value."""

    code: ErrorCode | None = ErrorCode.INVALID_OPTION_DEFAULT


class SlotDefinitionError(DefinitionError):
    """A slot was declared twice on one class, or its name shadows a Component attribute."""

    code: ErrorCode | None = ErrorCode.DUPLICATE_SLOT
