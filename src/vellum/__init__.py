"""Vellum: declarative, server-rendered UI components for a design system.

Components are plain Python classes. Construction validates enumerated
options (falling back to defaults instead of failing), slots compose child
components, and rendering produces an immutable element tree that serializes
to HTML.

Quickstart:
    >>> from vellum import Layout, render_html
    >>> layout = Layout(column_gap="normal")
    >>> layout.main().with_content("Main")
    >>> layout.pane(position="end").with_content("Pane")
    >>> render_html(layout.render())
    Markup('<div class="LayoutBeta LayoutBeta--column-gap-normal ...">...</div>')

Writing a component:
    >>> class Card(Component):
    ...     title = renders_one(BaseComponent)
    ...
    ...     @renders_many
    ...     def actions(parent, *, primary=False, **system_arguments):
    ...         parent.add_classes({"Card--has-primary": primary})
    ...         return Button(scheme="primary" if primary else "default", **system_arguments)
    ...
    ...     def __init__(self, *, elevation="none", **system_arguments):
    ...         super().__init__(**system_arguments)
    ...         self.system_arguments.merge_classes(
    ...             "Card", ELEVATION.classes_for(elevation), self.system_arguments.classes
    ...         )

Architecture:
keyword configuration → OptionMap → class_names → SystemArguments
→ slot population → render predicate → Element tree → render_html

Error Handling:
Invalid option values never raise; they fall back to the option's default
and are reported according to ``Settings.fallback_policy``. Structural
mistakes raise ``ConfigurationError``, ``PreconditionError`` or
``ReuseError``. Broken component definitions raise ``DefinitionError``
subclasses at import time.

"""

from vellum.classes import ClassContribution, class_names, compose
from vellum.component import BaseComponent, Component, LifecycleState
from vellum.components import Bookend, Button, Dialog, Layout, Main, Pane
from vellum.exceptions import (
    ComponentError,
    ConfigurationError,
    DefinitionError,
    ErrorCode,
    InvalidSettingError,
    OptionDefinitionError,
    PreconditionError,
    ReuseError,
    SlotDefinitionError,
    UnknownSlotError,
)
from vellum.nodes import Element, Node, Text
from vellum.options import OptionMap, fetch_or_fallback
from vellum.settings import Settings, configure, get_settings
from vellum.slots import Cardinality, SlotDefinition, renders_many, renders_one
from vellum.system_arguments import ClassAppender, SystemArguments
from vellum.utils.html import Markup, html_escape, render_html

__version__ = "0.1.0"

__all__ = [
    "BaseComponent",
    "Bookend",
    "Button",
    "Cardinality",
    "ClassAppender",
    "ClassContribution",
    "Component",
    "ComponentError",
    "ConfigurationError",
    "DefinitionError",
    "Dialog",
    "Element",
    "ErrorCode",
    "InvalidSettingError",
    "Layout",
    "LifecycleState",
    "Main",
    "Markup",
    "Node",
    "OptionDefinitionError",
    "OptionMap",
    "Pane",
    "PreconditionError",
    "ReuseError",
    "Settings",
    "SlotDefinition",
    "SlotDefinitionError",
    "SystemArguments",
    "Text",
    "UnknownSlotError",
    "__version__",
    "class_names",
    "compose",
    "configure",
    "fetch_or_fallback",
    "get_settings",
    "html_escape",
    "render_html",
    "renders_many",
    "renders_one",
]
