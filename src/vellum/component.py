"""Component: the composition unit of the design system.

A component is built in three steps, each a plain synchronous call:

1. **Construct** with keyword configuration. ``__init__`` resolves every
   enumerated option through an ``OptionMap`` and composes the element's
   classes into ``self.system_arguments``. Slots are not touched.
2. **Configure**: populate slots (``layout.main(width="md")``) and attach
   content (``with_content("Hello")``).
3. **Render** once: ``render()`` checks the render predicate and returns an
   immutable ``Element`` tree for ``vellum.utils.html.render_html``.

Lifecycle:
    CONSTRUCTED -> CONFIGURING -> RENDERED

There is no way back. Populating or rendering a rendered component raises
``ReuseError``; build a new instance for every render.

Example:
    >>> layout = Layout(outer_spacing="normal")
    >>> layout.main().with_content("Main")
    >>> layout.pane(position="end").with_content("Pane")
    >>> html = render_html(layout.render())

Thread-Safety:
    None. An instance belongs to the single request building it and must not
    be shared. Class-level slot definitions are read-only after import.

"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, ClassVar

from vellum.classes import ClassContribution, compose
from vellum.exceptions import (
    PreconditionError,
    ReuseError,
    SlotDefinitionError,
    UnknownSlotError,
)
from vellum.nodes import Element, Node, Text
from vellum.slots import Cardinality, SlotDefinition, SlotDescriptor, SlotFactory
from vellum.system_arguments import ClassAppender, SystemArguments

logger = logging.getLogger(__name__)


class LifecycleState(Enum):
    CONSTRUCTED = "constructed"
    CONFIGURING = "configuring"
    RENDERED = "rendered"


def to_nodes(content: Any) -> list[Node]:
    """Normalize body content into tree nodes.

    Accepts ``None``, strings, objects with ``__html__`` (kept unescaped),
    ``Element``/``Text`` nodes, components (rendered in place, omitted when
    their predicate is false) and lists/tuples of any of these.
    """
    if content is None:
        return []
    if isinstance(content, (Element, Text)):
        return [content]
    if isinstance(content, Component):
        element = content.render(allow_empty=True)
        return [] if element is None else [element]
    if hasattr(content, "__html__"):
        return [Text(str(content.__html__()), safe=True)]
    if isinstance(content, (list, tuple)):
        nodes: list[Node] = []
        for item in content:
            nodes.extend(to_nodes(item))
        return nodes
    return [Text(str(content))]


# Instance attributes a slot accessor would otherwise be hidden behind.
_INSTANCE_ATTRIBUTES = frozenset({"content", "system_arguments"})


def _check_slot_name(cls: type, name: str) -> None:
    if name in vars(Component) or name in _INSTANCE_ATTRIBUTES:
        raise SlotDefinitionError(
            f"Slot name '{name}' clashes with Component.{name}",
            component=cls.__name__,
        )


class Component:
    """Base class for every component.

    Subclasses call ``super().__init__(**system_arguments)`` first, then
    resolve their own options and adjust ``self.system_arguments``.

    Class Attributes:
        required_slots: Slots that must all be present for the default
            ``should_render()`` to pass.

    Attributes:
        system_arguments: The element's configuration bag.
        content: Body content attached with ``with_content()``.
    """

    required_slots: ClassVar[tuple[str, ...]] = ()

    _slot_definitions: ClassVar[dict[str, SlotDefinition]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        # Inherited slots keep their position; a redeclared name replaces in place.
        definitions = dict(cls._slot_definitions)
        for attr, value in cls.__dict__.items():
            if isinstance(value, SlotDescriptor):
                _check_slot_name(cls, attr)
                assert value.definition is not None
                definitions[attr] = value.definition
        cls._slot_definitions = definitions

    def __init__(self, **system_arguments: Any) -> None:
        self.system_arguments = SystemArguments(system_arguments, owner=type(self).__name__)
        self.content: Any = None
        self._state = LifecycleState.CONSTRUCTED
        self._slots: dict[str, Component | list[Component]] = {}
        self._slot_classes: dict[str, list[ClassContribution]] = {}
        # Tokens the last fold added on top of the component's own classes.
        self._slot_tokens: frozenset[str] = frozenset()

    # -- Slot declaration ----------------------------------------------------

    @classmethod
    def declare_slot(cls, name: str, cardinality: Cardinality, factory: SlotFactory) -> None:
        """Imperative form of ``renders_one``/``renders_many``.

        Raises:
            SlotDefinitionError: ``name`` is already declared on this very
                class, or shadows a Component attribute.
        """
        _check_slot_name(cls, name)
        if isinstance(cls.__dict__.get(name), SlotDescriptor):
            raise SlotDefinitionError(
                f"Slot '{name}' is already declared on {cls.__name__}",
                component=cls.__name__,
            )
        descriptor = SlotDescriptor(cardinality, factory)
        setattr(cls, name, descriptor)
        descriptor.__set_name__(cls, name)
        assert descriptor.definition is not None
        cls._slot_definitions = {**cls._slot_definitions, name: descriptor.definition}

    @classmethod
    def slot_names(cls) -> tuple[str, ...]:
        """Declared slot names in declaration order."""
        return tuple(cls._slot_definitions)

    # -- Lifecycle -----------------------------------------------------------

    @property
    def state(self) -> LifecycleState:
        return self._state

    def _begin_configuring(self, action: str) -> None:
        if self._state is LifecycleState.RENDERED:
            raise ReuseError(
                f"Cannot {action} after {type(self).__name__} was rendered",
                component=type(self).__name__,
                suggestion="Construct a new component for each render",
            )
        if self._state is LifecycleState.CONSTRUCTED:
            self._state = LifecycleState.CONFIGURING

    def with_content(self, content: Any) -> Component:
        """Attach body content; returns ``self`` for chaining."""
        self._begin_configuring("set content")
        self.content = content
        return self

    # -- Slots ---------------------------------------------------------------

    def _definition(self, name: str) -> SlotDefinition:
        try:
            return self._slot_definitions[name]
        except KeyError:
            raise UnknownSlotError(
                name,
                component=type(self).__name__,
                available=self._slot_definitions,
            ) from None

    def populate(self, name: str, /, **arguments: Any) -> Component:
        """Build a child for slot ``name`` from ``arguments`` and attach it.

        A single slot is overwritten, together with the classes its previous
        population added to this component. A many-slot appends.

        Returns:
            The child component, so content can be chained onto it.

        Raises:
            UnknownSlotError: ``name`` is not declared.
            ReuseError: This component was already rendered.
        """
        definition = self._definition(name)
        self._begin_configuring(f"populate slot '{name}'")

        pending: list[ClassContribution] = []
        child = definition.build(ClassAppender(pending.extend), arguments)

        # Commit only after the factory succeeded.
        if definition.many:
            children = self._slots.setdefault(name, [])
            assert isinstance(children, list)
            children.append(child)
            self._slot_classes.setdefault(name, []).extend(pending)
        else:
            self._slots[name] = child
            self._slot_classes[name] = pending
        self._refresh_classes()
        logger.debug(f"{type(self).__name__}: populated slot '{name}' with {type(child).__name__}")
        return child

    def _refresh_classes(self) -> None:
        # Own classes are re-read on every fold, so writes made through
        # system_arguments between populations survive. Slot contributions
        # follow in declaration order, independent of population order.
        own = [token for token in self.system_arguments.classes.split() if token not in self._slot_tokens]
        contributions: list[ClassContribution] = [own]
        for name in self._slot_definitions:
            contributions.extend(self._slot_classes.get(name, ()))
        composed = compose(contributions)
        self._slot_tokens = frozenset(composed.split()).difference(own)
        self.system_arguments["classes"] = composed

    def present(self, name: str) -> bool:
        """True if single slot ``name`` is populated or many-slot ``name`` is non-empty."""
        self._definition(name)
        return bool(self._slots.get(name))

    def slot(self, name: str) -> Component | list[Component] | None:
        """The child (single slot) or a copy of the children list (many-slot)."""
        definition = self._definition(name)
        value = self._slots.get(name)
        if definition.many:
            return list(value) if isinstance(value, list) else []
        return value if isinstance(value, Component) else None

    # -- Rendering -----------------------------------------------------------

    def should_render(self) -> bool:
        """Render predicate. Default: every ``required_slots`` entry is present."""
        return all(self.present(name) for name in self.required_slots)

    def render(self, *, allow_empty: bool = False) -> Element | None:
        """Assemble the element tree.

        Args:
            allow_empty: Return ``None`` instead of raising when the render
                predicate is false.

        Raises:
            PreconditionError: Predicate is false and ``allow_empty`` is not set.
                The component stays configurable.
            ReuseError: The component was already rendered.
        """
        name = type(self).__name__
        if self._state is LifecycleState.RENDERED:
            raise ReuseError(
                f"{name} was already rendered",
                component=name,
                suggestion="Construct a new component for each render",
            )
        if not self.should_render():
            if not allow_empty:
                missing = [slot for slot in self.required_slots if not self.present(slot)]
                hint = (
                    "Populate " + ", ".join(f"'{slot}'" for slot in missing)
                    if missing
                    else None
                )
                raise PreconditionError(
                    f"{name} has nothing to render",
                    component=name,
                    suggestion=hint,
                )
            self._state = LifecycleState.RENDERED
            logger.debug(f"{name}: render predicate false, producing no output")
            return None
        self._state = LifecycleState.RENDERED
        logger.debug(f"{name}: rendering")
        return self.call()

    def call(self) -> Element:
        """Build this component's element. Override for custom structure.

        Default: one element from ``system_arguments`` holding the content,
        then every slot's children in declaration order.
        """
        return self.element(*self.render_content(), *self.render_slots())

    def element(self, *children: Node, system_arguments: SystemArguments | None = None) -> Element:
        """An ``Element`` from ``system_arguments`` (defaults to this component's)."""
        arguments = self.system_arguments if system_arguments is None else system_arguments
        return Element(arguments.tag, arguments.to_attributes(), tuple(children))

    def render_content(self) -> list[Node]:
        return to_nodes(self.content)

    def render_slot(self, name: str) -> list[Node]:
        """Rendered children of one slot, in population order."""
        value = self.slot(name)
        return to_nodes(value)

    def render_slots(self) -> list[Node]:
        nodes: list[Node] = []
        for name in self._slot_definitions:
            nodes.extend(self.render_slot(name))
        return nodes

    def __repr__(self) -> str:
        return f"<{type(self).__name__} state={self._state.value}>"


class BaseComponent(Component):
    """A plain element: ``BaseComponent(tag="p", classes="note", mt=2)``."""

    def __init__(self, *, tag: str = "div", **system_arguments: Any) -> None:
        super().__init__(**system_arguments)
        self.system_arguments.tag = tag
