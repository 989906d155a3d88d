"""Slots: named child regions declared on a component class.

Declaration::

    class Card(Component):
        header = renders_one(Bookend)          # component class: called with kwargs

        @renders_many
        def actions(parent, *, primary=False, **system_arguments):
            parent.add_classes({"Card--has-primary": primary})
            return Button(scheme="primary" if primary else "default", **system_arguments)

A factory is either a component class, called with the caller's keyword
arguments, or a function ``factory(parent, **kwargs)`` where ``parent`` is a
``ClassAppender`` for the parent's classes. Either way the factory owns option
resolution for the child it builds.

Population goes through the instance: ``card.header(divider=True)`` or
``card.populate("header", divider=True)``. A single slot keeps the last
population; a many-slot keeps every population in order.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from vellum.component import Component
    from vellum.system_arguments import ClassAppender

SlotFactory = Callable[..., "Component"]


class Cardinality(Enum):
    """How many children a slot holds."""

    SINGLE = "single"
    MANY = "many"


@dataclass(frozen=True, slots=True)
class SlotDefinition:
    """A declared slot: ``(name, cardinality, factory)``."""

    name: str
    cardinality: Cardinality
    factory: SlotFactory

    @property
    def many(self) -> bool:
        return self.cardinality is Cardinality.MANY

    def build(self, parent: ClassAppender, arguments: Mapping[str, Any]) -> Component:
        """Run the factory for one population call."""
        if isinstance(self.factory, type):
            return self.factory(**arguments)
        return self.factory(parent, **arguments)


class SlotDescriptor:
    """Class attribute created by ``renders_one``/``renders_many``.

    On the class it exposes the ``SlotDefinition``; on an instance it returns a
    ``SlotAccessor`` bound to that instance.
    """

    __slots__ = ("cardinality", "definition", "factory")

    def __init__(self, cardinality: Cardinality, factory: SlotFactory) -> None:
        self.cardinality = cardinality
        self.factory = factory
        self.definition: SlotDefinition | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.definition = SlotDefinition(name, self.cardinality, self.factory)

    def __get__(self, instance: Component | None, owner: type | None = None) -> Any:
        if instance is None:
            return self
        assert self.definition is not None
        return SlotAccessor(instance, self.definition)


class SlotAccessor:
    """Per-instance view of one slot.

    Calling it populates the slot; ``present`` and iteration inspect it.
    """

    __slots__ = ("_component", "_definition")

    def __init__(self, component: Component, definition: SlotDefinition) -> None:
        self._component = component
        self._definition = definition

    def __call__(self, **arguments: Any) -> Component:
        return self._component.populate(self._definition.name, **arguments)

    @property
    def name(self) -> str:
        return self._definition.name

    @property
    def present(self) -> bool:
        return self._component.present(self._definition.name)

    @property
    def value(self) -> Component | list[Component] | None:
        """The populated child (single) or children (many)."""
        return self._component.slot(self._definition.name)

    def __bool__(self) -> bool:
        return self.present

    def __iter__(self) -> Iterator[Component]:
        value = self.value
        if value is None:
            return iter(())
        if isinstance(value, list):
            return iter(value)
        return iter((value,))

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"<SlotAccessor {type(self._component).__name__}.{self.name} present={self.present}>"


def renders_one(factory: SlotFactory) -> SlotDescriptor:
    """Declare a slot holding at most one child. Usable as a decorator."""
    return SlotDescriptor(Cardinality.SINGLE, factory)


def renders_many(factory: SlotFactory) -> SlotDescriptor:
    """Declare a slot holding an ordered list of children. Usable as a decorator."""
    return SlotDescriptor(Cardinality.MANY, factory)
