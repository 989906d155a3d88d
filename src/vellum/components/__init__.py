"""Concrete design-system components built on the composition engine."""

from vellum.components.button import Button
from vellum.components.dialog import Dialog
from vellum.components.layout import Bookend, Layout, Main, Pane

__all__ = [
    "Bookend",
    "Button",
    "Dialog",
    "Layout",
    "Main",
    "Pane",
]
