"""Layout: responsive page scaffold with main content and a pane.

``Layout`` flows as columns when there is room for ``main`` and ``pane`` side
by side, and as stacked rows on narrow viewports. Optional ``header`` and
``footer`` regions span the full width.

Most of the pane's and bookends' configuration lands on the *Layout* element,
not on the region itself: the CSS grid lives on the wrapper, so the slot
factories write their classes to the parent through the ``ClassAppender``.

Example:
    >>> layout = Layout(column_gap="normal")
    >>> layout.header(divider=True).with_content("Header")
    >>> layout.main(width="lg").with_content("Main")
    >>> layout.pane(position="end", sticky=True).with_content("Pane")
    >>> render_html(layout.render())

Layout renders nothing unless both ``main`` and ``pane`` are populated.

Accessibility:
    Keyboard navigation follows markup order (header, main, pane, footer),
    whatever the visual pane position.
"""

from __future__ import annotations

from typing import Any

from vellum.classes import class_names
from vellum.component import BaseComponent, Component, to_nodes
from vellum.nodes import Element
from vellum.options import OptionMap
from vellum.slots import renders_one
from vellum.system_arguments import ClassAppender

WRAPPER_SIZING = OptionMap(
    {
        "fluid": "",
        "md": "container-md",
        "lg": "container-lg",
        "xl": "container-xl",
    },
    default="fluid",
    name="wrapper_sizing",
)

OUTER_SPACING = OptionMap(
    {
        "none": "",
        "normal": "LayoutBeta--outer-spacing-normal",
        "condensed": "LayoutBeta--outer-spacing-condensed",
    },
    default="none",
    name="outer_spacing",
)

INNER_SPACING = OptionMap(
    {
        "none": "",
        "normal": "LayoutBeta--inner-spacing-normal",
        "condensed": "LayoutBeta--inner-spacing-condensed",
    },
    default="none",
    name="inner_spacing",
)

COLUMN_GAP = OptionMap(
    {
        "none": "",
        "normal": "LayoutBeta--column-gap-normal",
        "condensed": "LayoutBeta--column-gap-condensed",
    },
    default="none",
    name="column_gap",
)

ROW_GAP = OptionMap(
    {
        "none": "",
        "normal": "LayoutBeta--row-gap-normal",
        "condensed": "LayoutBeta--row-gap-condensed",
    },
    default="none",
    name="row_gap",
)

RESPONSIVE_BEHAVIOR = OptionMap(
    {
        "flow_vertical": "LayoutBeta--responsive-flowVertical",
        "split_as_pages": "LayoutBeta--responsive-splitAsPages",
    },
    default="flow_vertical",
    name="responsive_behavior",
)

PANE_WIDTH = OptionMap(
    {
        "default": "",
        "narrow": "LayoutBeta--pane-width-narrow",
        "wide": "LayoutBeta--pane-width-wide",
    },
    default="default",
    name="width",
)

PANE_POSITION = OptionMap(
    {
        "start": "LayoutBeta--pane-position-start",
        "end": "LayoutBeta--pane-position-end",
    },
    default="start",
    name="position",
)

PANE_RESPONSIVE_POSITION = OptionMap(
    {
        "inherit": "",
        "start": "LayoutBeta--pane-responsive-position-start",
        "end": "LayoutBeta--pane-responsive-position-end",
    },
    default="inherit",
    name="responsive_position",
)

MAIN_WIDTH = OptionMap(("full", "md", "lg", "xl"), default="full", name="width")

MAIN_TAG = OptionMap(("div", "main"), default="div", name="tag")

PANE_TAG = OptionMap(("div", "aside", "nav", "section"), default="div", name="tag")

BOOKEND_RESPONSIVE_DIVIDER = OptionMap(
    {
        "none": "",
        "line": "LayoutBeta-region--line-divider",
        "shallow": "LayoutBeta-region--shallow-divider",
    },
    default="none",
    name="responsive_divider",
)


class Main(Component):
    """The layout's main content.

    With a non-``full`` width the content is centered inside a
    ``container-{width}`` box.
    """

    def __init__(self, *, tag: str = MAIN_TAG.default, width: str = MAIN_WIDTH.default, **system_arguments: Any) -> None:
        super().__init__(**system_arguments)
        self.width = MAIN_WIDTH.resolve(width)
        self.system_arguments.tag = MAIN_TAG.resolve(tag)
        self.system_arguments.merge_classes("LayoutBeta-content", self.system_arguments.classes)

    def call(self) -> Element:
        if self.width == "full":
            return self.element(*self.render_content())
        container = BaseComponent(container=self.width).with_content(self.content)
        centered = BaseComponent(classes=f"Layout-main-centered-{self.width}").with_content(container)
        return self.element(*to_nodes(centered))


class Pane(Component):
    """The layout's secondary region, paired with ``Main``."""

    def __init__(self, *, tag: str = PANE_TAG.default, **system_arguments: Any) -> None:
        super().__init__(**system_arguments)
        self.system_arguments.tag = PANE_TAG.resolve(tag)
        self.system_arguments.merge_classes("LayoutBeta-pane", self.system_arguments.classes)


class Bookend(Component):
    """Header or footer region; built by the ``header``/``footer`` slots."""

    def __init__(self, *, responsive_divider: str = BOOKEND_RESPONSIVE_DIVIDER.default, **system_arguments: Any) -> None:
        super().__init__(**system_arguments)
        self.system_arguments.tag = "div"
        self.system_arguments.merge_classes(
            self.system_arguments.classes,
            "LayoutBeta-region",
            BOOKEND_RESPONSIVE_DIVIDER.classes_for(responsive_divider),
        )


class Layout(Component):
    """Foundational responsive page layout.

    Args:
        wrapper_sizing: Width of the layout container; ``fluid`` is full width.
        outer_spacing: Margin between the layout and the viewport edges.
        inner_spacing: Padding inside each region.
        column_gap: Gap between main and pane.
        row_gap: Gap below the header and above the footer.
        responsive_behavior: ``flow_vertical`` stacks pane and main on narrow
            viewports; ``split_as_pages`` shows them as separate pages.
        responsive_show_pane_first: Show the pane first when responsive.
        **system_arguments: Forwarded to the wrapper element.
    """

    required_slots = ("main", "pane")

    @renders_one
    def header(parent: ClassAppender, *, divider: bool = False, **system_arguments: Any) -> Component:
        """Full-width region above main and pane."""
        parent.add_classes("LayoutBeta--has-header", {"LayoutBeta--header-divider": divider})
        system_arguments["classes"] = class_names(system_arguments.get("classes"), "LayoutBeta-header")
        return Bookend(**system_arguments)

    main = renders_one(Main)

    @renders_one
    def pane(
        parent: ClassAppender,
        *,
        width: str = PANE_WIDTH.default,
        position: str = PANE_POSITION.default,
        responsive_position: str = PANE_RESPONSIVE_POSITION.default,
        sticky: bool = False,
        divider: bool = False,
        **system_arguments: Any,
    ) -> Component:
        """Sidebar region.

        ``responsive_position="inherit"`` takes the raw ``position`` before
        either is validated, so an invalid ``position`` falls back to
        ``start`` for the pane but emits no responsive position class.
        """
        if responsive_position == "inherit":
            responsive_position = position
        parent.add_classes(
            PANE_POSITION.classes_for(position),
            PANE_RESPONSIVE_POSITION.classes_for(responsive_position),
            PANE_WIDTH.classes_for(width),
            {"LayoutBeta--pane-divider": divider},
            {"LayoutBeta--pane-is-sticky": sticky},
        )
        return Pane(**system_arguments)

    @renders_one
    def footer(parent: ClassAppender, *, divider: bool = False, **system_arguments: Any) -> Component:
        """Full-width region below main and pane."""
        parent.add_classes("LayoutBeta--has-footer", {"LayoutBeta--footer-divider": divider})
        system_arguments["classes"] = class_names(system_arguments.get("classes"), "LayoutBeta-footer")
        return Bookend(**system_arguments)

    def __init__(
        self,
        *,
        wrapper_sizing: str = WRAPPER_SIZING.default,
        outer_spacing: str = OUTER_SPACING.default,
        inner_spacing: str = INNER_SPACING.default,
        column_gap: str = COLUMN_GAP.default,
        row_gap: str = ROW_GAP.default,
        responsive_behavior: str = RESPONSIVE_BEHAVIOR.default,
        responsive_show_pane_first: bool = False,
        **system_arguments: Any,
    ) -> None:
        super().__init__(**system_arguments)
        self.wrapper_sizing = WRAPPER_SIZING.resolve(wrapper_sizing)

        args = self.system_arguments
        args.tag = "div"
        args.merge_classes(
            "LayoutBeta",
            OUTER_SPACING.classes_for(outer_spacing),
            INNER_SPACING.classes_for(inner_spacing),
            COLUMN_GAP.classes_for(column_gap),
            ROW_GAP.classes_for(row_gap),
            RESPONSIVE_BEHAVIOR.classes_for(responsive_behavior),
            {"LayoutBeta--responsive-pane-first": responsive_show_pane_first},
            WRAPPER_SIZING.classes_for(self.wrapper_sizing),
            args.classes,
        )
