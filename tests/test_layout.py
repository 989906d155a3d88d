"""Tests for the Layout component and its regions."""

from __future__ import annotations

import pytest

from vellum import Element, Layout, PreconditionError, Text, compose, render_html
from vellum.components.layout import Bookend, Main, Pane

from .conftest import assert_classes


def build_layout(**options) -> Layout:
    layout = Layout(**options)
    layout.main().with_content("Main")
    layout.pane().with_content("Pane")
    return layout


class TestLayoutRender:
    """End-to-end rendering."""

    def test_main_and_pane(self) -> None:
        layout = Layout(outer_spacing="normal", column_gap="condensed", row_gap="normal")
        layout.main().with_content("Main")
        layout.pane(position="end").with_content("Pane")

        element = layout.render()
        expected = compose(
            [
                "LayoutBeta",
                "LayoutBeta--outer-spacing-normal",
                "LayoutBeta--column-gap-condensed",
                "LayoutBeta--row-gap-normal",
                "LayoutBeta--responsive-flowVertical",
                "LayoutBeta--pane-position-end",
                "LayoutBeta--pane-responsive-position-end",
            ]
        )
        assert element.tag == "div"
        assert element.classes == expected
        assert element.children == (
            Element("div", {"class": "LayoutBeta-content"}, (Text("Main"),)),
            Element("div", {"class": "LayoutBeta-pane"}, (Text("Pane"),)),
        )

    def test_html(self) -> None:
        layout = build_layout()
        assert render_html(layout.render()) == (
            '<div class="LayoutBeta LayoutBeta--responsive-flowVertical '
            'LayoutBeta--pane-position-start LayoutBeta--pane-responsive-position-start">'
            '<div class="LayoutBeta-content">Main</div>'
            '<div class="LayoutBeta-pane">Pane</div>'
            "</div>"
        )

    def test_regions_in_markup_order(self) -> None:
        layout = Layout()
        layout.footer().with_content("Footer")
        layout.pane().with_content("Pane")
        layout.main().with_content("Main")
        layout.header().with_content("Header")

        element = layout.render()
        assert [child.text() for child in element.children] == ["Header", "Main", "Pane", "Footer"]
        header, _, _, footer = element.children
        assert_classes(header, "LayoutBeta-header LayoutBeta-region")
        assert_classes(footer, "LayoutBeta-footer LayoutBeta-region")

    def test_caller_classes_and_attributes(self) -> None:
        layout = build_layout(classes="page", id="layout", mt=2)
        element = layout.render()
        assert element.classes.split()[:3] == ["LayoutBeta", "LayoutBeta--responsive-flowVertical", "page"]
        assert element.classes.split()[-1] == "mt-2"
        assert element.attributes["id"] == "layout"


class TestRenderPredicate:
    """Layout needs both main and pane."""

    def test_without_pane(self) -> None:
        layout = Layout()
        layout.main().with_content("Main")
        assert layout.should_render() is False
        assert layout.render(allow_empty=True) is None

    def test_without_main_raises(self) -> None:
        layout = Layout()
        layout.pane().with_content("Pane")
        with pytest.raises(PreconditionError) as exc_info:
            layout.render()
        assert exc_info.value.suggestion == "Populate 'main'"

    def test_populating_both_flips_predicate(self) -> None:
        layout = Layout()
        layout.main()
        assert not layout.should_render()
        layout.pane()
        assert layout.should_render()

    def test_empty_layout_renders_to_empty_html(self) -> None:
        assert render_html(Layout().render(allow_empty=True)) == ""


class TestLayoutOptions:
    """Wrapper options and their fallbacks."""

    @pytest.mark.parametrize(
        ("options", "token"),
        [
            ({"outer_spacing": "condensed"}, "LayoutBeta--outer-spacing-condensed"),
            ({"inner_spacing": "normal"}, "LayoutBeta--inner-spacing-normal"),
            ({"column_gap": "normal"}, "LayoutBeta--column-gap-normal"),
            ({"row_gap": "condensed"}, "LayoutBeta--row-gap-condensed"),
            ({"responsive_behavior": "split_as_pages"}, "LayoutBeta--responsive-splitAsPages"),
            ({"responsive_show_pane_first": True}, "LayoutBeta--responsive-pane-first"),
            ({"wrapper_sizing": "lg"}, "container-lg"),
        ],
    )
    def test_option_class(self, options: dict, token: str) -> None:
        assert token in build_layout(**options).render().classes.split()

    def test_invalid_options_fall_back(self, silent_fallbacks) -> None:
        fallback = build_layout(outer_spacing="huge", responsive_behavior="sideways", wrapper_sizing="xxl")
        default = build_layout()
        assert fallback.render().classes == default.render().classes
        assert fallback.wrapper_sizing == "fluid"


class TestPaneSlot:
    """Pane options land on the Layout element."""

    def test_responsive_position_inherits(self) -> None:
        layout = Layout()
        layout.pane(position="end")
        assert "LayoutBeta--pane-responsive-position-end" in layout.system_arguments.classes

    def test_explicit_responsive_position(self) -> None:
        layout = Layout()
        layout.pane(position="end", responsive_position="start")
        classes = layout.system_arguments.classes.split()
        assert "LayoutBeta--pane-position-end" in classes
        assert "LayoutBeta--pane-responsive-position-start" in classes
        assert "LayoutBeta--pane-responsive-position-end" not in classes

    def test_invalid_position_emits_no_responsive_class(self, silent_fallbacks) -> None:
        layout = Layout()
        layout.pane(position="bogus")
        classes = layout.system_arguments.classes.split()
        assert "LayoutBeta--pane-position-start" in classes
        assert not [token for token in classes if token.startswith("LayoutBeta--pane-responsive-position")]

    def test_invalid_responsive_position_emits_no_class(self, silent_fallbacks) -> None:
        layout = Layout()
        layout.pane(position="end", responsive_position="sideways")
        classes = layout.system_arguments.classes.split()
        assert "LayoutBeta--pane-position-end" in classes
        assert not [token for token in classes if token.startswith("LayoutBeta--pane-responsive-position")]

    def test_width_sticky_divider(self) -> None:
        layout = Layout()
        layout.pane(width="wide", sticky=True, divider=True)
        assert layout.system_arguments.classes.split()[-3:] == [
            "LayoutBeta--pane-width-wide",
            "LayoutBeta--pane-divider",
            "LayoutBeta--pane-is-sticky",
        ]

    def test_pane_element(self, silent_fallbacks) -> None:
        layout = Layout()
        pane = layout.pane(tag="aside", classes="sidebar")
        assert isinstance(pane, Pane)
        element = pane.render()
        assert element.tag == "aside"
        assert_classes(element, "LayoutBeta-pane sidebar")
        assert Layout().pane(tag="table").render().tag == "div"

    def test_repopulating_pane_replaces_classes(self) -> None:
        layout = Layout()
        layout.pane(position="end", sticky=True)
        layout.pane(position="start")
        classes = layout.system_arguments.classes.split()
        assert "LayoutBeta--pane-position-start" in classes
        assert "LayoutBeta--pane-position-end" not in classes
        assert "LayoutBeta--pane-is-sticky" not in classes


class TestBookendSlots:
    """Header and footer."""

    def test_header_divider_adds_exactly_one_token(self) -> None:
        plain = Layout()
        plain.header()
        divided = Layout()
        divided.header(divider=True)

        before = plain.system_arguments.classes.split()
        after = divided.system_arguments.classes.split()
        assert [token for token in after if token not in before] == ["LayoutBeta--header-divider"]
        assert len(after) == len(before) + 1

    @pytest.mark.parametrize("populate_first", [True, False])
    def test_header_divider_independent_of_other_slots(self, populate_first: bool) -> None:
        layout = Layout()
        if populate_first:
            layout.main()
            layout.pane(position="end")
            layout.footer()
        layout.header(divider=True)
        if not populate_first:
            layout.footer()
            layout.pane(position="end")
            layout.main()
        assert layout.system_arguments.classes == (
            "LayoutBeta LayoutBeta--responsive-flowVertical "
            "LayoutBeta--has-header LayoutBeta--header-divider "
            "LayoutBeta--pane-position-end LayoutBeta--pane-responsive-position-end "
            "LayoutBeta--has-footer"
        )

    def test_footer_divider(self) -> None:
        layout = Layout()
        footer = layout.footer(divider=True, responsive_divider="shallow")
        assert isinstance(footer, Bookend)
        assert "LayoutBeta--footer-divider" in layout.system_arguments.classes.split()
        assert_classes(footer.render(), "LayoutBeta-footer LayoutBeta-region LayoutBeta-region--shallow-divider")

    def test_bookend_ignores_tag(self) -> None:
        assert Bookend(tag="section").render().tag == "div"


class TestMain:
    """Main region widths."""

    def test_full_width(self) -> None:
        element = Main().with_content("x").render()
        assert element == Element("div", {"class": "LayoutBeta-content"}, (Text("x"),))

    def test_centered_width(self) -> None:
        element = Main(width="md", tag="main").with_content("x").render()
        assert element.tag == "main"
        assert element.children == (
            Element(
                "div",
                {"class": "Layout-main-centered-md"},
                (Element("div", {"class": "container-md"}, (Text("x"),)),),
            ),
        )

    def test_invalid_width(self, silent_fallbacks) -> None:
        main = Main(width="huge")
        assert main.width == "full"
