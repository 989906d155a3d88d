"""Helpers with no dependency on the component model."""

from vellum.utils.html import Markup, html_escape, render_attributes, render_html

__all__ = [
    "Markup",
    "html_escape",
    "render_attributes",
    "render_html",
]
