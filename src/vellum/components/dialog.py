"""Dialog: an overlaid dialog window.

Renders as a ``<modal-dialog>`` element with ``role="dialog"``. The title is
wired to the element through ``aria-labelledby`` and, when given, the
description through ``aria-describedby``. Ids come from
``Settings.generate_id`` so tests can make them deterministic.

Example:
    >>> dialog = Dialog(title="Delete repository", description="This cannot be undone")
    >>> dialog.body().with_content("Type the repository name to confirm.")
    >>> dialog.buttons(scheme="danger").with_content("Delete")
    >>> dialog.buttons().with_content("Cancel")
    >>> render_html(dialog.render())
"""

from __future__ import annotations

from typing import Any

from vellum.classes import class_names
from vellum.component import BaseComponent, Component, to_nodes
from vellum.components.button import Button
from vellum.nodes import Element
from vellum.settings import get_settings
from vellum.slots import renders_many, renders_one
from vellum.system_arguments import ClassAppender, SystemArguments

TAG = "modal-dialog"


class Dialog(Component):
    """Overlaid dialog window.

    Args:
        title: Dialog heading, also its accessible name.
        description: Optional text under the title, used as the accessible
            description.
        **system_arguments: Forwarded to the ``<modal-dialog>`` element.
            ``tag`` is not allowed.

    Raises:
        ConfigurationError: ``tag`` was passed.
    """

    required_slots = ("body",)

    buttons = renders_many(Button)

    @renders_one
    def body(parent: ClassAppender, **system_arguments: Any) -> Component:
        """Required body content. ``tag`` is not allowed."""
        SystemArguments(system_arguments, owner="Dialog.body").deny_tag_argument()
        system_arguments["classes"] = class_names("dialog-body", system_arguments.get("classes"))
        return BaseComponent(tag="div", **system_arguments)

    def __init__(self, *, title: str, description: str | None = None, **system_arguments: Any) -> None:
        super().__init__(**system_arguments)
        args = self.system_arguments
        args.deny_tag_argument()

        self.title = title
        self.description = description

        settings = get_settings()
        unique = settings.id_factory()
        self.header_id = settings.generate_id("dialog", unique)
        self.description_id = settings.generate_id("dialog-description", unique) if description else None

        args.tag = TAG
        args["role"] = "dialog"
        args.merge_classes("dialog", args.classes)

        aria = dict(args.get("aria") or {})
        aria["labelledby"] = self.header_id
        if self.description_id:
            aria["describedby"] = self.description_id
        args["aria"] = aria

    def call(self) -> Element:
        heading: list[Component] = [
            BaseComponent(tag="h1", id=self.header_id, classes="dialog-title").with_content(self.title),
        ]
        if self.description:
            heading.append(
                BaseComponent(tag="p", id=self.description_id, classes="dialog-description").with_content(
                    self.description
                )
            )
        header = BaseComponent(classes="dialog-header").with_content(heading)
        children = [*to_nodes(header), *self.render_slot("body")]
        buttons = self.render_slot("buttons")
        if buttons:
            children.extend(to_nodes(BaseComponent(classes="dialog-footer").with_content(buttons)))
        return self.element(*children)
