"""Confirm dialog -- a destructive action behind a modal.

Ids for the ARIA wiring are normally random; the example installs a counter
through ``configure()`` so the printed markup is stable.

Run:
    python app.py
"""

from itertools import count

from vellum import Dialog, configure, render_html

counter = count(1)

with configure(id_prefix="repo-", id_factory=lambda: str(next(counter))):
    dialog = Dialog(
        title="Delete this repository?",
        description="This action cannot be undone.",
        aria={"modal": "true"},
    )

dialog.body(p=3).with_content("All issues, pull requests and wiki pages will be removed.")
dialog.buttons().with_content("Cancel")
dialog.buttons(scheme="danger", type="submit").with_content("Delete repository")

tree = dialog.render()
output = render_html(tree)


def main() -> None:
    print(output)


if __name__ == "__main__":
    main()
