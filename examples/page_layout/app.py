"""Page layout -- header, main, pane and footer regions.

Builds a settings page: navigation in a sticky pane at the start, the form
centered in the main region, and full-width bookends. Pane and bookend
options land on the Layout wrapper, where the CSS grid lives.

Run:
    python app.py
"""

from vellum import BaseComponent, Button, Layout, render_html

layout = Layout(
    outer_spacing="normal",
    column_gap="normal",
    row_gap="condensed",
    responsive_show_pane_first=True,
)

layout.header(divider=True).with_content(
    BaseComponent(tag="h1", classes="h2").with_content("Account settings")
)

layout.main(tag="main", width="lg").with_content(
    [
        BaseComponent(tag="p").with_content("Update your profile and email preferences."),
        Button(scheme="primary", type="submit").with_content("Save changes"),
    ]
)

nav = BaseComponent(tag="ul", classes="menu")
nav.with_content(
    [
        BaseComponent(tag="li").with_content(label)
        for label in ("Profile", "Emails", "Security")
    ]
)
layout.pane(tag="nav", position="start", width="narrow", sticky=True, aria={"label": "Settings"}).with_content(nav)

layout.footer(responsive_divider="line").with_content("Last saved a minute ago")

tree = layout.render()
output = render_html(tree)


def main() -> None:
    print(output)


if __name__ == "__main__":
    main()
