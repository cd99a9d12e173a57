"""Unit tests for document nodes and the shared page layout.

These tests pin down the structure produced by ``MainLayout.compose``: a
navigation section, the untouched page body, and the footer, with the brand
link and the five section links in a fixed order.

Usage
-----
Run ``pytest tests/test_layout.py -v``.
"""

from __future__ import annotations

import pytest

from embryodoc_site._constants import NAV_LINK_MARGIN
from embryodoc_site.layout import MainLayout
from embryodoc_site.nodes import StyleModifier, link, section, text
from embryodoc_site.pages import HomePage

NAV_TARGETS = [
    "#home",
    "#embryologists",
    "#doctors",
    "#administrators",
    "#clients",
    "#contact",
]


def test_style_modifiers_last_applied_wins() -> None:
    """Later modifiers for the same key replace earlier ones."""
    node = text("x").margin("horizontal", 5).padding("vertical", 2)
    node = node.margin("horizontal", 9)
    assert node.styles() == {"margin.horizontal": 9, "padding.vertical": 2}
    assert node.modifiers[0] == StyleModifier("margin.horizontal", 5), (
        "modifiers should keep declaration order"
    )


def test_builders_return_new_nodes() -> None:
    """Builder methods leave the original node untouched."""
    base = link("Docs", "#docs")
    styled = base.font("title3")
    assert base.modifiers == ()
    assert styled.styles() == {"font": "title3"}


@pytest.mark.parametrize(
    ("call", "args"),
    [("font", ("huge",)), ("margin", ("diagonal", 3)), ("padding", ("inner", 1))],
)
def test_invalid_style_values_rejected(call: str, args: tuple[object, ...]) -> None:
    """Unknown fonts and edges raise ValueError."""
    with pytest.raises(ValueError):
        getattr(text("x"), call)(*args)


def test_compose_wraps_body_between_nav_and_footer() -> None:
    """Composed tree is nav, body, footer, with the body unchanged."""
    body = HomePage().body
    tree = MainLayout().compose(body)
    assert tree.element == "body"
    assert [child.element for child in tree.children] == ["nav", "p", "footer"]
    assert tree.children[1] is body, "body node should be embedded verbatim"
    assert sum(1 for node in tree.iter_tree() if node.element == "nav") == 1
    assert sum(1 for node in tree.iter_tree() if node.element == "footer") == 1


def test_compose_is_pure() -> None:
    """Composing the same body twice yields equal trees."""
    body = section(text("Hello").font("title2"), link("Contact", "#contact"))
    layout = MainLayout()
    assert layout.compose(body) == layout.compose(body)
    assert MainLayout().compose(body) == layout.compose(body)


def test_navigation_links_in_fixed_order() -> None:
    """Navigation exposes the brand link then the five section links."""
    nav = MainLayout().compose(HomePage().body).children[0]
    links = nav.links()
    assert [node.target for node in links] == NAV_TARGETS
    assert links[0].content == "EmbryoDoc"


def test_only_section_links_carry_horizontal_margin() -> None:
    """The brand link has no margin; each section link has the same one."""
    brand, *named = MainLayout().navigation().links()
    assert brand.styles() == {"font": "title3"}
    for node in named:
        styles = node.styles()
        assert styles == {"margin.horizontal": NAV_LINK_MARGIN}, (
            f"unexpected styles on {node.content!r}: {styles}"
        )
        assert "margin.vertical" not in styles


def test_navigation_has_vertical_and_horizontal_padding() -> None:
    """The navigation section is padded on both axes."""
    nav = MainLayout().navigation()
    assert nav.styles() == {"padding.vertical": 20, "padding.horizontal": 40}


def test_footer_attributes_the_renderer() -> None:
    """The footer is a fixed attribution block with one outbound link."""
    footer = MainLayout().footer()
    assert footer.element == "footer"
    assert [node.target for node in footer.links()] == [
        "https://jinja.palletsprojects.com"
    ]


def test_home_page_body() -> None:
    """The home page shows the product tagline as a title1 heading."""
    page = HomePage()
    assert page.title == "Главная"
    assert page.path == "/"
    assert page.body.kind == "text"
    assert page.body.content == "Приложение для эмбриологов и репродуктологов"
    assert page.body.styles() == {"font": "title1"}
