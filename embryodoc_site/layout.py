"""Shared page chrome for the EmbryoDoc site.

:class:`MainLayout` wraps each page body with the navigation bar and the
footer attribution. Composition is a pure function of the body node: the same
body always yields an equal tree, which keeps builds reproducible.

Examples
--------
>>> from embryodoc_site.pages import HomePage
>>> tree = MainLayout().compose(HomePage().body)
>>> [child.element for child in tree.children]
['nav', 'p', 'footer']
>>> len(tree.children[0].links())
6
"""

from __future__ import annotations

from ._constants import (
    BRAND_LABEL,
    FOOTER_LINK_LABEL,
    FOOTER_LINK_TARGET,
    FOOTER_TEXT,
    HOME_ANCHOR,
    NAV_LINK_MARGIN,
    NAV_PADDING_HORIZONTAL,
    NAV_PADDING_VERTICAL,
    NAV_SECTIONS,
)
from .nodes import DocumentNode, link, section, text


class MainLayout:
    """Navigation bar, page body, and footer, in that order."""

    def compose(self, body: DocumentNode) -> DocumentNode:
        """Wrap ``body`` with the site chrome.

        Parameters
        ----------
        body : DocumentNode
            Root node of the page content. It is placed in the result as-is.

        Returns
        -------
        DocumentNode
            A ``body`` container whose children are the navigation section,
            ``body``, and the footer.
        """
        return section(
            self.navigation(),
            body,
            self.footer(),
            element="body",
        )

    def navigation(self) -> DocumentNode:
        """Build the navigation bar with the brand and section links."""
        brand = link(BRAND_LABEL, f"#{HOME_ANCHOR}").font("title3")
        links = section(
            *(
                link(label, f"#{anchor}").margin("horizontal", NAV_LINK_MARGIN)
                for label, anchor in NAV_SECTIONS
            ),
            element="div",
        )
        return (
            section(section(brand, links), element="nav")
            .padding("vertical", NAV_PADDING_VERTICAL)
            .padding("horizontal", NAV_PADDING_HORIZONTAL)
        )

    def footer(self) -> DocumentNode:
        """Build the fixed attribution footer."""
        return section(
            text(FOOTER_TEXT),
            link(FOOTER_LINK_LABEL, FOOTER_LINK_TARGET),
            element="footer",
        )


__all__ = ["MainLayout"]
