"""Page content providers for the EmbryoDoc site.

A page supplies a ``title``, a site-relative ``path``, and a ``body``
:class:`~embryodoc_site.nodes.DocumentNode`. Pages hold no state beyond their
literals; the layout adds navigation and footer chrome at build time.
"""

from __future__ import annotations

import typing as typ

from .nodes import DocumentNode, text


class StaticPage(typ.Protocol):
    """Structural type for anything the site builder can publish."""

    title: str
    path: str

    @property
    def body(self) -> DocumentNode: ...


class HomePage:
    """Landing page with the product tagline as hero text."""

    title = "Главная"
    path = "/"

    @property
    def body(self) -> DocumentNode:
        """Return the hero text node."""
        return text("Приложение для эмбриологов и репродуктологов").font("title1")


__all__ = ["HomePage", "StaticPage"]
