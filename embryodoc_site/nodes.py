"""Declarative document nodes used to describe page content.

Pages and layouts build their markup as a tree of :class:`DocumentNode`
values rather than raw HTML. Each node is a frozen dataclass tagged with a
``kind`` (``"text"``, ``"link"`` or ``"container"``), an ordered tuple of
:class:`StyleModifier` entries, and an ordered tuple of children. Builder
methods such as :meth:`DocumentNode.font` or :meth:`DocumentNode.padding`
return new nodes, so trees can be shared between builds without copying.

Examples
--------
>>> hero = text("Hello").font("title1")
>>> hero.styles()
{'font': 'title1'}
>>> nav = section(link("Docs", "#docs").margin("horizontal", 15))
>>> [child.target for child in nav.children]
['#docs']
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

NodeKind = typ.Literal["text", "link", "container"]
Edge = typ.Literal["horizontal", "vertical"]
StyleValue = str | int

FONT_STYLES: tuple[str, ...] = (
    "title1",
    "title2",
    "title3",
    "title4",
    "title5",
    "title6",
    "body",
    "lead",
)
_EDGES: tuple[str, ...] = ("horizontal", "vertical")


@dc.dataclass(frozen=True, slots=True)
class StyleModifier:
    """A single style declaration attached to a node.

    Attributes
    ----------
    key : str
        Dotted style key such as ``"font"`` or ``"margin.horizontal"``.
    value : str or int
        Enumerated value (font names) or a magnitude in CSS pixels.
    """

    key: str
    value: StyleValue


@dc.dataclass(frozen=True, slots=True)
class DocumentNode:
    """One renderable element in a page tree."""

    kind: NodeKind
    content: str = ""
    target: str | None = None
    element: str = "div"
    anchor: str | None = None
    modifiers: tuple[StyleModifier, ...] = ()
    children: tuple[DocumentNode, ...] = ()

    def styled(self, key: str, value: StyleValue) -> DocumentNode:
        """Return a copy with ``key`` set to ``value`` after existing modifiers."""
        return dc.replace(self, modifiers=(*self.modifiers, StyleModifier(key, value)))

    def font(self, name: str) -> DocumentNode:
        """Return a copy using the named font style (``title1`` .. ``lead``)."""
        if name not in FONT_STYLES:
            msg = f"Unknown font style '{name}'. Known styles: {', '.join(FONT_STYLES)}"
            raise ValueError(msg)
        return self.styled("font", name)

    def margin(self, edge: Edge, amount: int) -> DocumentNode:
        """Return a copy with a margin along ``edge`` of ``amount`` pixels."""
        return self.styled(f"margin.{_check_edge(edge)}", int(amount))

    def padding(self, edge: Edge, amount: int) -> DocumentNode:
        """Return a copy with padding along ``edge`` of ``amount`` pixels."""
        return self.styled(f"padding.{_check_edge(edge)}", int(amount))

    def with_anchor(self, anchor: str) -> DocumentNode:
        """Return a copy exposing ``anchor`` as the element id."""
        return dc.replace(self, anchor=anchor)

    def styles(self) -> dict[str, StyleValue]:
        """Return the effective style mapping; later modifiers win per key."""
        resolved: dict[str, StyleValue] = {}
        for modifier in self.modifiers:
            resolved[modifier.key] = modifier.value
        return resolved

    def iter_tree(self) -> cabc.Iterator[DocumentNode]:
        """Yield this node and its descendants in document order."""
        yield self
        for child in self.children:
            yield from child.iter_tree()

    def links(self) -> list[DocumentNode]:
        """Return every link node in the subtree, in document order."""
        return [node for node in self.iter_tree() if node.kind == "link"]


def _check_edge(edge: str) -> str:
    if edge not in _EDGES:
        msg = f"Unknown edge '{edge}'; expected 'horizontal' or 'vertical'."
        raise ValueError(msg)
    return edge


def text(content: str) -> DocumentNode:
    """Build a text node."""
    return DocumentNode(kind="text", content=content, element="p")


def link(label: str, target: str) -> DocumentNode:
    """Build a link node pointing at ``target`` (anchor or URL)."""
    return DocumentNode(kind="link", content=label, target=target, element="a")


def section(*children: DocumentNode, element: str = "div") -> DocumentNode:
    """Build a container node wrapping ``children`` in declaration order."""
    return DocumentNode(kind="container", element=element, children=tuple(children))


__all__ = [
    "FONT_STYLES",
    "DocumentNode",
    "Edge",
    "NodeKind",
    "StyleModifier",
    "StyleValue",
    "link",
    "section",
    "text",
]
