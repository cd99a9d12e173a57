"""Turn composed document trees into HTML and shared site assets.

:class:`HtmlSiteRenderer` owns the Jinja2 environment for the package
templates. It renders one HTML document per page from a composed
:class:`~embryodoc_site.nodes.DocumentNode` tree and produces the shared
stylesheet, ``sitemap.xml`` and ``robots.txt``. It never touches the
filesystem; the site builder decides where each :class:`RenderedAsset` goes.

Style modifiers map onto markup as follows: ``titleN`` fonts turn text into
``<hN>`` headings and links into ``hN``-classed anchors, ``lead`` adds the
``lead`` class, and margin/padding modifiers become inline CSS in pixels.
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import typing as typ
from pathlib import Path, PurePosixPath

from jinja2 import Environment, FileSystemLoader

from ._constants import BOOTSTRAP_ICONS_CSS

if typ.TYPE_CHECKING:
    from .config import SiteConfig
    from .nodes import DocumentNode

STYLESHEET_PATH = PurePosixPath("css/site.css")

_EDGE_PROPERTIES: dict[str, tuple[str, str]] = {
    "horizontal": ("left", "right"),
    "vertical": ("top", "bottom"),
}


@dc.dataclass(frozen=True, slots=True)
class RenderedAsset:
    """A rendered file relative to the output directory."""

    path: PurePosixPath
    content: str


def page_output_path(page_path: str) -> PurePosixPath:
    """Map a site-relative page path to the HTML file it is written to.

    Examples
    --------
    >>> page_output_path("/")
    PurePosixPath('index.html')
    >>> page_output_path("/pricing/")
    PurePosixPath('pricing/index.html')
    """
    segments = [segment for segment in page_path.split("/") if segment]
    return PurePosixPath(*segments, "index.html")


def node_tag(node: DocumentNode) -> str:
    """Return the HTML element name used for ``node``."""
    if node.kind == "link":
        return "a"
    font = node.styles().get("font")
    if node.kind == "text" and isinstance(font, str) and font.startswith("title"):
        return f"h{font.removeprefix('title')}"
    return node.element


def node_class(node: DocumentNode) -> str:
    """Return the CSS class list for ``node`` (may be empty)."""
    font = node.styles().get("font")
    if not isinstance(font, str):
        return ""
    if font == "lead":
        return "lead"
    if node.kind == "link" and font.startswith("title"):
        return f"h{font.removeprefix('title')}"
    return ""


def node_style(node: DocumentNode) -> str:
    """Return inline CSS declarations for the node's spacing modifiers."""
    declarations: list[str] = []
    for key, value in node.styles().items():
        prop, _, edge = key.partition(".")
        if prop not in {"margin", "padding"} or edge not in _EDGE_PROPERTIES:
            continue
        for side in _EDGE_PROPERTIES[edge]:
            declarations.append(f"{prop}-{side}: {value}px")
    return "; ".join(declarations)


class HtmlSiteRenderer:
    """Render pages and shared assets from the package templates."""

    def __init__(self, *, templates_dir: Path | None = None) -> None:
        """Initialize the Jinja environment and load templates eagerly.

        Parameters
        ----------
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``embryodoc_site/templates``.
        """
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["node_tag"] = node_tag
        self.env.filters["node_class"] = node_class
        self.env.filters["node_style"] = node_style
        self.page_template = self.env.get_template("page.jinja")
        self.sitemap_template = self.env.get_template("sitemap.xml.jinja")
        self.robots_template = self.env.get_template("robots.txt.jinja")

    def render_page(
        self, tree: DocumentNode, *, title: str, page_path: str, site: SiteConfig
    ) -> RenderedAsset:
        """Render a composed page tree into a complete HTML document.

        Parameters
        ----------
        tree : DocumentNode
            Output of the layout, rooted at a ``body`` container.
        title : str
            Final document title, already carrying the site suffix.
        page_path : str
            Site-relative URL path of the page (``"/"`` for the home page).
        site : SiteConfig
            Site metadata used for the document head.
        """
        output_path = page_output_path(page_path)
        depth = len(output_path.parts) - 1
        context = {
            "tree": tree,
            "html_title": title,
            "site": site,
            "canonical_url": f"{site.url}{page_path}",
            "stylesheet_href": "../" * depth + str(STYLESHEET_PATH),
            "icons_href": BOOTSTRAP_ICONS_CSS,
        }
        html = self.page_template.render(**context)
        return RenderedAsset(output_path, _ensure_newline(html))

    def render_stylesheet(self) -> RenderedAsset:
        """Return the shared stylesheet copied from the templates folder."""
        css = (self.templates_dir / "site.css").read_text(encoding="utf-8")
        return RenderedAsset(STYLESHEET_PATH, _ensure_newline(css))

    def render_sitemap(
        self, page_paths: typ.Sequence[str], *, site: SiteConfig
    ) -> RenderedAsset:
        """Render ``sitemap.xml`` listing every page URL."""
        xml = self.sitemap_template.render(
            urls=[f"{site.url}{path}" for path in page_paths],
            generated_at=dt.datetime.now(dt.UTC),
        )
        return RenderedAsset(PurePosixPath("sitemap.xml"), _ensure_newline(xml))

    def render_robots(self, *, site: SiteConfig) -> RenderedAsset:
        """Render ``robots.txt`` pointing crawlers at the sitemap."""
        text = self.robots_template.render(sitemap_url=f"{site.url}/sitemap.xml")
        return RenderedAsset(PurePosixPath("robots.txt"), _ensure_newline(text))


def _ensure_newline(text: str) -> str:
    return text if text.endswith("\n") else f"{text}\n"


__all__ = [
    "STYLESHEET_PATH",
    "HtmlSiteRenderer",
    "RenderedAsset",
    "node_class",
    "node_style",
    "node_tag",
    "page_output_path",
]
