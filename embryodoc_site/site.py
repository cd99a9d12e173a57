"""Site aggregate and publish pipeline for the EmbryoDoc landing page.

The :class:`Site` bundles metadata, the shared layout, and the page
providers. :class:`SiteBuilder` publishes a site into a resolved
:class:`BuildTarget`: every page body is wrapped by the layout, rendered to
HTML by :class:`~embryodoc_site.renderer.HtmlSiteRenderer`, and written under
the output directory together with the shared stylesheet, ``sitemap.xml`` and
``robots.txt``.

Two presets decide where output lands:

``local-preview``
    Relative ``docs`` folder (configurable) under the working directory. The
    console report ends with a preview hint.
``deployed-absolute-path``
    Absolute folder taken from ``build.deploy_output_dir`` or an explicit
    override. No preview hint is printed.

Every failure while resolving, rendering, or writing surfaces as
:class:`BuildError`. :func:`run_build` is the single place that catches it; it
prints the message and returns ``None`` instead of raising. Files written
before a failure stay on disk.

Examples
--------
>>> from embryodoc_site.site import run_build
>>> result = run_build(preset="local-preview")  # doctest: +SKIP
wrote docs/index.html
...
"""

from __future__ import annotations

import asyncio
import dataclasses as dc
import typing as typ
from pathlib import Path

from ruamel.yaml.error import YAMLError

from .config import ProjectConfig, SiteConfig, SiteConfigError, load_site_config
from .layout import MainLayout
from .pages import HomePage
from .renderer import HtmlSiteRenderer

if typ.TYPE_CHECKING:
    from .config import BuildSettings
    from .pages import StaticPage
    from .renderer import RenderedAsset

BuildState = typ.Literal["not_started", "publishing", "succeeded", "failed"]

LOCAL_PREVIEW = "local-preview"
DEPLOYED_ABSOLUTE_PATH = "deployed-absolute-path"
DEFAULT_CONFIG = Path("config/site.yaml")


class BuildError(RuntimeError):
    """Raised when composing, rendering, or writing the site fails."""


@dc.dataclass(frozen=True, slots=True)
class BuildPreset:
    """Named output policy for a build invocation."""

    name: str
    show_hints: bool
    requires_absolute: bool


PRESETS: dict[str, BuildPreset] = {
    LOCAL_PREVIEW: BuildPreset(LOCAL_PREVIEW, show_hints=True, requires_absolute=False),
    DEPLOYED_ABSOLUTE_PATH: BuildPreset(
        DEPLOYED_ABSOLUTE_PATH, show_hints=False, requires_absolute=True
    ),
}


@dc.dataclass(frozen=True, slots=True)
class BuildTarget:
    """Resolved source and output directories for one publish call."""

    source_dir: Path
    output_dir: Path


@dc.dataclass(frozen=True, slots=True)
class BuildResult:
    """Outcome of a successful publish."""

    target: BuildTarget
    written: tuple[Path, ...]


@dc.dataclass(frozen=True, slots=True)
class Site:
    """Metadata, layout, and pages consumed by a single build."""

    config: SiteConfig = dc.field(default_factory=SiteConfig)
    layout: MainLayout = dc.field(default_factory=MainLayout)
    pages: tuple[StaticPage, ...] = (HomePage(),)

    def __post_init__(self) -> None:
        if not self.pages:
            msg = "A site needs at least one page."
            raise ValueError(msg)


def get_preset(name: str) -> BuildPreset:
    """Return the preset registered under ``name``."""
    try:
        return PRESETS[name]
    except KeyError as exc:
        available = ", ".join(sorted(PRESETS))
        msg = f"Unknown build preset '{name}'. Known presets: {available}"
        raise BuildError(msg) from exc


def resolve_build_target(
    preset: str,
    settings: BuildSettings,
    *,
    output_dir: Path | None = None,
    cwd: Path | None = None,
) -> BuildTarget:
    """Resolve the output directory for ``preset``.

    Parameters
    ----------
    preset : str
        ``"local-preview"`` or ``"deployed-absolute-path"``.
    settings : BuildSettings
        Output directories read from configuration.
    output_dir : Path, optional
        Explicit override taking precedence over ``settings``.
    cwd : Path, optional
        Working directory used as the source and as the base for relative
        outputs; defaults to ``Path.cwd()``.

    Raises
    ------
    BuildError
        If the preset is unknown, or the deployed preset has no absolute
        output directory.
    """
    chosen = get_preset(preset)
    source_dir = cwd or Path.cwd()
    if chosen.requires_absolute:
        candidate = output_dir or settings.deploy_output_dir
        if candidate is None or not candidate.is_absolute():
            msg = (
                f"Preset '{chosen.name}' needs an absolute output directory; "
                "set build.deploy_output_dir or pass --output-dir."
            )
            raise BuildError(msg)
        return BuildTarget(source_dir=source_dir, output_dir=candidate)
    candidate = output_dir or settings.local_output_dir
    if not candidate.is_absolute():
        candidate = source_dir / candidate
    return BuildTarget(source_dir=source_dir, output_dir=candidate)


class SiteBuilder:
    """Publish a :class:`Site` into a build target."""

    def __init__(
        self, site: Site, *, renderer: HtmlSiteRenderer | None = None
    ) -> None:
        self.site = site
        self._renderer = renderer
        self.state: BuildState = "not_started"

    @property
    def renderer(self) -> HtmlSiteRenderer:
        """Return the rendering engine, loading the package templates on first use."""
        if self._renderer is None:
            self._renderer = HtmlSiteRenderer()
        return self._renderer

    async def publish(self, target: BuildTarget) -> BuildResult:
        """Render every page and shared asset into ``target.output_dir``.

        Returns
        -------
        BuildResult
            The target and the paths written, pages first.

        Raises
        ------
        BuildError
            If the builder was already used, or if rendering or writing fails.
            Files written before the failure are left in place.
        """
        if self.state != "not_started":
            msg = f"Site builder cannot publish twice (state: {self.state})."
            raise BuildError(msg)
        self.state = "publishing"
        written: list[Path] = []
        try:
            await asyncio.to_thread(
                target.output_dir.mkdir, parents=True, exist_ok=True
            )
            for page in self.site.pages:
                asset = self.render_page(page)
                written.append(await self._write(target.output_dir, asset))
            for asset in self._shared_assets():
                written.append(await self._write(target.output_dir, asset))
        except Exception as exc:  # noqa: BLE001 - every failure is a BuildError
            self.state = "failed"
            msg = f"Build failed: {exc}"
            raise BuildError(msg) from exc
        self.state = "succeeded"
        return BuildResult(target=target, written=tuple(written))

    def render_page(self, page: StaticPage) -> RenderedAsset:
        """Compose ``page`` with the site layout and render it to HTML."""
        tree = self.site.layout.compose(page.body)
        return self.renderer.render_page(
            tree,
            title=self.site.config.page_title(page.title),
            page_path=page.path,
            site=self.site.config,
        )

    def _shared_assets(self) -> list[RenderedAsset]:
        config = self.site.config
        return [
            self.renderer.render_stylesheet(),
            self.renderer.render_sitemap(
                [page.path for page in self.site.pages], site=config
            ),
            self.renderer.render_robots(site=config),
        ]

    @staticmethod
    async def _write(output_dir: Path, asset: RenderedAsset) -> Path:
        path = output_dir / asset.path
        await asyncio.to_thread(path.parent.mkdir, parents=True, exist_ok=True)
        await asyncio.to_thread(path.write_text, asset.content, encoding="utf-8")
        return path


def _format_path(path: Path, cwd: Path) -> str:
    """Return a ``cwd``-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(cwd))
        except ValueError:
            return str(path)
    return str(path)


def load_project(config_path: Path | None, *, cwd: Path) -> ProjectConfig:
    """Load ``config_path``, or ``config/site.yaml`` under ``cwd`` when present.

    Falls back to built-in defaults when no path is given and the default
    file does not exist.

    Raises
    ------
    BuildError
        If the file is missing, unreadable, malformed, or holds invalid values.
    """
    if config_path is None:
        config_path = cwd / DEFAULT_CONFIG
        if not config_path.exists():
            return ProjectConfig()
    try:
        return load_site_config(config_path)
    except (OSError, YAMLError, SiteConfigError) as exc:
        msg = f"Build failed: invalid configuration '{config_path}': {exc}"
        raise BuildError(msg) from exc


def run_build(
    *,
    preset: str = LOCAL_PREVIEW,
    project: ProjectConfig | None = None,
    config_path: Path | None = None,
    output_dir: Path | None = None,
    cwd: Path | None = None,
) -> BuildResult | None:
    """Build the site once and report the outcome on stdout.

    Parameters
    ----------
    preset : str, optional
        Build preset name; defaults to ``"local-preview"``.
    project : ProjectConfig, optional
        Loaded configuration. When omitted it is read with
        :func:`load_project`, so configuration errors are reported like any
        other build failure.
    config_path : Path, optional
        YAML file to load when ``project`` is omitted.
    output_dir : Path, optional
        Override for the preset's output directory.
    cwd : Path, optional
        Working directory for the build; defaults to ``Path.cwd()``.

    Returns
    -------
    BuildResult or None
        The result on success, ``None`` after a reported :class:`BuildError`.
    """
    workdir = cwd or Path.cwd()
    try:
        if project is None:
            project = load_project(config_path, cwd=workdir)
        target = resolve_build_target(
            preset, project.build, output_dir=output_dir, cwd=workdir
        )
        builder = SiteBuilder(Site(config=project.site))
        result = asyncio.run(builder.publish(target))
    except BuildError as exc:
        print(exc)
        return None

    for path in result.written:
        print(f"wrote {_format_path(path, workdir)}")
    output_label = _format_path(target.output_dir, workdir)
    print(f"✅ Build completed: {output_label}/")
    if PRESETS[preset].show_hints:
        print(f"💡 Preview: python -m http.server --directory {output_label}")
    return result


__all__ = [
    "DEPLOYED_ABSOLUTE_PATH",
    "LOCAL_PREVIEW",
    "PRESETS",
    "BuildError",
    "BuildPreset",
    "BuildResult",
    "BuildState",
    "BuildTarget",
    "DEFAULT_CONFIG",
    "Site",
    "SiteBuilder",
    "get_preset",
    "load_project",
    "resolve_build_target",
    "run_build",
]
