"""Typed dataclasses describing EmbryoDoc site configuration structures."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """Site-wide metadata surfaced to every rendered page."""

    name: str = "EmbryoDoc App"
    title_suffix: str = " – Приложение для эмбриологов и репродуктологов"
    url: str = "https://embryodoc.app"
    author: str = "Egor Ledkov"
    builtin_icons: bool = True
    language: str = "ru"

    def page_title(self, title: str) -> str:
        """Return ``title`` with the site suffix appended."""
        return f"{title}{self.title_suffix}"


@dc.dataclass(frozen=True, slots=True)
class BuildSettings:
    """Output locations backing the named build presets."""

    local_output_dir: Path = Path("docs")
    deploy_output_dir: Path | None = None


@dc.dataclass(frozen=True, slots=True)
class ProjectConfig:
    """Everything read from ``config/site.yaml``."""

    site: SiteConfig = dc.field(default_factory=SiteConfig)
    build: BuildSettings = dc.field(default_factory=BuildSettings)


__all__ = ["BuildSettings", "ProjectConfig", "SiteConfig", "SiteConfigError"]
