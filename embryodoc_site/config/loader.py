"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import (
    _mapping,
    _optional_path,
    _optional_str,
    _parse_bool,
    _require_absolute_url,
)
from .models import BuildSettings, ProjectConfig, SiteConfig, SiteConfigError


def load_site_config(path: Path) -> ProjectConfig:
    """Load the YAML file describing site metadata and build outputs.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``).

    Returns
    -------
    ProjectConfig
        Site metadata merged over the built-in defaults, plus the output
        directories used by the build presets.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    SiteConfigError
        If the top-level structure is not a mapping or a field is invalid.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.site.name  # doctest: +SKIP
    'EmbryoDoc App'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    raw = _mapping(loaded, "top-level")

    return ProjectConfig(
        site=_build_site_config(_mapping(raw.get("site"), "site")),
        build=_build_build_settings(_mapping(raw.get("build"), "build")),
    )


def _build_site_config(payload: typ.Mapping[str, typ.Any]) -> SiteConfig:
    """Merge the ``site`` mapping over the default ``SiteConfig``."""
    base = SiteConfig()
    name = _optional_str(payload.get("name", base.name))
    if not name:
        msg = "Site configuration requires a non-empty 'name'."
        raise SiteConfigError(msg)
    title_suffix = payload.get("title_suffix", base.title_suffix)
    return SiteConfig(
        name=name,
        title_suffix="" if title_suffix is None else str(title_suffix),
        url=_require_absolute_url(payload.get("url", base.url)),
        author=_optional_str(payload.get("author")) or base.author,
        builtin_icons=_parse_bool(
            "builtin_icons", payload.get("builtin_icons", base.builtin_icons)
        ),
        language=_optional_str(payload.get("language")) or base.language,
    )


def _build_build_settings(payload: typ.Mapping[str, typ.Any]) -> BuildSettings:
    """Read preset output directories from the ``build`` mapping."""
    base = BuildSettings()
    local_output_dir = _optional_path(payload.get("local_output_dir"))
    if local_output_dir is not None and local_output_dir.is_absolute():
        msg = "'build.local_output_dir' must be relative to the working directory."
        raise SiteConfigError(msg)
    deploy_output_dir = _optional_path(payload.get("deploy_output_dir"))
    if deploy_output_dir is not None and not deploy_output_dir.is_absolute():
        msg = "'build.deploy_output_dir' must be an absolute path."
        raise SiteConfigError(msg)
    return BuildSettings(
        local_output_dir=local_output_dir or base.local_output_dir,
        deploy_output_dir=deploy_output_dir,
    )


__all__ = ["load_site_config"]
