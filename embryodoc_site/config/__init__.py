"""Load and validate site configuration YAML for EmbryoDoc builds.

This subpackage parses the optional ``config/site.yaml`` file, merges its
``site`` block over the built-in :class:`SiteConfig` defaults, and reads the
output directories used by the build presets. The primary entry point is
:func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from embryodoc_site.config import load_site_config
>>> project = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> project.site.page_title("Главная")  # doctest: +SKIP
'Главная – Приложение для эмбриологов и репродуктологов'
"""

from .loader import load_site_config
from .models import BuildSettings, ProjectConfig, SiteConfig, SiteConfigError

__all__ = [
    "BuildSettings",
    "ProjectConfig",
    "SiteConfig",
    "SiteConfigError",
    "load_site_config",
]
