"""Cyclopts CLI entrypoint for building the EmbryoDoc landing page.

The ``embryodoc-site`` console script renders the site into static HTML.
``build`` takes no required arguments: by default it uses the built-in site
metadata and the ``local-preview`` preset, writing into ``docs/`` under the
current directory. Every option can also be supplied through ``INPUT_*``
environment variables so CI jobs can configure builds without flags.

Examples
--------
Build a local preview:

>>> from embryodoc_site.cli import main
>>> main()  # doctest: +SKIP

Build into the deployment folder:

>>> from embryodoc_site.cli import app
>>> app(
...     ["build", "--preset", "deployed-absolute-path", "--output-dir", "/srv/www"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .site import LOCAL_PREVIEW, run_build

app = App(
    name="embryodoc-site",
    config=cyclopts.config.Env("INPUT_", command=False),  # type: ignore[unknown-argument]
)


@app.command(help="Render the landing page into static HTML.")
def build(
    *,
    preset: typ.Annotated[
        typ.Literal["local-preview", "deployed-absolute-path"],
        Parameter(help="Output preset", env_var="INPUT_PRESET"),
    ] = LOCAL_PREVIEW,
    config: typ.Annotated[
        Path | None,
        Parameter(
            help="Path to site config (defaults to config/site.yaml when present)",
            env_var="INPUT_CONFIG",
        ),
    ] = None,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
) -> None:
    """Build the site once and print the written files.

    Parameters
    ----------
    preset : {"local-preview", "deployed-absolute-path"}, optional
        ``local-preview`` writes to ``docs/`` and prints a preview hint;
        ``deployed-absolute-path`` writes to the configured absolute folder.
    config : Path or None, optional
        YAML file with ``site`` and ``build`` blocks. When omitted,
        ``config/site.yaml`` is used if it exists, else built-in defaults.
    output_dir : Path or None, optional
        Override the preset's output folder.

    Returns
    -------
    None
        Build failures, including unreadable or invalid configuration, are
        printed rather than raised.
    """
    run_build(preset=preset, config_path=config, output_dir=output_dir)


def main() -> None:
    """Invoke the Cyclopts application behind the ``embryodoc-site`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
