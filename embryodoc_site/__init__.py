"""Static builder for the EmbryoDoc marketing landing page.

The package describes pages as trees of declarative document nodes, wraps
them with the shared navigation and footer, and renders them to static HTML
through Jinja templates. The ``embryodoc-site`` console script drives builds.

Exports
-------
- ``app``: Cyclopts application exposing the ``build`` command.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from embryodoc_site import main
>>> main()  # doctest: +SKIP
>>> from embryodoc_site import app
>>> app.name[0]
'embryodoc-site'
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
