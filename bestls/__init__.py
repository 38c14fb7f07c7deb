"""Public package surface for bestls.

Exports ``main`` for programmatic CLI invocation and ``run_listing`` for
library use. Most implementation lives in submodules under ``bestls``.
"""

from __future__ import annotations

__version__ = "0.4.0"


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


def run_listing(*args, **kwargs):
    """Lazily import the listing pipeline; see ``bestls.pipeline.run_listing``."""
    from .pipeline import run_listing as _run_listing

    return _run_listing(*args, **kwargs)


__all__ = ["main", "run_listing", "__version__"]
