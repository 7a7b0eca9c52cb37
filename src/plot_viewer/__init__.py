"""plot_viewer package exposing a lazy ``main`` entry point."""

from __future__ import annotations

from ._version import get_version

__version__ = get_version()


def main() -> None:
    """Entry point for ``python -m plot_viewer`` and console scripts."""
    from .app import main as _main

    _main()


__all__ = ["main", "__version__", "get_version"]
