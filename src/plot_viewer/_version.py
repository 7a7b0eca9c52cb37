"""Minimal version helper for the plot_viewer application."""

from importlib import metadata

DISTRIBUTION_NAME = "plot-viewer"
FALLBACK_VERSION = "0.0.0"


def get_version() -> str:
    """
    Get version for application.

    :return: Version number.
    """
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:  # source checkout
        import setuptools_scm  # type: ignore[import-untyped]

        return str(
            setuptools_scm.get_version(
                root="../..",
                relative_to=__file__,
                fallback_version=FALLBACK_VERSION,
            )
        )


__all__ = ["get_version"]
