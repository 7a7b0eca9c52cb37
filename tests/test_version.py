from importlib import metadata

import pytest

import plot_viewer
from plot_viewer import _version


def test_package_exposes_version() -> None:
    assert plot_viewer.__version__ == _version.get_version()
    assert plot_viewer.__version__


def test_source_checkout_falls_back_to_setuptools_scm(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def missing(name: str) -> str:
        raise metadata.PackageNotFoundError(name)

    monkeypatch.setattr(_version.metadata, "version", missing)
    assert _version.get_version()
