"""Minimal version helper for the planar2d package."""

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

PACKAGE_NAME = "planar2d"
FALLBACK_VERSION = "0.0.0+unknown"


def get_version() -> str:
    """
    Get version for the package.

    :return: Version number.
    """
    try:  # installed, including editable installs
        return version(PACKAGE_NAME)
    except PackageNotFoundError:  # dev checkout on sys.path
        import setuptools_scm  # type: ignore[import-untyped]

        return str(
            setuptools_scm.get_version(
                root=str(Path(__file__).resolve().parents[2]),
                fallback_version=FALLBACK_VERSION,
            )
        )


__all__ = ["get_version", "PACKAGE_NAME"]
