"""
Exposes the version of chinacoords
"""
from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path


def _read_version_file() -> str | None:
    """
    Fallback when running from a source tree without installed metadata. Tries repo-root
    VERSION first, then a copy inside the package.
    """
    here = Path(__file__).resolve()
    for path in (here.parents[1] / "VERSION", here.with_name("VERSION")):
        try:
            return path.read_text(encoding="utf-8").strip()
        except OSError:
            continue
    return None


try:
    __version__ = version("chinacoords")
except PackageNotFoundError:
    __version__ = _read_version_file()

__all__ = ["__version__"]
