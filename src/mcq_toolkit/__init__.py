"""Top-level package for the MCQ paper toolkit.

Provides subpackages:
- mcq_toolkit.core – immutable question/section/segment models and schemas
- mcq_toolkit.builder – segmentation, math rendering, assembly and print output
"""

import re
from importlib.metadata import PackageNotFoundError, version as _dist_version
from pathlib import Path

DIST_NAME = "mcq-toolkit"

# version = "..." inside the [project] table only
_PROJECT_VERSION = re.compile(r'^\[project\]\s*$.*?^version\s*=\s*["\']([^"\']+)["\']', re.M | re.S)


def _get_version() -> str:
    """Version from a source checkout's pyproject.toml, else the installed dist."""
    pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
    if pyproject.is_file():
        match = _PROJECT_VERSION.search(pyproject.read_text(encoding="utf-8"))
        if match:
            return match.group(1)
    try:
        return _dist_version(DIST_NAME)
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()
__all__: list[str] = ["__version__"]
