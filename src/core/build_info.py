"""Build information embedded in the distribution.

The `BUILD_*` constants are rewritten by the release pipeline; a source
checkout reports them as "unknown".
"""

from __future__ import annotations

import platform
from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION_NAME = "aptos-cli"

BUILD_BRANCH = "unknown"
BUILD_COMMIT_HASH = "unknown"
BUILD_TAG = "unknown"
BUILD_TIME = "unknown"


def _package_version() -> str:
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "unknown"


def collect_build_information() -> dict[str, str]:
    """Flat diagnostic mapping, sorted by key for stable output."""

    info = {
        "build_branch": BUILD_BRANCH,
        "build_commit_hash": BUILD_COMMIT_HASH,
        "build_os": f"{platform.system().lower()}-{platform.machine().lower()}",
        "build_pkg_version": _package_version(),
        "build_python_version": platform.python_version(),
        "build_tag": BUILD_TAG,
        "build_time": BUILD_TIME,
    }
    return dict(sorted(info.items()))
