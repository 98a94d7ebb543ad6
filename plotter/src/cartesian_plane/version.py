"""Application version module.

Packaged builds set _BAKED_VERSION. From a source checkout the version is
the MAJOR.MINOR in the project's VERSION file plus the number of commits
since the last git tag. An installed copy without the checkout reports the
version recorded in its package metadata, which is read from the same file.
"""

import subprocess
from importlib import metadata
from pathlib import Path

_BAKED_VERSION = None

DISTRIBUTION_NAME = "cartesian-plane"

# plotter/src/cartesian_plane/version.py -> project root
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


def get_version() -> str:
    """Get the application version string (e.g. '1.0.4')."""
    if _BAKED_VERSION is not None:
        return _BAKED_VERSION
    version_file = _PROJECT_ROOT / "VERSION"
    if version_file.is_file():
        return _dev_version(version_file.read_text().strip())
    return _installed_version()


def _git(*args):
    """Run git in the project root; stdout on success, else None."""
    try:
        result = subprocess.run(
            ['git', *args],
            capture_output=True, text=True, check=False,
            cwd=str(_PROJECT_ROOT),
        )
    except FileNotFoundError:
        return None  # git not installed
    if result.returncode != 0:
        return None
    return result.stdout.strip()


def _dev_version(major_minor: str) -> str:
    # Format: v1.0-5-gabcdef  ->  commits since tag is the middle part
    described = _git('describe', '--tags', '--long')
    if described:
        parts = described.rsplit('-', 2)
        if len(parts) == 3:
            return f"{major_minor}.{parts[1]}"

    total = _git('rev-list', '--count', 'HEAD')
    if total:
        return f"{major_minor}.{total}"

    return f"{major_minor}.0"


def _installed_version() -> str:
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return "0.0.0"
