"""Version information for callertrace."""

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def resolve_version(distribution: str = "callertrace", pyproject: Path = PYPROJECT) -> str:
    """Look up the package version.

    Installed metadata wins; a source checkout falls back to the
    ``[tool.poetry]`` table of its pyproject.toml.

    Raises:
        RuntimeError: If neither source knows the version
    """
    try:
        return version(distribution)
    except PackageNotFoundError:
        if not pyproject.exists():
            raise RuntimeError(f"Could not determine {distribution} version") from None
        with pyproject.open("rb") as f:
            return str(tomllib.load(f)["tool"]["poetry"]["version"])


__version__ = resolve_version()

__all__ = ["__version__"]
