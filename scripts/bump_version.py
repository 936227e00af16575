"""
Bump the tirecalc version in tirecalc/__init__.py and pyproject.toml.

The API reports tirecalc.__version__, so both files must agree.

Usage:
    python scripts/bump_version.py 0.2.0
"""

from __future__ import annotations

import re
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
INIT_PATH = ROOT / "tirecalc" / "__init__.py"
PYPROJECT_PATH = ROOT / "pyproject.toml"

VERSION_RE = re.compile(r"^\d+\.\d+\.\d+([.-]?[A-Za-z0-9.]+)?$")


def _substitute(path: Path, pattern: str, replacement: str) -> None:
    text = path.read_text()
    new_text, count = re.subn(pattern, replacement, text, count=1, flags=re.MULTILINE)
    if count == 0:
        raise SystemExit(f"No version string found in {path.relative_to(ROOT)}")
    path.write_text(new_text)


def bump(new_version: str) -> None:
    if not VERSION_RE.match(new_version):
        raise SystemExit(f"Not a version: {new_version!r}")
    _substitute(INIT_PATH, r'^__version__\s*=\s*"[^"]+"', f'__version__ = "{new_version}"')
    _substitute(PYPROJECT_PATH, r'^version\s*=\s*"[^"]+"', f'version = "{new_version}"')
    print(f"tirecalc version is now {new_version}")


if __name__ == "__main__":
    if len(sys.argv) != 2:
        raise SystemExit("Usage: python scripts/bump_version.py <new-version>")
    bump(sys.argv[1])
