"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import envconfig' works without installing.
"""
import sys
from pathlib import Path

import pytest

repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))


@pytest.fixture
def write_env(tmp_path):
    """Write a .env file with the given lines and return its path."""

    def _write(*lines: str) -> Path:
        path = tmp_path / ".env"
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write
