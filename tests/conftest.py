from __future__ import annotations

from pathlib import Path

import pytest

from projutil.goenv import Environment
from tests._fixtures.project_builder import ProjectBuilder


@pytest.fixture
def project_builder(tmp_path: Path) -> ProjectBuilder:
    """Provide a reusable project builder rooted at the pytest tmp_path."""
    return ProjectBuilder(tmp_path)


@pytest.fixture
def fake_env(tmp_path: Path) -> Environment:
    """Provide an isolated environment whose HOME points inside tmp_path."""
    home = tmp_path / "home"
    home.mkdir()
    return Environment({"HOME": str(home)})
