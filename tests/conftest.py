from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.component_builder import ComponentWorkspace


@pytest.fixture
def workspace(tmp_path: Path) -> ComponentWorkspace:
    """Provide a component workspace rooted at the pytest tmp_path."""
    return ComponentWorkspace(tmp_path)
