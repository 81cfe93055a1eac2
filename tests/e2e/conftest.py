from pathlib import Path

import pytest


@pytest.fixture
def e2e_workspace(tmp_path: Path) -> Path:
    """Directory for the config and weight files written by an end-to-end run."""
    workspace = tmp_path / "moeadpy_e2e"
    workspace.mkdir()
    return workspace
