"""Root test configuration: isolate each test from user config and env vars"""

import pytest

from mdassemble.config import Settings


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run every test from an empty directory with no MDASSEMBLE_* overrides."""
    for name in Settings.model_fields:
        monkeypatch.delenv(f"MDASSEMBLE_{name.upper()}", raising=False)
    monkeypatch.chdir(tmp_path)
