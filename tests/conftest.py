"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest

from fakes import FakeGateway, FakeGenerator


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_diff():
    """Sample staged diff."""
    return """diff --git a/app.py b/app.py
index 1234567..abcdefg 100644
--- a/app.py
+++ b/app.py
@@ -1,3 +1,4 @@
 def main():
-    print("helo")
+    print("hello")
+    return 0
"""


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def generator():
    return FakeGenerator()


@pytest.fixture
def isolated_config_dir(mocker, temp_dir):
    """Point ~/.arc-commit at a temporary directory."""
    config_dir = temp_dir / ".arc-commit"
    mocker.patch("arc_commit.global_config._CONFIG_DIR", config_dir)
    return config_dir


@pytest.fixture(autouse=True)
def reset_active_config(mocker):
    """Keep module-level ACTIVE_* settings from leaking between tests."""
    from arc_commit import config

    mocker.patch.object(config, "ACTIVE_PROVIDER", config.DEFAULT_PROVIDER)
    mocker.patch.object(config, "ACTIVE_MODEL", None)
    mocker.patch.object(config, "MAX_TOKENS", config.DEFAULT_MAX_TOKENS)
    mocker.patch.object(config, "TEMPERATURE", config.DEFAULT_TEMPERATURE)
