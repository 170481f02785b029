import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'pleasant_path' and tests/ importable for helpers.
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from pleasant_path.config import ENV_PREFIX, reset_config_cache


@pytest.fixture(autouse=True)
def _isolated_workdir(tmp_path, monkeypatch):
    """Run every test inside its own temp directory with fresh config.

    Relative paths in tests resolve under ``tmp_path``, and developer-shell
    PLEASANT_PATH_* overrides never leak into assertions.
    """
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_config_cache()
    yield
    reset_config_cache()
