import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'defkit' and the repo root importable for 'tests.helpers'
for p in (SRC_ROOT, REPO_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from defkit.core.config import reset_config  # noqa: E402
from defkit.core.logging import reset_stdlib_logging_for_tests  # noqa: E402
from defkit.data import clear_caches  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_defkit_state():
    """Drop the active config, logging handlers and cached data files between tests."""
    yield
    reset_config()
    reset_stdlib_logging_for_tests()
    clear_caches()
