"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages, and
exposes the fixture source trees under tests/testdata.
"""

import sys
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
# This ensures that the local docbind package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of docbind modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("docbind"):
        del sys.modules[module_name]

TESTDATA = Path(__file__).parent / "testdata"


@pytest.fixture
def go_testdata() -> Path:
    """Go source tree: root package plus client/ and module1/ subpackages."""
    return TESTDATA / "go"


@pytest.fixture
def python_testdata() -> Path:
    """Python source tree mirroring the Go one."""
    return TESTDATA / "python"
