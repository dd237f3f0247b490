import io
import os
import sys

import pytest

# Ensure tests can import top-level modules when pytest changes CWD.
REPO_ROOT = os.path.dirname(os.path.dirname(__file__))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from interpreter import Interpreter  # noqa: E402


@pytest.fixture
def session():
    """An interpreter whose printed output is captured in `session.output`."""
    return Interpreter(output=io.StringIO())
