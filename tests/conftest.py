import os
import sys

import pytest
from unittest.mock import MagicMock

# Ensure the 'src' directory is on sys.path so the 'smake' package can be imported
dirpath = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if dirpath not in sys.path:
    sys.path.insert(0, dirpath)

from smake.core.runner import CommandResult  # noqa: E402


# ==================== Makefile Fixtures ====================
@pytest.fixture
def write_makefile(tmp_path):
    """Returns a helper that writes makefile text under tmp_path."""
    def _write(text: str, name: str = "makefile"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


# ==================== Runner / Reporter Doubles ====================
@pytest.fixture
def mock_reporter():
    """Returns a reporter double recording headline/error/info calls."""
    return MagicMock()


@pytest.fixture
def recording_runner():
    """Returns a runner double that succeeds with no output and records commands."""
    runner = MagicMock()
    runner.run.side_effect = lambda command: CommandResult(command=command, returncode=0)
    return runner
