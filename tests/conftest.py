"""
Pytest configuration for Crimson tests.
"""
import sys
import os

import pytest

# Ensure `import crimson...` works from a source checkout (src/ on sys.path)
_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
_SRC_DIR = os.path.join(_ROOT, 'src')

if _SRC_DIR not in sys.path:
	sys.path.insert(0, _SRC_DIR)


@pytest.fixture(autouse=True)
def _reset_interpreter_state():
	"""Config and the error reporter are process-wide; isolate each test."""
	from crimson.config import config, configure_logging
	from crimson.error_reporter import get_error_reporter

	config.reset()
	configure_logging()
	yield
	config.reset()
	configure_logging()
	get_error_reporter().clear()


@pytest.fixture
def no_sleep(monkeypatch):
	"""Record Sleep() durations instead of blocking."""
	calls = []
	monkeypatch.setattr("crimson.evaluator.functions.time.sleep", calls.append)
	return calls
