"""
Pytest configuration file for the st-machines project.
This file sets up the Python path so tests can import modules from the project root,
and provides a stand-in for the streamlit module.
"""
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add the project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def fake_st():
    """
    MagicMock replacing ``st`` inside a module under test.
    session_state is a plain dict so membership, get/set and del behave
    like Streamlit's SessionStateProxy.
    """
    st = MagicMock()
    st.session_state = {}
    st.columns.side_effect = lambda spec: [MagicMock() for _ in range(spec if isinstance(spec, int) else len(spec))]
    return st


@pytest.fixture
def settings_defaults(monkeypatch):
    """Pin the [machines] defaults independently of settings.toml contents."""
    import settings_service

    monkeypatch.setattr(settings_service, "_cached_settings", {
        "env": {"env": "test", "log_level": "DEBUG"},
        "machines": {"flag_init": False, "step_loop": False},
    })
    return settings_service._cached_settings
