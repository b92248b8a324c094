# tests/conftest.py
from __future__ import annotations

import pytest

from failchain.config import set_config


@pytest.fixture(autouse=True)
def _default_config():
    # engine reads the process-wide config; keep tests isolated
    set_config(None)
    yield
    set_config(None)
