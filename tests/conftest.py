# tests/conftest.py
import pytest
from physvalues.units.registry import DEFAULT_REGISTRY as _ureg
from physvalues.units.registry import _bootstrap_default_registry


@pytest.fixture(scope="session")
def ureg():
    return _ureg

@pytest.fixture
def fresh_registry():
    return _bootstrap_default_registry()
