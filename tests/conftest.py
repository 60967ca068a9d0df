# tests/conftest.py
import pytest

from resunits.units.registry import default_registry
from resunits.units.unit_system import UnitSystem


@pytest.fixture
def metric():
    return UnitSystem.new_metric()

@pytest.fixture
def field():
    return UnitSystem.new_field()

@pytest.fixture
def empty_system():
    return UnitSystem("Metric")

@pytest.fixture
def systems():
    """Fresh registry with Metric and Field, isolated per test."""
    return default_registry()
