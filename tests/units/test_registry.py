# pytest tests for resunits.units.registry

import logging
import threading

import pytest

from resunits.core.errors import SystemNotRecognizedError
from resunits.units.registry import (
    UnitSystemRegistry,
    default_registry,
    normalize_system_name,
)
from resunits.units.unit_system import UnitSystem, new_field, new_metric


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def reg():
    r = UnitSystemRegistry()
    r.add_system(new_metric())
    r.add_system(new_field())
    return r


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("name", ["METRIC", "meTRIC", "meTRic", "Metric", "metric"])
def test_metric_lookup_case_insensitive(reg, name):
    assert reg.has_system(name)
    assert name in reg
    assert reg.get_system(name).get_name() == "Metric"

@pytest.mark.parametrize("name", ["Field", "FIELD", "field"])
def test_field_lookup_case_insensitive(reg, name):
    assert reg.has_system(name)
    assert reg.get_system(name).get_name() == "Field"

def test_unknown_system(reg):
    assert not reg.has_system("NoNotThisOne")
    with pytest.raises(SystemNotRecognizedError) as excinfo:
        reg.get_system("NoNotThisOne")
    assert excinfo.value.name == "NoNotThisOne"
    assert "'NoNotThisOne'" in str(excinfo.value)

def test_unknown_system_is_value_and_key_error(reg):
    with pytest.raises(ValueError):
        reg.get_system("Lab")
    with pytest.raises(KeyError):
        reg.get_system("Lab")

def test_whitespace_is_significant(reg):
    assert not reg.has_system(" Metric")

def test_get_returns_registered_instance():
    r = UnitSystemRegistry()
    system = UnitSystem("Lab")
    r.add_system(system)
    assert r.get_system("LAB") is system

def test_empty_registry():
    r = UnitSystemRegistry()
    assert len(r) == 0
    assert r.names() == []
    assert not r.has_system("Metric")


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------

def test_add_replaces_same_normalized_name(reg, caplog):
    replacement = UnitSystem("METRIC")
    with caplog.at_level(logging.DEBUG, logger="resunits.units.registry"):
        reg.add_system(replacement)
    assert reg.get_system("metric") is replacement
    assert len(reg) == 2
    assert "Replacing unit system 'Metric'" in caplog.text

def test_names_keep_original_spelling(reg):
    assert reg.names() == ["Field", "Metric"]

def test_normalize_system_name():
    assert normalize_system_name("MeTRiC") == "metric"
    assert normalize_system_name("STRASSE") == normalize_system_name("straße")

def test_registry_sees_mutation_of_registered_system(reg):
    reg.get_system("metric").add_dimension("L", 2.0)
    assert reg.get_system("METRIC").get_dimension("L").get_si_scaling() == 2.0


# ---------------------------------------------------------------------------
# default_registry
# ---------------------------------------------------------------------------

def test_default_registry_contents(systems):
    assert systems.names() == ["Field", "Metric"]
    assert systems.get_system("FIELD").has_dimension("P")

def test_default_registry_returns_fresh_instances():
    a = default_registry()
    b = default_registry()
    assert a is not b
    assert a.get_system("Metric") is not b.get_system("Metric")
    a.get_system("Metric").add_dimension("t", 1.0)
    assert b.get_system("Metric").get_dimension("t").get_si_scaling() == 86400.0


# ---------------------------------------------------------------------------
# Thread-safety smoke test
# ---------------------------------------------------------------------------

def test_concurrent_add_and_get():
    r = UnitSystemRegistry()
    errors = []

    def worker(i):
        try:
            name = f"System{i % 5}"
            r.add_system(UnitSystem(name))
            assert r.has_system(name.upper())
            r.get_system(name.lower())
        except Exception as e:  # pragma: no cover - only on failure
            errors.append(e)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(50)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert not errors
    assert len(r) == 5
