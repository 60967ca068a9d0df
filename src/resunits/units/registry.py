"""
resunits.units.registry
=======================

Case-insensitive registry of whole unit systems.

- Encapsulates the mapping in a `UnitSystemRegistry` class (thread-safe).
- Names are normalized with Unicode NFC + `str.casefold`, so "METRIC",
  "meTRIC" and "Metric" all resolve to the same system.
- Registering a system whose normalized name already exists replaces it.
- Easily testable: `default_registry()` builds a fresh, independent instance
  each call instead of sharing a module-level global.
"""
from __future__ import annotations

import logging
import threading
import unicodedata
from typing import Dict, List

from resunits.core.errors import SystemNotRecognizedError
from resunits.units.unit_system import UnitSystem

logger = logging.getLogger(__name__)


def normalize_system_name(name: str) -> str:
    """Normalize a unit-system name for case-insensitive comparison.

    Rules:
    - Unicode normalize to NFC.
    - Case-fold.
    Surrounding whitespace is kept; " Metric" is a different name.
    """
    return unicodedata.normalize("NFC", name).casefold()


class UnitSystemRegistry:
    """Thread-safe mapping of unit-system name -> `UnitSystem`."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._systems: Dict[str, UnitSystem] = {}

    def __contains__(self, name: str) -> bool:
        return self.has_system(name)

    def __len__(self) -> int:
        with self._lock:
            return len(self._systems)

    # -------------------------- public API ---------------------------------
    def add_system(self, system: UnitSystem) -> None:
        """Register `system` under its own name, overwriting any prior entry."""
        key = normalize_system_name(system.get_name())
        with self._lock:
            previous = self._systems.get(key)
            if previous is not None and previous is not system:
                logger.debug(
                    "Replacing unit system %r with %r",
                    previous.get_name(), system.get_name(),
                )
            else:
                logger.debug("Registered unit system %r", system.get_name())
            self._systems[key] = system

    def has_system(self, name: str) -> bool:
        with self._lock:
            return normalize_system_name(name) in self._systems

    def get_system(self, name: str) -> UnitSystem:
        """Case-insensitive lookup.

        Raises `SystemNotRecognizedError` if unknown.
        """
        with self._lock:
            system = self._systems.get(normalize_system_name(name))
        if system is None:
            raise SystemNotRecognizedError(name)
        return system

    def names(self) -> List[str]:
        """Registered system names, as spelled by the systems themselves."""
        with self._lock:
            return sorted(s.get_name() for s in self._systems.values())


# ---------------------------------------------------------------------------
# Bootstrap a registry with the built-in systems
# ---------------------------------------------------------------------------

def default_registry() -> UnitSystemRegistry:
    """Fresh registry holding new "Metric" and "Field" systems."""
    reg = UnitSystemRegistry()
    reg.add_system(UnitSystem.new_metric())
    reg.add_system(UnitSystem.new_field())
    return reg


__all__ = [
    "UnitSystemRegistry",
    "default_registry",
    "normalize_system_name",
]
