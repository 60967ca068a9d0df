"""
resunits: dimension and unit-system registry for reservoir simulation input decks.

resunits validates dimension symbols, stores named dimensions with their SI
scaling factor, resolves composite expressions such as ``"L*L*L/t"`` and keeps
named unit systems (Metric, Field) that are looked up case-insensitively.
"""

import logging
from importlib import metadata as _metadata
from pathlib import Path


__license__ = "MIT"

# Try to read the installed package version first; fall back to the source checkout's
# pyproject.toml (resolved from this file, not the working directory) for local dev.
_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"

try:
    __version__ = _metadata.version("resunits")
except _metadata.PackageNotFoundError:
    import tomllib
    with open(_PYPROJECT, "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Library logging stays silent unless the application configures handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())

from resunits.core.dimensions import Dimension  # noqa: E402
from resunits.core.errors import (  # noqa: E402
    DimensionNotRecognizedError,
    GrammarError,
    NamingValidationError,
    SystemNotRecognizedError,
    UnitsError,
)
from resunits.units.conversion import FIELD, METRIC, ConversionConstants  # noqa: E402
from resunits.units.registry import UnitSystemRegistry, default_registry  # noqa: E402
from resunits.units.unit_system import UnitSystem, new_field, new_metric  # noqa: E402


def registry() -> UnitSystemRegistry:
    """Fresh registry holding new "Metric" and "Field" systems.

    Each call builds independent systems; nothing is cached at module level.
    """
    return default_registry()


__all__ = [
    "__version__",
    "__license__",
    "Dimension",
    "UnitSystem",
    "UnitSystemRegistry",
    "ConversionConstants",
    "METRIC",
    "FIELD",
    "new_metric",
    "new_field",
    "default_registry",
    "registry",
    "UnitsError",
    "NamingValidationError",
    "DimensionNotRecognizedError",
    "GrammarError",
    "SystemNotRecognizedError",
]
