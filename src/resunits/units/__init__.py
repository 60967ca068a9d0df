from resunits.units.conversion import FIELD, METRIC, ConversionConstants
from resunits.units.registry import UnitSystemRegistry, default_registry
from resunits.units.unit_system import UnitSystem, new_field, new_metric

__all__ = [
    "ConversionConstants",
    "METRIC",
    "FIELD",
    "UnitSystem",
    "new_metric",
    "new_field",
    "UnitSystemRegistry",
    "default_registry",
]
