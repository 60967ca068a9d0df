from resunits.core.dimensions import Dimension
from resunits.core.errors import (
    DimensionNotRecognizedError,
    GrammarError,
    NamingValidationError,
    SystemNotRecognizedError,
    UnitsError,
)

__all__ = [
    "Dimension",
    "UnitsError",
    "NamingValidationError",
    "DimensionNotRecognizedError",
    "GrammarError",
    "SystemNotRecognizedError",
]
