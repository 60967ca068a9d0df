"""
resunits.core.errors
====================

Typed errors raised by dimension construction, unit-system lookups and
composite-expression parsing.

All of them derive from `ValueError` so callers that only care about
"bad input" can catch that, while the input-file parser can tell the
failure kinds apart and report the offending token.
"""

from __future__ import annotations


class UnitsError(ValueError):
    """Base class for every error raised by resunits."""


class NamingValidationError(UnitsError):
    """A dimension name does not follow the symbol grammar."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Invalid dimension name: {name!r}")


class DimensionNotRecognizedError(UnitsError, KeyError):
    """A symbol is not defined in the unit system it was looked up in."""

    def __init__(self, symbol: str, system: str | None = None) -> None:
        self.symbol = symbol
        self.system = system
        where = f" in unit system {system!r}" if system is not None else ""
        super().__init__(f"Dimension: {symbol!r} not recognized{where}")

    # KeyError would otherwise repr() the message
    def __str__(self) -> str:
        return str(self.args[0])


class GrammarError(UnitsError):
    """A composite dimension expression is malformed."""

    def __init__(self, expression: str, reason: str) -> None:
        self.expression = expression
        self.reason = reason
        super().__init__(f"Invalid dimension expression {expression!r}: {reason}")


class SystemNotRecognizedError(UnitsError, KeyError):
    """No unit system is registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unit system: {name!r} not recognized")

    def __str__(self) -> str:
        return str(self.args[0])


__all__ = [
    "UnitsError",
    "NamingValidationError",
    "DimensionNotRecognizedError",
    "GrammarError",
    "SystemNotRecognizedError",
]
