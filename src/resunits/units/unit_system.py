"""
resunits.units.unit_system
==========================

A `UnitSystem` is a named set of base dimensions ("1", "P", "L", "t", "m",
"K", ...) each carrying its factor to SI. It resolves composite expressions
such as ``"L*L*L/t"`` into a single derived `Dimension`.

Mutation (`add_dimension`) is not synchronized: a system should be populated
by one owner, after which it can be shared read-only.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Mapping

from resunits.core.dimensions import Dimension
from resunits.core.errors import DimensionNotRecognizedError
from resunits.core.utils import DIMENSIONLESS
from resunits.units.conversion import FIELD, METRIC, ConversionConstants
from resunits.units.parser import extract_dimension_expr, split_factor

logger = logging.getLogger(__name__)


class UnitSystem:
    """Named collection of dimensions keyed by symbol (case-sensitive)."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._dimensions: Dict[str, Dimension] = {}

    def __contains__(self, symbol: str) -> bool:
        return self.has_dimension(symbol)

    def __repr__(self) -> str:
        return f"UnitSystem({self._name!r}, symbols={sorted(self._dimensions)!r})"

    # -------------------------- public API ---------------------------------
    def get_name(self) -> str:
        return self._name

    def has_dimension(self, symbol: str) -> bool:
        return symbol in self._dimensions

    def get_dimension(self, symbol: str) -> Dimension:
        """Lookup a dimension by its exact symbol.

        Raises `DimensionNotRecognizedError` if unknown.
        """
        try:
            return self._dimensions[symbol]
        except KeyError:
            raise DimensionNotRecognizedError(symbol, self._name) from None

    def add_dimension(self, symbol: str, si_scaling: float) -> None:
        """Add `symbol`, replacing any dimension already stored under it."""
        dim = Dimension(symbol, si_scaling)
        previous = self._dimensions.pop(symbol, None)
        if previous is not None:
            logger.debug(
                "Replacing dimension %r in unit system %r: %r -> %r",
                symbol, self._name, previous.get_si_scaling(), si_scaling,
            )
        self._dimensions[symbol] = dim

    def dimensions(self) -> Mapping[str, Dimension]:
        """Read-only snapshot of the symbol -> dimension mapping."""
        return MappingProxyType(dict(self._dimensions))

    def parse_factor(self, expression: str) -> Dimension:
        """Resolve a product of symbols (``'L*L*L'``) into a composite dimension.

        The result is named with the whole `expression`; its factor is the
        product of the factors of every symbol.
        """
        si_factor = 1.0
        for symbol in split_factor(expression):
            si_factor *= self.get_dimension(symbol).get_si_scaling()
        return Dimension.make_composite(expression, si_factor)

    def parse(self, expression: str) -> Dimension:
        """Resolve ``dividend[/divisor]`` where both sides are symbol products.

        Raises `GrammarError` for more than one ``/`` and
        `DimensionNotRecognizedError` for any unknown (or empty) symbol.
        """
        return extract_dimension_expr(expression, self)

    # ------------------------- factories -----------------------------------
    @classmethod
    def from_constants(
        cls, constants: ConversionConstants, name: str | None = None
    ) -> UnitSystem:
        """Build a system holding the "1", "P", "L", "t", "m" and "K" dimensions."""
        system = cls(constants.name if name is None else name)
        system.add_dimension(DIMENSIONLESS, 1.0)
        system.add_dimension("P", constants.pressure)
        system.add_dimension("L", constants.length)
        system.add_dimension("t", constants.time)
        system.add_dimension("m", constants.mass)
        system.add_dimension("K", constants.permeability)
        return system

    @classmethod
    def new_metric(cls, constants: ConversionConstants = METRIC) -> UnitSystem:
        return cls.from_constants(constants, "Metric")

    @classmethod
    def new_field(cls, constants: ConversionConstants = FIELD) -> UnitSystem:
        return cls.from_constants(constants, "Field")


def new_metric(constants: ConversionConstants = METRIC) -> UnitSystem:
    """Fresh, independently owned "Metric" unit system."""
    return UnitSystem.new_metric(constants)


def new_field(constants: ConversionConstants = FIELD) -> UnitSystem:
    """Fresh, independently owned "Field" unit system."""
    return UnitSystem.new_field(constants)


__all__ = ["UnitSystem", "new_metric", "new_field"]
