# resunits.core.dimensions

from __future__ import annotations

from dataclasses import dataclass, field

from resunits.core.utils import validate_dimension_name


@dataclass(frozen=True, slots=True)
class Dimension:
    """A named physical dimension with the factor that converts one unit of it to SI.

    Plain dimensions are validated against the symbol grammar (see
    `resunits.core.utils`). Composite dimensions, whose names are whole
    expressions such as ``"L*L*L/t"``, are built with `make_composite`.
    """

    name: str
    si_scaling: float
    # keyword-only; not part of equality or hashing
    _composite: bool = field(default=False, compare=False, kw_only=True)

    def __post_init__(self) -> None:
        if not self._composite:
            validate_dimension_name(self.name)

    @classmethod
    def make_composite(cls, name: str, si_scaling: float) -> Dimension:
        """Factory for derived dimensions; the name is not checked."""
        return cls(name, si_scaling, _composite=True)

    @property
    def is_composite(self) -> bool:
        return self._composite

    def get_name(self) -> str:
        return self.name

    def get_si_scaling(self) -> float:
        return self.si_scaling

    def __repr__(self) -> str:
        kind = "composite " if self._composite else ""
        return f"<{kind}Dimension {self.name!r} si_scaling={self.si_scaling!r}>"


__all__ = ["Dimension"]
