import logging
from functools import lru_cache
from typing import Optional, Tuple

from typing import TYPE_CHECKING

from resunits.core.dimensions import Dimension
from resunits.core.errors import GrammarError

if TYPE_CHECKING:
    from resunits.units.unit_system import UnitSystem

logger = logging.getLogger(__name__)

MUL = "*"
DIV = "/"

# --- Plan node types ------------------------------------------------
# ("factor", <expr>, None)
# ("div", <dividend expr>, <divisor expr>)
Plan = Tuple[str, str, Optional[str]]


# ---------------- Compilation (no unit-system lookups!) ----------------
@lru_cache(maxsize=4096)
def _compile_dimension_expr(expr: str) -> Plan:
    """
    Grammar:
      expr   := factor ['/' factor]
      factor := SYMBOL ('*' SYMBOL)*

    At most one division sign is allowed. Symbols are not validated here;
    they must match a stored symbol exactly, so whitespace or empty tokens
    fail later at lookup time.
    """
    div_count = expr.count(DIV)
    if div_count == 0:
        return ("factor", expr, None)
    if div_count == 1:
        dividend, divisor = expr.split(DIV)
        return ("div", dividend, divisor)
    raise GrammarError(expr, f"only one division sign {DIV!r} allowed, found {div_count}")


@lru_cache(maxsize=4096)
def split_factor(expr: str) -> Tuple[str, ...]:
    """Split a product expression like ``'L*L*L'`` into its symbol tokens."""
    return tuple(expr.split(MUL))


# ---------------- Evaluation of a plan against a given unit system ----------------
def _eval_plan(plan: Plan, expr: str, system: "UnitSystem") -> Dimension:
    kind = plan[0]
    if kind == "factor":
        return system.parse_factor(plan[1])
    elif kind == "div":
        dividend = system.parse_factor(plan[1])
        divisor = system.parse_factor(plan[2])
        return Dimension.make_composite(
            expr, dividend.get_si_scaling() / divisor.get_si_scaling()
        )
    else:
        raise RuntimeError(f"Invalid plan node: {plan!r}")


def extract_dimension_expr(expr: str, system: "UnitSystem") -> Dimension:
    """
    Resolve a composite expression like ``'L*L*L/t'`` against `system`.

    Caching-safety:
      * The compiled plan is cached by `expr` only (no unit-system state).
      * Symbols are bound to dimensions of the *provided* `system` at call time.

    Returns:
      A composite `Dimension` named with the whole, unsplit `expr`.
    """
    plan = _compile_dimension_expr(expr)
    result = _eval_plan(plan, expr, system)
    logger.debug(
        "Parsed %r in unit system %r: si_scaling=%r",
        expr, system.get_name(), result.get_si_scaling(),
    )
    return result


__all__ = ["MUL", "DIV", "split_factor", "extract_dimension_expr"]
