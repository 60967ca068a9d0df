"""
resunits.core.utils
===================

Helpers for the dimension-symbol grammar.

A plain (non-composite) dimension symbol is either the literal ``"1"``
(the dimensionless unit) or an identifier-like token::

    NAME := [A-Za-z_][A-Za-z0-9_]*

Anything else (empty strings, whitespace, a leading digit or ``.``, the
composition operators ``*`` and ``/``) is rejected.
"""

from __future__ import annotations

import re
from typing import Pattern

from resunits.core.errors import NamingValidationError

DIMENSIONLESS = "1"

_NAME_RE: Pattern[str] = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def is_valid_dimension_name(name: str) -> bool:
    if name == DIMENSIONLESS:
        return True
    # fullmatch, so "L\n" or "Lx " never slip through
    return _NAME_RE.fullmatch(name) is not None


def validate_dimension_name(name: str) -> str:
    """Return `name` unchanged, or raise `NamingValidationError`."""
    if not isinstance(name, str) or not is_valid_dimension_name(name):
        raise NamingValidationError(name)
    return name


__all__ = ["DIMENSIONLESS", "is_valid_dimension_name", "validate_dimension_name"]
