import pytest

from resunits.core.errors import NamingValidationError
from resunits.core.utils import DIMENSIONLESS, is_valid_dimension_name, validate_dimension_name


@pytest.mark.parametrize("name", ["1", "L", "t", "m", "K", "P", "abc_12", "_"])
def test_valid(name):
    assert is_valid_dimension_name(name)
    assert validate_dimension_name(name) == name

@pytest.mark.parametrize("name", ["", " ", "\t", "0", "2", "11", "1L", ".L", "L.", "L*L", "L/t", "L-t", "L^2", "µ"])
def test_invalid(name):
    assert not is_valid_dimension_name(name)
    with pytest.raises(NamingValidationError):
        validate_dimension_name(name)

def test_non_string_rejected():
    with pytest.raises(NamingValidationError):
        validate_dimension_name(1)  # type: ignore[arg-type]

def test_dimensionless_symbol():
    assert DIMENSIONLESS == "1"
