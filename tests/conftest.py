#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from unitcalc.units import Unit

# Fixtures -------------------------------------------------------------------------------------------------------------

SAMPLE_UNITS = [
    pytest.param(Unit(), id="dimensionless"),
    pytest.param(Unit({"m": 1}), id="m"),
    pytest.param(Unit({"m": 2}), id="m^2"),
    pytest.param(Unit({"kg": 1, "m": 1, "s": -2}), id="newton"),
    pytest.param(Unit({"A": -2, "kg": -1, "m": -2, "s": 4}), id="farad"),
]


@pytest.fixture
def m() -> Unit:
    return Unit.new_named("m")


@pytest.fixture
def s() -> Unit:
    return Unit.new_named("s")


@pytest.fixture
def kg() -> Unit:
    return Unit.new_named("kg")


@pytest.fixture(params=SAMPLE_UNITS)
def unit(request) -> Unit:
    """Each of the sample units in canonical form."""
    return request.param


@pytest.fixture(params=SAMPLE_UNITS)
def other(request) -> Unit:
    """Second independent sample unit for binary laws."""
    return request.param
