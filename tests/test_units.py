#
# unitcalc - Units Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from unitcalc.units import DIMENSIONLESS, Unit


# Tests ----------------------------------------------------------------------------------------------------------------

class TestUnitConstruction:

    def test_new_is_dimensionless(self):
        u = Unit.new()
        assert u == Unit()
        assert u == DIMENSIONLESS
        assert u.is_dimensionless()
        assert len(u) == 0
        assert not u
        assert str(u) == ""

    def test_new_named(self):
        u = Unit.new_named("m")
        assert dict(u.parts) == {"m": 1}
        assert u.exponent("m") == 1
        assert u.exponent("s") == 0
        assert str(u) == "m"

    @pytest.mark.parametrize('parts, expected', [
        pytest.param({"m": 0}, {}, id='zero_dropped'),
        pytest.param({"m": 1, "s": 0}, {"m": 1}, id='zero_among_others'),
        pytest.param([("m", 1), ("m", -1)], {}, id='pairs_cancel'),
        pytest.param([("m", 1), ("m", 2)], {"m": 3}, id='pairs_summed'),
    ])
    def test_constructor_canonicalizes(self, parts, expected):
        u = Unit(parts)
        assert dict(u.parts) == expected
        assert 0 not in u.parts.values()

    @pytest.mark.parametrize('parts', [
        pytest.param({1: 1}, id='int_name'),
        pytest.param({"m": 1.0}, id='float_exp'),
        pytest.param({"m": True}, id='bool_exp'),
    ])
    def test_constructor_type_errors(self, parts):
        with pytest.raises(TypeError):
            Unit(parts)

    def test_from_unit_pairs(self):
        u = Unit({"m": 1, "s": -1})
        assert Unit(u) == u

    def test_immutable(self):
        u = Unit.new_named("m")
        with pytest.raises(AttributeError):
            u.parts = {}

    def test_hashable(self):
        assert hash(Unit({"m": 1, "s": -2})) == hash(Unit([("s", -2), ("m", 1)]))
        assert len({Unit.new_named("m"), Unit({"m": 1}), Unit()}) == 2


class TestUnitSingleton:

    @pytest.mark.parametrize('parts, expected', [
        pytest.param({"m": 1}, "m", id='m'),
        pytest.param({}, None, id='dimensionless'),
        pytest.param({"m": 2}, None, id='m^2'),
        pytest.param({"m": -1}, None, id='m^-1'),
        pytest.param({"m": 1, "s": 1}, None, id='m_s'),
    ])
    def test_singleton(self, parts, expected):
        assert Unit(parts).singleton() == expected


class TestUnitAlgebra:

    def test_multiply_composes(self, m):
        u = m.multiply(m)
        assert dict(u.parts) == {"m": 2}
        assert str(u) == "m^2"

    def test_divide_cancels(self, m):
        u = m.divide(m)
        assert u == Unit.new()
        assert str(u) == ""

    def test_multiply_distinct_names(self, m, s, kg):
        u = kg * m / s ** 2
        assert dict(u.parts) == {"kg": 1, "m": 1, "s": -2}
        assert str(u) == "kg m s^-2"

    def test_operands_unchanged(self, m, s):
        m.multiply(s)
        m.divide(s)
        m.pow(3)
        assert m == Unit.new_named("m")
        assert s == Unit.new_named("s")

    def test_multiply_commutative(self, unit, other):
        assert unit.multiply(other) == other.multiply(unit)

    def test_multiply_associative(self, unit, other, m):
        assert unit.multiply(other).multiply(m) == unit.multiply(other.multiply(m))

    def test_inverse_law(self, unit, other):
        assert unit.multiply(other).divide(other) == unit

    def test_divide_is_multiply_by_inverse(self, unit, other):
        assert unit.divide(other) == unit.multiply(other.pow(-1))

    def test_pow_identity(self, unit):
        assert unit.pow(1) == unit

    def test_pow_zero_is_dimensionless(self, unit):
        assert unit.pow(0) == Unit.new()
        assert unit.pow(0).parts == {}

    def test_pow_double_inverse(self, unit):
        assert unit.pow(-1).pow(-1) == unit

    @pytest.mark.parametrize('n, expected', [
        pytest.param(2, {"m": 2, "s": -4}, id='square'),
        pytest.param(-1, {"m": -1, "s": 2}, id='inverse'),
        pytest.param(-3, {"m": -3, "s": 6}, id='neg_cube'),
        pytest.param(0, {}, id='zero'),
    ])
    def test_pow(self, n, expected):
        assert dict(Unit({"m": 1, "s": -2}).pow(n).parts) == expected

    def test_pow_matches_repeated_multiply(self, unit):
        assert unit.pow(3) == unit * unit * unit

    def test_canonical_after_sequence(self, m, s, kg):
        u = (m * s * kg) / (m * s) / kg
        u = (u * m ** 2 / s).pow(-2) * m ** 4 / s ** 2
        assert u == Unit.new()
        assert 0 not in u.parts.values()

    @pytest.mark.parametrize('n', [
        pytest.param(1.0, id='float'),
        pytest.param(True, id='bool'),
        pytest.param("2", id='str'),
    ])
    def test_pow_type_error(self, m, n):
        with pytest.raises(TypeError, match="power must be int"):
            m.pow(n)
        with pytest.raises(TypeError):
            m ** n

    def test_multiply_type_error(self, m):
        with pytest.raises(TypeError, match="Unit expected"):
            m.multiply({"s": 1})
        with pytest.raises(TypeError):
            m * 2


class TestUnitDisplay:

    @pytest.mark.parametrize('parts, expected', [
        pytest.param({}, "", id='dimensionless'),
        pytest.param({"m": 1}, "m", id='m'),
        pytest.param({"s": -1}, "s^-1", id='hertz'),
        pytest.param({"s": -2, "m": 1, "kg": 1}, "kg m s^-2", id='newton_sorted'),
    ])
    def test_str(self, parts, expected):
        assert str(Unit(parts)) == expected

    def test_iter_in_name_order(self):
        u = Unit({"s": -2, "m": 1, "kg": 1})
        assert list(u) == [("kg", 1), ("m", 1), ("s", -2)]

    def test_repr(self):
        assert repr(Unit({"s": -2, "m": 1})) == "Unit({'m': 1, 's': -2})"
