#
# KQuantity - Display Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
from decimal import Decimal

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from kquantity import Quantity, si_scaled


# Tests ----------------------------------------------------------------------------------------------------------------

class TestSiScaled:

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(Decimal("0.001"), "1m", id="milli-boundary"),
            pytest.param(0.001, "1m", id="milli-float"),
            pytest.param(Decimal("0.5"), "1m", id="half-forced-milli"),
            pytest.param(Decimal("0.999"), "1m", id="just-below-one"),
            pytest.param("1.5", "1500m", id="one-and-a-half"),
            pytest.param(Decimal("1.4996"), "1500m", id="rounds-to-one-and-a-half"),
            pytest.param(1, "1", id="one"),
            pytest.param(Decimal("1.2345"), "1.235", id="half-up"),
            pytest.param(Decimal("999.9996"), "1000", id="rounds-up-within-tier"),
            pytest.param(1500, "1.5k", id="kilo"),
            pytest.param(Decimal("2500000"), "2.5M", id="mega"),
            pytest.param(Decimal("1e9"), "1G", id="giga"),
            pytest.param(Decimal("1e12"), "1T", id="tera"),
            pytest.param(Decimal("5e15"), "5000T", id="beyond-tera"),
            pytest.param(Decimal("0.0005"), "500u", id="micro"),
            pytest.param(Decimal("0.000000002"), "2n", id="nano"),
        ],
    )
    def test_scaled(self, value, expected):
        res = si_scaled(value)
        assert isinstance(res, Quantity)
        assert str(res) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(0, "0", id="zero"),
            pytest.param(-5, "-5", id="negative"),
            pytest.param(Decimal("1e-10"), "0.0000000001", id="below-nano"),
        ],
    )
    def test_below_thresholds(self, value, expected):
        res = si_scaled(value)
        assert (res.amount, res.format) == (expected, "")

    def test_forced_milli_is_parts(self):
        res = si_scaled(Decimal("1.5"))
        assert (res.amount, res.format) == ("1500", "m")
        assert res == Quantity("1.5")

    def test_scaled_is_valid_quantity(self):
        assert si_scaled(Decimal("2500000")) == Quantity("2.5M")
        assert si_scaled(Decimal("0.0005")) == Quantity("500u")
