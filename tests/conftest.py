#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

WELL_FORMED = (
    "0", "1", "1000", "-3.2", ".5", "1.5k", "500m", "100u", "7n", "2Gi", "512Mi", "1Ki",
    "3Ti", "1Pi", "1Ei", "4M", "1G", "2T", "1P", "1E", "4e9", "129e-6", "1E3", "2e+2",
)


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def well_formed() -> tuple[str, ...]:
    """Quantity strings that parse and resolve to a numerical amount."""
    return WELL_FORMED
