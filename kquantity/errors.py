#
# KQuantity Errors
#

# Classes --------------------------------------------------------------------------------------------------------------

class InvalidFormat(ValueError):
    """
    Raised when a quantity string, unit suffix or amount/format pair is malformed.

    Subclasses ValueError, so callers catching ValueError keep working.
    """
