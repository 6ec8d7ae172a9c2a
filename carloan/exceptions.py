"""
Exceptions raised by the loan calculation core.
"""


class LoanCalculationError(ValueError):
    """Base class for every error raised by carloan."""

    pass


class InvalidLoanInputs(LoanCalculationError):
    """Raised in strict mode when loan terms or solver arguments are invalid."""

    pass


class InvalidLoanState(InvalidLoanInputs):
    """
    Raised when the EMI does not cover the monthly interest on the principal.

    The logarithmic tenure solve is undefined in that case; the loan would
    never amortize.
    """

    pass
