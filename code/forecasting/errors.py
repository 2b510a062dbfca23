"""
Exceptions raised by the forecasting package.

The engines themselves (forecast / actions) never raise for any transaction
list; these cover the edges where input arrives from outside.
"""


class ForecastingError(Exception):
    """Base class for forecasting errors."""
    pass


class LedgerParseError(ForecastingError):
    """Raised when a ledger CSV cannot be parsed at all."""
    pass


class UnknownRegionError(ForecastingError, ValueError):
    """Raised when a region code has no profile."""
    pass


class SnapshotError(ForecastingError):
    """Raised when a stored snapshot cannot be read back."""
    pass
