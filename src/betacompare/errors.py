"""Exceptions and warnings raised by betacompare."""


class ValidationError(ValueError):
    """An argument is outside the domain the calculation is defined on.

    Raised for non-positive Beta parameters, inconsistent success and trial
    counts, non-positive draw counts or grid steps and similar bad input.
    Values are never silently corrected.
    """


class ConfigurationError(ValueError):
    """A comparison strategy is unknown or is missing required parameters."""


class DimensionError(ValueError):
    """Batch inputs have inconsistent shapes or contents."""


class NumericalStabilityWarning(RuntimeWarning):
    """A result is approximate or has lost precision.

    Issued by the exact comparator when the summation bound had to be rounded
    or when log-space terms were extreme enough to degrade the result.
    """
