""" Helpers shared across the comparators. """

import logging
import numbers

import numpy as np

from betacompare.errors import ValidationError


def get_logger(name: str = __name__) -> logging.Logger:
    """Gets a logger instance.

    Args:
        name: The name of the logger.

    Returns:
        A logger instance.
    """
    return logging.getLogger(name)


def check_positive(value, name):
    """Checks that a real number is finite and strictly positive.

    Args:
        value: The number to check.
        name: The argument name used in the error message.

    Returns:
        The value as a float.

    Raises:
        ValidationError: If `value` is not a finite positive real.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(f"{name} must be a real number, got {value!r}.")
    if not np.isfinite(value) or value <= 0:
        raise ValidationError(f"{name} must be finite and positive, got {value!r}.")
    return float(value)


def check_count(value, name, minimum=0):
    """Checks that a value is an integer no smaller than `minimum`.

    Args:
        value: The count to check.
        name: The argument name used in the error message.
        minimum: The smallest permitted value.

    Returns:
        The value as an int.

    Raises:
        ValidationError: If `value` is not an integer or is below `minimum`.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(f"{name} must be an integer, got {value!r}.")
    if value < minimum:
        raise ValidationError(f"{name} must be at least {minimum}, got {value!r}.")
    return int(value)


def check_confidence_level(confidence_level):
    """Checks that a confidence level lies strictly between 0 and 1.

    Raises:
        ValidationError: If the level is outside (0, 1).
    """
    if isinstance(confidence_level, bool) or not isinstance(
        confidence_level, numbers.Real
    ):
        raise ValidationError(
            f"confidence_level must be a real number, got {confidence_level!r}."
        )
    if not 0 < confidence_level < 1:
        raise ValidationError(
            f"confidence_level must lie strictly between 0 and 1, got {confidence_level!r}."
        )
    return float(confidence_level)
