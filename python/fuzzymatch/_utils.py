"""Internal utilities for fuzzymatch."""

import math
from numbers import Integral, Real
from typing import Optional, Union

from fuzzymatch.enums import Algorithm, Direction
from fuzzymatch.exceptions import AlgorithmError, ValidationError

# Defaults for the plain-parameter configuration surface
DEFAULT_ERROR_RATE = 0.10
DEFAULT_LENGTH_DIFFERENCE = 2
DEFAULT_QUALITY = 0.7
DEFAULT_PREFIX_WEIGHT = 0.1
DEFAULT_CACHE_SIZE = 65536

MAX_PREFIX_WEIGHT = 0.25

# Valid algorithm names (lowercase)
VALID_ALGORITHMS = frozenset(a.value for a in Algorithm)


def normalize_algorithm(algorithm: Union[str, Algorithm]) -> str:
    """Convert Algorithm enum to string, or validate string algorithm name.

    Args:
        algorithm: Either an Algorithm enum value or a string algorithm name.

    Returns:
        Lowercase string algorithm name.

    Raises:
        AlgorithmError: If the algorithm name is not recognized.
        TypeError: If algorithm is not a string or Algorithm enum.

    Example:
        >>> normalize_algorithm(Algorithm.JARO_WINKLER)
        'jaro_winkler'
        >>> normalize_algorithm("Jaro")
        'jaro'
    """
    if isinstance(algorithm, Algorithm):
        return algorithm.value

    if isinstance(algorithm, str):
        algo_lower = algorithm.lower()
        if algo_lower in VALID_ALGORITHMS:
            return algo_lower
        raise AlgorithmError(
            f"Unknown algorithm: '{algorithm}'. "
            f"Valid options: {sorted(VALID_ALGORITHMS)}"
        )

    raise TypeError(
        f"algorithm must be str or Algorithm enum, got {type(algorithm).__name__}"
    )


def normalize_direction(direction: Union[str, Direction]) -> Direction:
    """Accept a Direction or its string value ("forward"/"backward")."""
    if isinstance(direction, Direction):
        return direction
    if isinstance(direction, str):
        try:
            return Direction(direction.lower())
        except ValueError:
            raise ValidationError(
                f"direction must be 'forward' or 'backward', got '{direction}'"
            ) from None
    raise TypeError(
        f"direction must be str or Direction enum, got {type(direction).__name__}"
    )


def check_str(name: str, value: object) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str, got {type(value).__name__}")


def validate_range(
    name: str, value: object, low: float = 0.0, high: float = 1.0
) -> float:
    """Return ``value`` as a float, raising ValidationError unless it is a
    finite number in ``[low, high]``."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(f"{name} must be a number, got {type(value).__name__}")
    value = float(value)
    if math.isnan(value) or not low <= value <= high:
        raise ValidationError(f"{name} must be in range [{low}, {high}], got {value}")
    return value


def validate_count(name: str, value: object, minimum: int = 0) -> int:
    """Return ``value`` as an int, raising ValidationError unless it is an
    integer no smaller than ``minimum``."""
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ValidationError(f"{name} must be an integer, got {type(value).__name__}")
    if value < minimum:
        raise ValidationError(f"{name} must be >= {minimum}, got {value}")
    return int(value)


def validate_timeout(timeout: Optional[float]) -> Optional[float]:
    if timeout is None:
        return None
    if isinstance(timeout, bool) or not isinstance(timeout, Real):
        raise ValidationError(f"timeout must be a number, got {type(timeout).__name__}")
    if math.isnan(timeout) or timeout < 0:
        raise ValidationError(f"timeout must be >= 0, got {timeout}")
    return float(timeout)


__all__ = [
    "DEFAULT_CACHE_SIZE",
    "DEFAULT_ERROR_RATE",
    "DEFAULT_LENGTH_DIFFERENCE",
    "DEFAULT_PREFIX_WEIGHT",
    "DEFAULT_QUALITY",
    "MAX_PREFIX_WEIGHT",
    "VALID_ALGORITHMS",
    "check_str",
    "normalize_algorithm",
    "normalize_direction",
    "validate_count",
    "validate_range",
    "validate_timeout",
]
