__all__ = ["EPSILON", "is_epsilon"]


# Values with an absolute value below this are treated as zero when
# picking pivots during inversion.
EPSILON = 1e-10


def is_epsilon(value: float, epsilon: float = EPSILON) -> bool:
    """Whether ``value`` is indistinguishable from zero."""
    return abs(value) < epsilon
