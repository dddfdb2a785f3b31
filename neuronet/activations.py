"""Activation functions and their derivatives."""

import math


def sigma(x: float) -> float:
    """Logistic sigmoid 1 / (1 + exp(-x))."""
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    e = math.exp(x)
    return e / (1.0 + e)


def d_sigma(x: float) -> float:
    """Derivative companion used with ``sigma``: exp(-x) / (1 + exp(-x) * (1 + exp(-x)))."""
    if x >= 0:
        e = math.exp(-x)
        return e / (1.0 + e * (1.0 + e))
    # Same expression scaled by exp(2x) so large negative inputs do not overflow.
    e = math.exp(x)
    return e / (e * e + e + 1.0)


def heavyside(x: float) -> int:
    """Step function: 0 for x <= 0, 1 otherwise."""
    return int(x > 0)


def relu(x: float) -> float:
    """Rectified linear unit."""
    return max(0.0, x)


def d_relu(x: float) -> float:
    """Derivative of ``relu``, taken as 1 at zero."""
    return float(x >= 0)


def inv(x: float) -> float:
    """Negation."""
    return -x