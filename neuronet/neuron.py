"""A single neuron: weights, bias, their derivatives and an activation."""

from __future__ import annotations

import random
from typing import Callable, Iterable, Optional

from neuronet.activations import d_relu, relu

Activation = Callable[[float], float]


def _fmt(value: float) -> str:
    return f"{value:g}"


def _fmt_list(values: list[float]) -> str:
    return "[" + ", ".join(_fmt(v) for v in values) + "] "


class Neuron:
    """A neuron taking an input vector of fixed size.

    Weights start at 1, derivatives and bias at 0. Without an explicit
    activation the neuron uses ReLU.
    """

    def __init__(
        self,
        size: int = 1,
        activation: Optional[Activation] = None,
        derivative: Optional[Activation] = None,
        name: Optional[str] = None,
    ) -> None:
        if size <= 0:
            raise ValueError("a neuron must take an entry vector of at least size 1")
        self.size = size
        self.weights: list[float] = [1.0] * size
        self.weight_derivatives: list[float] = [0.0] * size
        self._bias = 0.0
        self._db = 0.0
        self.pre_activation = 0.0
        self.post_activation = 0.0
        if activation is None and derivative is None:
            self.activation: Optional[Activation] = relu
            self.derivative: Optional[Activation] = d_relu
            self.name = "ReLU" if name is None else name
        else:
            self.activation = activation
            self.derivative = derivative
            self.name = "n/a" if name is None else name

    @property
    def bias(self) -> float:
        """The bias added to the weighted sum."""
        return self._bias

    @bias.setter
    def bias(self, value: float) -> None:
        self._bias = value

    @property
    def db(self) -> float:
        """The derivative of the bias."""
        return self._db

    @db.setter
    def db(self, value: float) -> None:
        self._db = value

    def set_activation(
        self,
        activation: Optional[Activation],
        derivative: Optional[Activation],
        name: str = "n/a",
    ) -> None:
        """Replace the activation function, its derivative and its name."""
        self.activation = activation
        self.derivative = derivative
        self.name = name

    def set_weights_ones(self) -> None:
        self.weights = [1.0] * self.size

    def set_weights_random(self, a: float, b: float) -> None:
        """Draw every weight from Unif([a, b])."""
        self.weights = [random.uniform(a, b) for _ in range(self.size)]

    def set_weight_derivatives_zeros(self) -> None:
        self.weight_derivatives = [0.0] * self.size

    def activate(self, x: Iterable[float]) -> float:
        """Compute activation(<x, w> + bias), store and return it."""
        values = list(x)
        if len(values) != self.size:
            raise ValueError(
                f"input of size {len(values)} given, size {self.size} required"
            )
        dot = 0.0
        for w, xi in zip(self.weights, values):
            dot += w * xi
        self.pre_activation = dot + self._bias
        self.post_activation = self.evaluate(self.pre_activation)
        return self.post_activation

    def evaluate(self, x: float) -> float:
        """Activation function at x, or 0 if there is none."""
        return 0.0 if self.activation is None else self.activation(x)

    def evaluate_derivative(self, x: float) -> float:
        """Activation derivative at x, or 0 if there is none."""
        return 0.0 if self.derivative is None else self.derivative(x)

    def copy(self) -> Neuron:
        """Return an independent copy of this neuron."""
        other = Neuron.__new__(Neuron)
        other.size = self.size
        other.weights = list(self.weights)
        other.weight_derivatives = list(self.weight_derivatives)
        other._bias = self._bias
        other._db = self._db
        other.pre_activation = self.pre_activation
        other.post_activation = self.post_activation
        other.activation = self.activation
        other.derivative = self.derivative
        other.name = self.name
        return other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Neuron):
            return NotImplemented
        return (
            self.size == other.size
            and self.activation is other.activation
            and self.derivative is other.derivative
            and self.weights == other.weights
            and self.weight_derivatives == other.weight_derivatives
            and self._bias == other._bias
            and self._db == other._db
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return (
            "This neuron is defined with : \n"
            f"    An entry vector X of size : {self.size}\n"
            f"    A vector of weights : {_fmt_list(self.weights)}\n"
            f"    A vector of weight's derivatives : {_fmt_list(self.weight_derivatives)}\n"
            f"    A bias b : {_fmt(self._bias)}, its derivative db : {_fmt(self._db)}\n"
            f"    An activation function named : {self.name}\n"
            f"    A pre activation value of : {_fmt(self.pre_activation)}\n"
            f"    A post activation value of : {_fmt(self.post_activation)}\n"
        )