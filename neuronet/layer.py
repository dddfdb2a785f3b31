"""A layer of neurons sharing the same input vector."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from neuronet.neuron import Activation, Neuron


def _fmt(value: float) -> str:
    return f"{value:g}"


class Layer:
    """A list of neurons that all take an input vector of size ``nb_data``.

    Every neuron starts with weights of 1, a bias of 0, derivatives of 0 and
    ReLU as activation. ``y`` holds the outputs of the last evaluation.
    """

    def __init__(self, nb_data: int = 0, nb_neurons: int = 0) -> None:
        if nb_data < 0 or nb_neurons < 0:
            raise ValueError("sizes of a layer cannot be negative")
        self.nb_data = nb_data
        self.neurons: list[Neuron] = [Neuron(nb_data) for _ in range(nb_neurons)]
        self.y: list[float] = [0.0] * nb_neurons

    def __len__(self) -> int:
        return len(self.neurons)

    def __getitem__(self, index: int) -> Neuron:
        """Return the neuron at ``index`` itself, not a copy."""
        if not -len(self.neurons) <= index < len(self.neurons):
            raise IndexError(
                f"neuron {index} requested, the layer has {len(self.neurons)}"
            )
        return self.neurons[index]

    def __iter__(self) -> Iterator[Neuron]:
        return iter(self.neurons)

    def __eq__(self, other: object) -> bool:
        """Two layers are equal when they hold the same number of neurons."""
        if not isinstance(other, Layer):
            return NotImplemented
        return len(self) == len(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Layer):
            return NotImplemented
        return len(self) <= len(other)

    __hash__ = None  # type: ignore[assignment]

    def set_activation(
        self,
        activation: Optional[Activation],
        derivative: Optional[Activation],
        i_neuron: int,
        name: str = "n/a",
    ) -> None:
        """Set the activation function and derivative of one neuron."""
        self[i_neuron].set_activation(activation, derivative, name)

    def add_weight_derivative(self, value: float, i_neuron: int, j_weight: int) -> None:
        """Add ``value`` to a weight derivative; out-of-range indices are ignored."""
        if 0 <= i_neuron < len(self.neurons):
            neuron = self.neurons[i_neuron]
            if 0 <= j_weight < neuron.size:
                neuron.weight_derivatives[j_weight] += value

    def set_all_weights_ones(self) -> None:
        for neuron in self.neurons:
            neuron.set_weights_ones()

    def set_all_weights_random(self, a: float, b: float) -> None:
        """Draw every weight of every neuron from Unif([a, b])."""
        for neuron in self.neurons:
            neuron.set_weights_random(a, b)

    def set_all_weight_derivatives_zeros(self) -> None:
        for neuron in self.neurons:
            neuron.set_weight_derivatives_zeros()

    def evaluate_fct(self, x: float, i_neuron: int) -> float:
        """Activation of neuron ``i_neuron`` at x, or 0 if there is no such neuron."""
        if 0 <= i_neuron < len(self.neurons):
            return self.neurons[i_neuron].evaluate(x)
        return 0.0

    def evaluate_fct_derivative(self, x: float, i_neuron: int) -> float:
        """Activation derivative of neuron ``i_neuron`` at x, or 0 if there is none."""
        if 0 <= i_neuron < len(self.neurons):
            return self.neurons[i_neuron].evaluate_derivative(x)
        return 0.0

    def evaluate(self, x: Iterable[float]) -> list[float]:
        """Activate every neuron on ``x`` and return their outputs."""
        values = list(x)
        if len(values) != self.nb_data:
            raise ValueError(
                "this size of data isn't compatible with the layer: "
                f"size required {self.nb_data}, size given {len(values)}"
            )
        self.y = [neuron.activate(values) for neuron in self.neurons]
        return list(self.y)

    def copy(self) -> Layer:
        """Return an independent copy of this layer."""
        other = Layer.__new__(Layer)
        other.nb_data = self.nb_data
        other.neurons = [neuron.copy() for neuron in self.neurons]
        other.y = list(self.y)
        return other

    def __str__(self) -> str:
        outputs = "[" + ", ".join(_fmt(v) for v in self.y) + "] " if self.y else "[] "
        return (
            "This layer is defined with:\n"
            f"    An entry data vector of size : {self.nb_data}\n"
            f"    A number of neurons: {len(self)}\n"
            f"    Y = {outputs}\n"
        )