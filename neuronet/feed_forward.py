"""A fully connected feed-forward network built from layers of neurons."""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

from neuronet.layer import Layer


def _fmt(value: float) -> str:
    return f"{value:g}"


class FeedForward:
    """A network of ``n_layers + 1`` layers mapping ``n_in`` inputs to ``n_out`` outputs.

    By default every layer holds ``n_out`` neurons; the first one takes the
    ``n_in`` inputs, each following one takes the outputs of the previous one.
    """

    def __init__(self, n_in: int, n_out: int, n_layers: int) -> None:
        if n_in < 0 or n_out < 0 or n_layers < 0:
            raise ValueError("sizes of a network cannot be negative")
        self.n_in = n_in
        self.n_out = n_out
        self.n_layers = n_layers
        self.layers: list[Layer] = []
        nb_data = n_in
        for _ in range(n_layers + 1):
            layer = Layer(nb_data, n_out)
            self.layers.append(layer)
            nb_data = len(layer)
        self.x: list[float] = []
        self.y: list[float] = []

    def __getitem__(self, index: int) -> Layer:
        """Return the layer at ``index`` itself, not a copy."""
        if not -len(self.layers) <= index < len(self.layers):
            raise IndexError(
                f"layer {index} requested, the network has {len(self.layers)}"
            )
        return self.layers[index]

    def __len__(self) -> int:
        return len(self.layers)

    def __iter__(self) -> Iterator[Layer]:
        return iter(self.layers)

    def total_weights(self) -> int:
        """Number of weights in the network (not their sum)."""
        return sum(neuron.size for layer in self.layers for neuron in layer)

    def nb_biases(self) -> int:
        """Number of biases, one per neuron."""
        return sum(len(layer) for layer in self.layers)

    def set_all_weights_random(self, a: float, b: float) -> None:
        """Draw every weight of the network from Unif([a, b])."""
        for layer in self.layers:
            layer.set_all_weights_random(a, b)

    def set_all_weight_derivatives_zeros(self) -> None:
        for layer in self.layers:
            layer.set_all_weight_derivatives_zeros()

    def get_all_weights(self) -> list[float]:
        """All weights, layer by layer, neuron by neuron."""
        return [w for layer in self.layers for neuron in layer for w in neuron.weights]

    def set_all_weights(self, values: Iterable[float]) -> None:
        """Set all weights in the order returned by ``get_all_weights``."""
        values = list(values)
        expected = self.total_weights()
        if len(values) != expected:
            raise ValueError(
                f"the weights should be given as {expected} values, got {len(values)}"
            )
        position = 0
        for layer in self.layers:
            for neuron in layer:
                neuron.weights = [float(v) for v in values[position:position + neuron.size]]
                position += neuron.size

    def get_all_biases(self) -> list[float]:
        """All biases, layer by layer, neuron by neuron."""
        return [neuron.bias for layer in self.layers for neuron in layer]

    def set_all_biases(self, values: Iterable[float]) -> None:
        """Set all biases in the order returned by ``get_all_biases``."""
        values = list(values)
        expected = self.nb_biases()
        if len(values) != expected:
            raise ValueError(
                f"the biases should be given as {expected} values, got {len(values)}"
            )
        neurons = (neuron for layer in self.layers for neuron in layer)
        for neuron, value in zip(neurons, values):
            neuron.bias = value

    def evaluate(self, x: Iterable[float]) -> list[float]:
        """Feed ``x`` through every layer and return the network's output."""
        values = list(x)
        if len(values) != self.n_in or self.n_in <= 0 or self.n_out <= 0:
            raise ValueError(
                f"size required : {self.n_in}, size given : {len(values)}"
            )
        self.x = values
        output = values
        for layer in self.layers:
            output = layer.evaluate(output)
        self.y = list(output)
        return list(self.y)

    def build(self, nb_neurons: Sequence[int]) -> None:
        """Keep the uniform layout; networks with custom layer sizes override this."""

    def copy(self) -> FeedForward:
        """Return an independent copy of this network."""
        other = type(self).__new__(type(self))
        other.n_in = self.n_in
        other.n_out = self.n_out
        other.n_layers = self.n_layers
        other.layers = [layer.copy() for layer in self.layers]
        other.x = list(self.x)
        other.y = list(self.y)
        return other

    def __str__(self) -> str:
        outputs = "[" + ", ".join(_fmt(v) for v in self.y) + "] " if self.y else "[] "
        return (
            "This neural network is defined with:\n"
            f"    A number of weights: {self.total_weights()}\n"
            f"    Y = {outputs}\n"
        )