"""Demonstration run building a neuron, a layer and two networks."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from neuronet.activations import d_sigma, sigma
from neuronet.feed_forward import FeedForward
from neuronet.layer import Layer
from neuronet.mpc import Mpc
from neuronet.neuron import Neuron


def _parse(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="neuronet", description="Build and evaluate small neural networks."
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=200,
        help="number of hidden layers of the perceptron (default: 200)",
    )
    args = parser.parse_args(argv)
    if args.depth < 1:
        parser.error("--depth must be at least 1")
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse(argv)

    n1 = Neuron(4)
    n1.set_weights_random(0, 1)
    x0 = [1, 2, 1.1, 5]
    n1.activate(x0)
    print(n1)
    n1.set_activation(sigma, d_sigma, "sigmoid")
    n1.activate(x0)
    print(n1)

    l1 = Layer(2, 5)
    print(l1)

    fw3 = FeedForward(3, 2, 4)
    fw3.build([1, 2, 3, 4])
    x = [1, 2, 3]
    fw3.evaluate(x)
    print(fw3)

    m = Mpc(3, 4, args.depth)
    m.build(range(1, args.depth + 1))
    m.set_all_weights_random(-1, 1)
    m.set_all_activations(sigma, d_sigma, "sigmoid")
    m.evaluate(x)
    print(m)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())