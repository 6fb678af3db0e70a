#!/usr/bin/env python3
"""Train a delta-rule unit chain on the sign AND dataset and report accuracy."""
from __future__ import annotations

import argparse
import logging

from delta_mlp import Network, NetworkConfig, TrainingConfig, sign_and_dataset, validate_dataset
from delta_mlp.visualization import plot_loss_history


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description=__doc__)
    p.add_argument("--layer-sizes", type=int, nargs="+", default=[2, 2, 1])
    p.add_argument("--lr", type=float, default=0.1)
    p.add_argument("--epochs", type=int, default=100)
    p.add_argument("--plot-path", type=str, default=None, help="write the loss curve to this image")
    p.add_argument("--progress", action="store_true")
    p.add_argument("--log-level", type=str, default="WARNING")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    network = Network.from_config(NetworkConfig(layer_sizes=args.layer_sizes, learning_rate=args.lr))
    training_data = sign_and_dataset()
    validate_dataset(training_data, network.input_dim)

    history = network.fit(
        training_data,
        TrainingConfig(epochs=args.epochs, show_progress=args.progress),
    )
    accuracy = network.evaluate(training_data)
    print(f"Accuracy: {accuracy}")

    if args.plot_path:
        plot_loss_history(history.losses, args.plot_path)
        print(f"Saved loss plot to {args.plot_path}")


if __name__ == "__main__":
    main()
