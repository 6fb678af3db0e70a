"""Plotting utilities for training loss curves."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt

from .errors import EmptyInputError


def plot_loss_history(losses: Sequence[float], path: str | Path | None = None) -> None:
    """Plot the average loss of each epoch, saving to ``path`` when given."""

    if not losses:
        raise EmptyInputError("losses must contain at least one value")
    fig = plt.figure()
    plt.plot(range(len(losses)), losses, color="red")
    plt.xlabel("Epoch")
    plt.ylabel("Loss")
    plt.title("Training Loss")
    plt.tight_layout()
    if path is not None:
        fig.savefig(path)
        plt.close(fig)


__all__ = ["plot_loss_history"]
