"""Exceptions raised by the trainer."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """An input vector does not fit the dimension a unit or network expects."""


class EmptyInputError(ValueError):
    """A dataset or loss sequence that must contain entries is empty."""


__all__ = ["InvalidInputError", "EmptyInputError"]
