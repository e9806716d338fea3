"""Validation errors raised by the prime engine."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """An engine operation received an argument outside its domain."""


class NotPrimeError(InvalidArgumentError):
    """An argument that must be prime was not."""

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"Input must be a prime number, got {value}")


class NonPositiveError(InvalidArgumentError):
    """An index that must be >= 1 was not."""

    def __init__(self, value: int, name: str = "n"):
        self.value = value
        super().__init__(f"{name} must be positive, got {value}")
