from enum import Enum

from shamir_recovery.services.number_format import to_decimal


class ErrorKind(str, Enum):
    INVALID_DIGIT = "invalid_digit"
    THRESHOLD_NOT_MET = "threshold_not_met"
    SINGULAR_SYSTEM = "singular_system"
    PRECISION_LOSS = "precision_loss"


class ReconstructionError(Exception):
    """
    Base class for data-integrity failures while recovering a secret.
    These are never retried, the same input always fails the same way.
    """
    kind: ErrorKind


class InvalidDigit(ReconstructionError):
    kind = ErrorKind.INVALID_DIGIT

    def __init__(self, character: str, base: int, index: int | None = None, position: int | None = None):
        self.character = character
        self.base = base
        self.index = index
        self.position = position
        super().__init__(character, base)

    def __str__(self) -> str:
        message = f"character {self.character!r} invalid for base {self.base}"
        if self.position is not None:
            message += f" at position {self.position}"
        if self.index is not None:
            message = f"share {self.index}: {message}"
        return message


class ThresholdNotMet(ReconstructionError):
    kind = ErrorKind.THRESHOLD_NOT_MET

    def __init__(self, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__(required, available)

    def __str__(self) -> str:
        return f"need {self.required} shares, only {self.available} available"


class SingularSystem(ReconstructionError):
    kind = ErrorKind.SINGULAR_SYSTEM

    def __init__(self, xs: list[int]):
        self.xs = xs
        super().__init__(xs)

    def __str__(self) -> str:
        repeated = ", ".join(to_decimal(x) for x in self.xs)
        return f"repeated x-coordinates: {repeated}"


class PrecisionLoss(ReconstructionError):
    kind = ErrorKind.PRECISION_LOSS

    def __init__(self, xs: list[int], value):
        self.xs = xs
        self.value = value
        super().__init__(xs, value)

    def __str__(self) -> str:
        points = ", ".join(to_decimal(x) for x in self.xs)
        value = f"{to_decimal(self.value.numerator)}/{to_decimal(self.value.denominator)}"
        return f"interpolation at x = {points} gives non-integer {value}"
