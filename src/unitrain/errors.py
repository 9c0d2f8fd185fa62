"""Exception taxonomy for the training adapter.

Every error raised by this package derives from :class:`TrainingError`, and
also from the builtin exception it most closely resembles so that callers
catching ``ValueError`` or ``KeyError`` keep working.

Errors raised inside the backend libraries (xgboost, scikit-learn) are never
wrapped; they reach the caller unchanged.
"""

from __future__ import annotations


class TrainingError(Exception):
    """Base class for all adapter errors."""


class InvalidRequestError(TrainingError, ValueError):
    """The training request itself is malformed (empty levels, no label column)."""


class TypeConversionError(TrainingError, TypeError):
    """A feature column cannot be coerced to a numeric dtype."""

    def __init__(self, column: object, reason: str = "") -> None:
        self.column = column
        msg = f"Feature column {column!r} cannot be converted to numeric"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class MissingTuningValueError(TrainingError, KeyError):
    """A tuning value required by the chosen method is absent."""

    def __init__(self, method: str, missing: list[str]) -> None:
        self.method = method
        self.missing = list(missing)
        super().__init__(f"Method '{method}' requires tuning values {self.missing}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class UnsupportedMethodError(TrainingError, ValueError):
    """The requested method is not one of the registered backends."""

    def __init__(self, method: str, available: list[str]) -> None:
        self.method = method
        self.available = list(available)
        super().__init__(f"Unknown method: '{method}'. Available methods: {self.available}")


class UnresolvableFamilyError(TrainingError, ValueError):
    """The glmnet response family cannot be inferred from the labels."""


class BackendFitError(TrainingError, RuntimeError):
    """Options handed to a backend routine are invalid for that routine."""


__all__ = [
    "TrainingError",
    "InvalidRequestError",
    "TypeConversionError",
    "MissingTuningValueError",
    "UnsupportedMethodError",
    "UnresolvableFamilyError",
    "BackendFitError",
]
