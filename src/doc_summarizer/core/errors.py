"""Exceptions raised by the analysis and pricing core."""


class ConfigurationError(Exception):
    """Raised when the model catalog or run configuration cannot be used.

    Covers unknown model ids, non-positive context windows, negative prices
    and unknown token strategies. Always fatal for the run.
    """
    pass


class InvalidArgumentError(ValueError):
    """Raised for negative token counts, sizes or amounts."""
    pass


def require_non_negative(value: int | float, name: str) -> None:
    if value < 0:
        raise InvalidArgumentError(f"{name} must be non-negative, got {value}")
