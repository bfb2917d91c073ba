from __future__ import annotations

class NoValueError(LookupError):
    """unwrap_value called on a state without a value."""

    variant: str

    def __init__(self, variant: str) -> None:
        self.variant = variant
        super().__init__(f"{variant} carries no value")

class NoErrorError(LookupError):
    """unwrap_error called on a state without an error."""

    variant: str

    def __init__(self, variant: str) -> None:
        self.variant = variant
        super().__init__(f"{variant} carries no error")

__all__ = ("NoErrorError", "NoValueError")
