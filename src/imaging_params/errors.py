"""Errors raised while assembling or reading imaging parameters."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from imaging_params.types import Parameter


class ParameterError(Exception):
    """Base class for all parameter container errors."""


class InvalidArgumentError(ParameterError, ValueError):
    pass


class UnknownParameterError(InvalidArgumentError):
    def __init__(self, name: object) -> None:
        from imaging_params.types import Parameter

        available = ", ".join(p.value for p in Parameter)
        super().__init__(f"Unknown parameter {name!r}. Available: {available}")


class AbsentValueError(InvalidArgumentError):
    def __init__(self, parameter: Parameter) -> None:
        self.parameter = parameter
        super().__init__(f"The value for parameter '{parameter.name}' must not be None")


class NotPresentError(ParameterError, LookupError):
    def __init__(self, parameter: Parameter) -> None:
        self.parameter = parameter
        super().__init__(f"Parameter '{parameter.name}' is not present")


class WrongShapeError(ParameterError, TypeError):
    """Raised when a present value cannot be viewed as the requested shape."""

    def __init__(self, parameter: Parameter, expected: str, actual: str) -> None:
        self.parameter = parameter
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Parameter '{parameter.name}' is present but holds {actual}, not {expected}"
        )
