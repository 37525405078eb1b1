"""Imaging parameters — an immutable, builder-produced map of codec options.

Callers assemble options fluently and hand the resulting snapshot to a codec:

    params = (
        ImagingParameters.build()
        .set(Parameter.STRICT, True)
        .set(Parameter.FILENAME, "scan.tif")
        .get()
    )
    if params.present(Parameter.STRICT):
        strict = params.value(Parameter.STRICT, bool)

Absence is meaningful: a codec applies its own default for any parameter
that is not present. A parameter that is explicitly disabled is stored as
``False``, never as ``None``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any, Self, TypeVar, overload

from imaging_params.errors import (
    AbsentValueError,
    NotPresentError,
    UnknownParameterError,
    WrongShapeError,
)
from imaging_params.shapes import Shape, describe_shape, describe_value, matches_shape
from imaging_params.types import Parameter

logger = logging.getLogger("imaging_params.parameters")

T = TypeVar("T")
D = TypeVar("D")


def _check_parameter(parameter: object) -> Parameter:
    # Parameter is a StrEnum, so a bare string would hash to the same slot
    if not isinstance(parameter, Parameter):
        raise UnknownParameterError(parameter)
    return parameter


def _check_entry(parameter: object, value: object) -> Parameter:
    checked = _check_parameter(parameter)
    if value is None:
        raise AbsentValueError(checked)
    return checked


class ImagingParameters:
    """Immutable snapshot of parameter values, keyed by Parameter.

    Retrieval is type-checked at runtime: the caller states the shape it
    expects and gets the stored object back unchanged, or an error.
    """

    __slots__ = ("_values",)

    _values: Mapping[Parameter, Any]

    def __init__(self, values: Mapping[Parameter, Any] | None = None) -> None:
        copied: dict[Parameter, Any] = {}
        for parameter, value in (values or {}).items():
            copied[_check_entry(parameter, value)] = value
        object.__setattr__(self, "_values", MappingProxyType(copied))

    @classmethod
    def build(cls) -> ImagingParametersBuilder:
        return ImagingParametersBuilder()

    @classmethod
    def empty(cls) -> ImagingParameters:
        return cls()

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def present(self, parameter: Parameter) -> bool:
        return _check_parameter(parameter) in self._values

    @overload
    def value(self, parameter: Parameter, shape: type[T]) -> T: ...

    @overload
    def value(self, parameter: Parameter, shape: Shape) -> Any: ...

    def value(self, parameter: Parameter, shape: Shape) -> Any:
        """Return the value stored for parameter, checked against shape.

        Raises NotPresentError if nothing is stored for parameter, and
        WrongShapeError if the stored value is not an instance of shape.
        """
        parameter = _check_parameter(parameter)
        try:
            stored = self._values[parameter]
        except KeyError:
            raise NotPresentError(parameter) from None
        if not matches_shape(stored, shape):
            raise WrongShapeError(parameter, describe_shape(shape), describe_value(stored))
        return stored

    @overload
    def value_or(self, parameter: Parameter, shape: type[T], default: D) -> T | D: ...

    @overload
    def value_or(self, parameter: Parameter, shape: Shape, default: D) -> Any: ...

    def value_or(self, parameter: Parameter, shape: Shape, default: Any) -> Any:
        """Like value(), but return default when parameter is absent.

        A present value of the wrong shape still raises WrongShapeError.
        """
        if not self.present(parameter):
            return default
        return self.value(parameter, shape)

    def parameters(self) -> frozenset[Parameter]:
        return frozenset(self._values)

    def items(self) -> Iterator[tuple[Parameter, Any]]:
        return iter(list(self._values.items()))

    def to_builder(self) -> ImagingParametersBuilder:
        """Start a new builder holding a copy of this snapshot's entries."""
        return ImagingParametersBuilder(self._values)

    def __iter__(self) -> Iterator[Parameter]:
        return iter(list(self._values))

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, parameter: object) -> bool:
        return isinstance(parameter, Parameter) and parameter in self._values

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ImagingParameters):
            return NotImplemented
        return dict(self._values) == dict(other._values)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        entries = ", ".join(f"{p.name}={v!r}" for p, v in self._values.items())
        return f"ImagingParameters({entries})"


class ImagingParametersBuilder:
    """Mutable accumulator for ImagingParameters.

    Not safe for concurrent use; confine a builder to one task. Each call to
    get() returns an independent snapshot that later set() calls cannot touch.
    """

    def __init__(self, values: Mapping[Parameter, Any] | None = None) -> None:
        self._values: dict[Parameter, Any] = {}
        if values:
            self.update(values)

    def set(self, parameter: Parameter, value: Any) -> Self:
        """Store value under parameter, replacing any earlier value.

        None is rejected with InvalidArgumentError and leaves the builder as it was.
        """
        parameter = _check_entry(parameter, value)
        if parameter in self._values:
            logger.debug("Replacing value for %s", parameter.name)
        else:
            logger.debug("Setting value for %s", parameter.name)
        self._values[parameter] = value
        return self

    def update(self, values: Mapping[Parameter, Any]) -> Self:
        """Set every entry of values, or none of them if any entry is invalid."""
        checked = {_check_entry(p, v): v for p, v in values.items()}
        self._values.update(checked)
        logger.debug("Updated %d parameters", len(checked))
        return self

    def unset(self, parameter: Parameter) -> Self:
        """Remove parameter if present; a no-op otherwise."""
        parameter = _check_parameter(parameter)
        if self._values.pop(parameter, None) is not None:
            logger.debug("Removed value for %s", parameter.name)
        return self

    def get(self) -> ImagingParameters:
        snapshot = ImagingParameters(self._values)
        logger.debug("Built imaging parameters with %d entries", len(snapshot))
        return snapshot

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, parameter: object) -> bool:
        return isinstance(parameter, Parameter) and parameter in self._values

    def __repr__(self) -> str:
        names = ", ".join(p.name for p in self._values)
        return f"ImagingParametersBuilder({names})"
