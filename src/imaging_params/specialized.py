"""Parameter object with one accessor per value type.

An alternative surface over ImagingParameters: instead of stating the shape
at every read, callers pick get_int, get_binary_constant and so on. Setters
check their value when it is inserted rather than when it is read.
"""

from __future__ import annotations

from typing import Self

from imaging_params.errors import AbsentValueError, InvalidArgumentError, UnknownParameterError
from imaging_params.parameters import ImagingParameters, ImagingParametersBuilder
from imaging_params.types import Parameter
from imaging_params.values import BinaryConstant


class ParameterObject:
    __slots__ = ("_parameters",)

    def __init__(self, parameters: ImagingParameters) -> None:
        self._parameters = parameters

    @classmethod
    def build(cls) -> ParameterObjectBuilder:
        return ParameterObjectBuilder()

    def present(self, parameter: Parameter) -> bool:
        return self._parameters.present(parameter)

    def get_int(self, parameter: Parameter) -> int:
        return self._parameters.value(parameter, int)

    def get_bool(self, parameter: Parameter) -> bool:
        return self._parameters.value(parameter, bool)

    def get_str(self, parameter: Parameter) -> str:
        return self._parameters.value(parameter, str)

    def get_binary_constant(self, parameter: Parameter) -> BinaryConstant:
        return self._parameters.value(parameter, BinaryConstant)

    def as_parameters(self) -> ImagingParameters:
        return self._parameters

    def __repr__(self) -> str:
        return f"ParameterObject({self._parameters!r})"


class ParameterObjectBuilder:
    def __init__(self) -> None:
        self._builder = ImagingParametersBuilder()

    def get(self) -> ParameterObject:
        return ParameterObject(self._builder.get())

    def set_int(self, parameter: Parameter, value: int) -> Self:
        self._require(parameter, value, int)
        self._builder.set(parameter, value)
        return self

    def set_bool(self, parameter: Parameter, value: bool) -> Self:
        self._require(parameter, value, bool)
        self._builder.set(parameter, value)
        return self

    def set_str(self, parameter: Parameter, value: str) -> Self:
        self._require(parameter, value, str)
        self._builder.set(parameter, value)
        return self

    def set_binary_constant(self, parameter: Parameter, value: BinaryConstant) -> Self:
        """Store a binary constant; it must not be None and must hold at least one byte."""
        self._require(parameter, value, BinaryConstant)
        if value.size() == 0:
            raise InvalidArgumentError(
                f"Binary constant for parameter '{parameter.name}' must not be empty"
            )
        self._builder.set(parameter, value)
        return self

    @staticmethod
    def _require(parameter: Parameter, value: object, expected: type) -> None:
        if not isinstance(parameter, Parameter):
            raise UnknownParameterError(parameter)
        if value is None:
            raise AbsentValueError(parameter)
        wrong_bool = isinstance(value, bool) and expected is not bool
        if wrong_bool or not isinstance(value, expected):
            raise InvalidArgumentError(
                f"Parameter '{parameter.name}' expects {expected.__name__}, "
                f"got {type(value).__name__}"
            )
