"""Typed, immutable parameter containers for image codecs."""

from imaging_params.errors import (
    AbsentValueError,
    InvalidArgumentError,
    NotPresentError,
    ParameterError,
    UnknownParameterError,
    WrongShapeError,
)
from imaging_params.holder import ImagingParameterHolder
from imaging_params.parameters import ImagingParameters, ImagingParametersBuilder
from imaging_params.specialized import ParameterObject, ParameterObjectBuilder
from imaging_params.types import Parameter
from imaging_params.values import (
    JFIF0_SIGNATURE,
    BinaryConstant,
    BufferedImageFactory,
    ImageFormat,
    PixelDensity,
)

__all__ = [
    "JFIF0_SIGNATURE",
    "AbsentValueError",
    "BinaryConstant",
    "BufferedImageFactory",
    "ImageFormat",
    "ImagingParameterHolder",
    "ImagingParameters",
    "ImagingParametersBuilder",
    "InvalidArgumentError",
    "NotPresentError",
    "Parameter",
    "ParameterError",
    "ParameterObject",
    "ParameterObjectBuilder",
    "PixelDensity",
    "UnknownParameterError",
    "WrongShapeError",
]
