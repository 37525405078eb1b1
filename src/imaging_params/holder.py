"""Mutable parameter holder with one field per parameter.

The flat, setter-based way of configuring a codec. Verbose and strict are
plain toggles that default to off; every other field starts out absent.
Use to_parameters() to hand the current state to code that expects an
ImagingParameters snapshot.
"""

from __future__ import annotations

from typing import Any

from imaging_params.errors import AbsentValueError, InvalidArgumentError, NotPresentError
from imaging_params.parameters import ImagingParameters
from imaging_params.types import Parameter
from imaging_params.values import BufferedImageFactory, ImageFormat, PixelDensity


class ImagingParameterHolder:
    def __init__(self) -> None:
        self._verbose = False
        self._strict = False
        self._file_name_hint: str | None = None
        self._xmp_xml: str | None = None
        self._image_format: ImageFormat | None = None
        self._buffered_image_factory: BufferedImageFactory | None = None
        self._pixel_density: PixelDensity | None = None

    # verbose

    def is_verbose(self) -> bool:
        return self._verbose

    def enable_verbose(self) -> None:
        self._verbose = True

    def disable_verbose(self) -> None:
        self._verbose = False

    # strict

    def is_strict(self) -> bool:
        return self._strict

    def enable_strict(self) -> None:
        self._strict = True

    def disable_strict(self) -> None:
        self._strict = False

    # file name hint

    def is_file_name_hint_present(self) -> bool:
        return self._file_name_hint is not None

    def get_file_name_hint(self) -> str:
        return _present(Parameter.FILENAME, self._file_name_hint)

    def set_file_name_hint(self, value: str) -> None:
        self._file_name_hint = _checked(Parameter.FILENAME, value, str)

    # XMP XML

    def is_xmp_xml_present(self) -> bool:
        return self._xmp_xml is not None

    def get_xmp_xml(self) -> str:
        return _present(Parameter.XMP_XML, self._xmp_xml)

    def set_xmp_xml(self, value: str) -> None:
        self._xmp_xml = _checked(Parameter.XMP_XML, value, str)

    # image format

    def is_image_format_present(self) -> bool:
        return self._image_format is not None

    def get_image_format(self) -> ImageFormat:
        return _present(Parameter.FORMAT, self._image_format)

    def set_image_format(self, value: ImageFormat) -> None:
        self._image_format = _checked(Parameter.FORMAT, value, ImageFormat)

    # buffered image factory

    def is_buffered_image_factory_present(self) -> bool:
        return self._buffered_image_factory is not None

    def get_buffered_image_factory(self) -> BufferedImageFactory:
        return _present(Parameter.BUFFERED_IMAGE_FACTORY, self._buffered_image_factory)

    def set_buffered_image_factory(self, value: BufferedImageFactory) -> None:
        self._buffered_image_factory = _checked(
            Parameter.BUFFERED_IMAGE_FACTORY, value, BufferedImageFactory
        )

    # pixel density

    def is_pixel_density_present(self) -> bool:
        return self._pixel_density is not None

    def get_pixel_density(self) -> PixelDensity:
        return _present(Parameter.PIXEL_DENSITY, self._pixel_density)

    def set_pixel_density(self, value: PixelDensity) -> None:
        self._pixel_density = _checked(Parameter.PIXEL_DENSITY, value, PixelDensity)

    def to_parameters(self) -> ImagingParameters:
        builder = (
            ImagingParameters.build()
            .set(Parameter.VERBOSE, self._verbose)
            .set(Parameter.STRICT, self._strict)
        )
        for parameter, value in (
            (Parameter.FILENAME, self._file_name_hint),
            (Parameter.XMP_XML, self._xmp_xml),
            (Parameter.FORMAT, self._image_format),
            (Parameter.BUFFERED_IMAGE_FACTORY, self._buffered_image_factory),
            (Parameter.PIXEL_DENSITY, self._pixel_density),
        ):
            if value is not None:
                builder.set(parameter, value)
        return builder.get()


def _present(parameter: Parameter, value: Any) -> Any:
    if value is None:
        raise NotPresentError(parameter)
    return value


def _checked(parameter: Parameter, value: Any, expected: type) -> Any:
    if value is None:
        raise AbsentValueError(parameter)
    if not isinstance(value, expected):
        raise InvalidArgumentError(
            f"Parameter '{parameter.name}' expects {expected.__name__}, "
            f"got {type(value).__name__}"
        )
    return value
