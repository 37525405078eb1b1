"""Parameter Registry — documents what each parameter conventionally holds.

The registry is advisory. Builders accept any non-None value; the registry
lets tooling describe parameters and flag values that break convention.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel

from imaging_params.parameters import ImagingParameters  # noqa: TC001
from imaging_params.shapes import matches_shape
from imaging_params.types import Parameter
from imaging_params.values import BinaryConstant, BufferedImageFactory, ImageFormat, PixelDensity


class ValueShape(StrEnum):
    BOOL = "bool"
    STR = "str"
    INT = "int"
    IMAGE_FORMAT = "image_format"
    PIXEL_DENSITY = "pixel_density"
    BUFFERED_IMAGE_FACTORY = "buffered_image_factory"
    BINARY_CONSTANT = "binary_constant"

    @property
    def python_type(self) -> type:
        return _SHAPE_TYPES[self]


_SHAPE_TYPES: dict[ValueShape, type] = {
    ValueShape.BOOL: bool,
    ValueShape.STR: str,
    ValueShape.INT: int,
    ValueShape.IMAGE_FORMAT: ImageFormat,
    ValueShape.PIXEL_DENSITY: PixelDensity,
    ValueShape.BUFFERED_IMAGE_FACTORY: BufferedImageFactory,
    ValueShape.BINARY_CONSTANT: BinaryConstant,
}


class ParameterEntry(BaseModel):
    parameter: Parameter
    description: str
    value_shapes: list[ValueShape]
    codec_default: str | None = None

    def python_types(self) -> tuple[type, ...]:
        return tuple(s.python_type for s in self.value_shapes)

    def to_text(self) -> str:
        shapes = " | ".join(s.value for s in self.value_shapes)
        default = self.codec_default if self.codec_default is not None else "(none)"
        return (
            f"Parameter: {self.parameter.value}\n"
            f"  Shape: {shapes}\n"
            f"  Codec default when absent: {default}\n"
            f"  Purpose: {self.description}"
        )

    def to_json(self) -> str:
        return self.model_dump_json(indent=2)


class ParameterRegistry:
    """Registry of all known imaging parameters and their conventional shapes."""

    def __init__(self) -> None:
        self._entries: dict[Parameter, ParameterEntry] = {}

    def register(self, entry: ParameterEntry) -> None:
        if entry.parameter in self._entries:
            raise ValueError(f"Parameter '{entry.parameter.value}' is already registered")
        self._entries[entry.parameter] = entry

    def get(self, parameter: Parameter) -> ParameterEntry | None:
        return self._entries.get(parameter)

    def all_entries(self) -> list[ParameterEntry]:
        return list(self._entries.values())

    def conforms(self, parameter: Parameter, value: object) -> bool:
        entry = self._entries.get(parameter)
        if entry is None:
            return False
        return matches_shape(value, entry.python_types())

    def nonconforming(self, parameters: ImagingParameters) -> list[Parameter]:
        """Present parameters whose values do not match their registered shape."""
        return [p for p, v in parameters.items() if not self.conforms(p, v)]

    def __len__(self) -> int:
        return len(self._entries)


def build_default_registry() -> ParameterRegistry:
    """Build the registry describing every Parameter member."""
    registry = ParameterRegistry()

    registry.register(
        ParameterEntry(
            parameter=Parameter.VERBOSE,
            description="Emit diagnostic output while reading or writing an image",
            value_shapes=[ValueShape.BOOL],
            codec_default="false",
        )
    )
    registry.register(
        ParameterEntry(
            parameter=Parameter.STRICT,
            description="Reject input that deviates from the format specification",
            value_shapes=[ValueShape.BOOL],
            codec_default="false",
        )
    )
    registry.register(
        ParameterEntry(
            parameter=Parameter.FILENAME,
            description="File name used to guess the format when the content is ambiguous",
            value_shapes=[ValueShape.STR],
        )
    )
    registry.register(
        ParameterEntry(
            parameter=Parameter.XMP_XML,
            description="XMP metadata packet, as an XML string, to embed when writing",
            value_shapes=[ValueShape.STR],
        )
    )
    registry.register(
        ParameterEntry(
            parameter=Parameter.FORMAT,
            description="Target image format when writing",
            value_shapes=[ValueShape.IMAGE_FORMAT],
        )
    )
    registry.register(
        ParameterEntry(
            parameter=Parameter.BUFFERED_IMAGE_FACTORY,
            description="Factory used to allocate the decoded image buffer",
            value_shapes=[ValueShape.BUFFERED_IMAGE_FACTORY],
        )
    )
    registry.register(
        ParameterEntry(
            parameter=Parameter.PIXEL_DENSITY,
            description="Physical pixel density to record in the written image",
            value_shapes=[ValueShape.PIXEL_DENSITY],
        )
    )
    registry.register(
        ParameterEntry(
            parameter=Parameter.EXIF,
            description="EXIF data, as a directory tag or a raw binary block",
            value_shapes=[ValueShape.INT, ValueShape.BINARY_CONSTANT],
        )
    )

    return registry
