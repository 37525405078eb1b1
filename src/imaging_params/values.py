"""Value types stored under parameter identifiers.

These are deliberately thin: codecs own the behavior (density arithmetic,
image allocation, signature matching). The container only stores them.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import StrEnum
from typing import Any, BinaryIO, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

INCHES_PER_METRE = 39.3700787
CENTIMETRES_PER_METRE = 100.0


class ImageFormat(StrEnum):
    BMP = "bmp"
    DCX = "dcx"
    GIF = "gif"
    ICNS = "icns"
    ICO = "ico"
    JBIG2 = "jbig2"
    JPEG = "jpeg"
    PAM = "pam"
    PSD = "psd"
    PBM = "pbm"
    PGM = "pgm"
    PNM = "pnm"
    PPM = "ppm"
    PCX = "pcx"
    PNG = "png"
    RGBE = "rgbe"
    TGA = "tga"
    TIFF = "tiff"
    WBMP = "wbmp"
    XBM = "xbm"
    XPM = "xpm"
    UNKNOWN = "unknown"


class PixelDensity(BaseModel):
    """Raw pixel density as stored by a format, plus the length of its unit in metres.

    A unit_length of 0 means the density is unitless (an aspect ratio only).
    """

    model_config = ConfigDict(frozen=True)

    horizontal_density: float = Field(ge=0)
    vertical_density: float = Field(ge=0)
    unit_length: float = Field(default=0.0, ge=0)

    @classmethod
    def unitless(cls, x: float, y: float) -> PixelDensity:
        return cls(horizontal_density=x, vertical_density=y, unit_length=0.0)

    @classmethod
    def from_pixels_per_inch(cls, x: float, y: float) -> PixelDensity:
        return cls(horizontal_density=x, vertical_density=y, unit_length=1 / INCHES_PER_METRE)

    @classmethod
    def from_pixels_per_centimetre(cls, x: float, y: float) -> PixelDensity:
        return cls(
            horizontal_density=x, vertical_density=y, unit_length=1 / CENTIMETRES_PER_METRE
        )

    @classmethod
    def from_pixels_per_metre(cls, x: float, y: float) -> PixelDensity:
        return cls(horizontal_density=x, vertical_density=y, unit_length=1.0)

    def is_unitless(self) -> bool:
        return self.unit_length == 0.0


@runtime_checkable
class BufferedImageFactory(Protocol):
    def get_color_buffered_image(self, width: int, height: int, has_alpha: bool) -> Any: ...

    def get_grayscale_buffered_image(self, width: int, height: int, has_alpha: bool) -> Any: ...


class BinaryConstant:
    """An immutable sequence of bytes, such as a file signature."""

    __slots__ = ("_value",)

    def __init__(self, value: bytes | bytearray | Iterable[int]) -> None:
        object.__setattr__(self, "_value", bytes(value))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def size(self) -> int:
        return len(self._value)

    def get(self, index: int) -> int:
        return self._value[index]

    def to_bytes(self) -> bytes:
        return self._value

    def write_to(self, stream: BinaryIO) -> None:
        stream.write(self._value)

    def __len__(self) -> int:
        return len(self._value)

    def __iter__(self) -> Iterator[int]:
        return iter(self._value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BinaryConstant):
            return self._value == other._value
        if isinstance(other, (bytes, bytearray)):
            return self._value == bytes(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"BinaryConstant({self._value!r})"


JFIF0_SIGNATURE = BinaryConstant(b"JFIF\x00")
