"""Parameter identifiers — the closed set of keys a codec understands."""

from enum import StrEnum

from imaging_params.errors import UnknownParameterError


class Parameter(StrEnum):
    VERBOSE = "verbose"
    STRICT = "strict"
    FILENAME = "filename"
    XMP_XML = "xmp_xml"
    FORMAT = "format"
    BUFFERED_IMAGE_FACTORY = "buffered_image_factory"
    PIXEL_DENSITY = "pixel_density"
    EXIF = "exif"

    @classmethod
    def parse(cls, name: str) -> "Parameter":
        """Resolve a member from its name or value, ignoring case and dashes."""
        normalized = name.strip().lower().replace("-", "_")
        for member in cls:
            if member.value == normalized:
                return member
        raise UnknownParameterError(name)
