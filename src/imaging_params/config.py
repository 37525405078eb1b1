"""Environment-driven configuration for imaging parameters.

Every option reads from an ``IMAGING_PARAMS_``-prefixed environment variable,
for example ``IMAGING_PARAMS_STRICT=false`` or ``IMAGING_PARAMS_FORMAT=png``.
Options left unset stay absent in the resulting parameters, so the codec
keeps its own default; an explicit ``false`` is carried through as present.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from imaging_params.parameters import ImagingParametersBuilder
from imaging_params.types import Parameter
from imaging_params.values import ImageFormat


class LoggingConfig(BaseSettings):
    """Logging settings, read without the parameter options."""

    log_level: str = Field(default="WARNING", description="Logging level for the CLI")

    model_config = SettingsConfigDict(env_prefix="IMAGING_PARAMS_")


class ImagingParamsConfig(LoggingConfig):
    """Configuration loaded from the environment."""

    verbose: bool | None = Field(default=None, description="Emit diagnostic output")
    strict: bool | None = Field(default=None, description="Reject non-conforming input")
    filename: str | None = Field(default=None, description="File name hint")
    xmp_xml: str | None = Field(default=None, description="XMP metadata packet to embed")
    format: ImageFormat | None = Field(default=None, description="Target image format")
    exif: int | None = Field(default=None, description="EXIF directory tag")

    model_config = SettingsConfigDict(env_prefix="IMAGING_PARAMS_")

    def to_builder(self) -> ImagingParametersBuilder:
        """Return a builder holding every configured option."""
        builder = ImagingParametersBuilder()
        for parameter, value in (
            (Parameter.VERBOSE, self.verbose),
            (Parameter.STRICT, self.strict),
            (Parameter.FILENAME, self.filename),
            (Parameter.XMP_XML, self.xmp_xml),
            (Parameter.FORMAT, self.format),
            (Parameter.EXIF, self.exif),
        ):
            if value is not None:
                builder.set(parameter, value)
        return builder
