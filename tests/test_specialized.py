"""Unit tests for the per-type accessor ParameterObject."""

import pytest

from imaging_params.errors import InvalidArgumentError, NotPresentError, WrongShapeError
from imaging_params.specialized import ParameterObject
from imaging_params.types import Parameter
from imaging_params.values import JFIF0_SIGNATURE, BinaryConstant


def _exif_and_signature() -> ParameterObject:
    return (
        ParameterObject.build()
        .set_int(Parameter.EXIF, 21)
        .set_binary_constant(Parameter.STRICT, JFIF0_SIGNATURE)
        .get()
    )


class TestBuildWithValidValues:
    def test_int_and_binary_constant(self):
        params = _exif_and_signature()
        assert params.get_int(Parameter.EXIF) == 21
        assert params.get_binary_constant(Parameter.STRICT).get(0) == 0x4A

    def test_bool_and_str(self):
        params = (
            ParameterObject.build()
            .set_bool(Parameter.VERBOSE, True)
            .set_str(Parameter.FILENAME, "photo.jpg")
            .get()
        )
        assert params.get_bool(Parameter.VERBOSE) is True
        assert params.get_str(Parameter.FILENAME) == "photo.jpg"
        assert params.present(Parameter.VERBOSE)
        assert not params.present(Parameter.EXIF)

    def test_as_parameters_exposes_generic_view(self):
        generic = _exif_and_signature().as_parameters()
        assert generic.value(Parameter.EXIF, int) == 21


class TestInsertionChecks:
    def test_empty_binary_constant_rejected(self, empty_constant):
        with pytest.raises(InvalidArgumentError):
            ParameterObject.build().set_binary_constant(Parameter.STRICT, empty_constant)

    def test_none_binary_constant_rejected(self):
        with pytest.raises(InvalidArgumentError):
            ParameterObject.build().set_binary_constant(Parameter.STRICT, None)

    def test_bool_rejected_as_int(self):
        with pytest.raises(InvalidArgumentError):
            ParameterObject.build().set_int(Parameter.EXIF, True)

    def test_raw_bytes_rejected_as_binary_constant(self):
        with pytest.raises(InvalidArgumentError):
            ParameterObject.build().set_binary_constant(Parameter.EXIF, b"JFIF")

    def test_failed_set_keeps_previous_value(self):
        builder = ParameterObject.build().set_binary_constant(
            Parameter.STRICT, BinaryConstant(b"\x01")
        )
        with pytest.raises(InvalidArgumentError):
            builder.set_binary_constant(Parameter.STRICT, BinaryConstant(b""))
        assert builder.get().get_binary_constant(Parameter.STRICT) == b"\x01"


class TestAccessErrors:
    def test_get_int_not_present(self):
        params = ParameterObject.build().set_int(Parameter.EXIF, 21).get()
        with pytest.raises(NotPresentError):
            params.get_int(Parameter.STRICT)

    def test_get_int_wrong_type(self):
        with pytest.raises(WrongShapeError):
            _exif_and_signature().get_int(Parameter.STRICT)

    def test_get_binary_constant_not_present(self):
        params = (
            ParameterObject.build().set_binary_constant(Parameter.STRICT, JFIF0_SIGNATURE).get()
        )
        with pytest.raises(NotPresentError):
            params.get_binary_constant(Parameter.EXIF)

    def test_get_binary_constant_wrong_type(self):
        with pytest.raises(WrongShapeError):
            _exif_and_signature().get_binary_constant(Parameter.EXIF)
