"""Unit tests for runtime shape matching."""

from typing import Any

import pytest

from imaging_params.shapes import describe_shape, matches_shape, shape_classes
from imaging_params.values import BinaryConstant, ImageFormat


class TestMatchesShape:
    def test_plain_classes(self):
        assert matches_shape(21, int)
        assert matches_shape("yes", str)
        assert not matches_shape(21, str)

    def test_int_is_not_float(self):
        assert not matches_shape(21, float)

    def test_bool_only_matches_bool_or_broader(self):
        assert matches_shape(True, bool)
        assert matches_shape(True, object)
        assert matches_shape(True, int | bool)
        assert not matches_shape(True, int)
        assert not matches_shape(False, float)

    def test_str_enum_matches_str_and_enum(self):
        assert matches_shape(ImageFormat.PNG, ImageFormat)
        assert matches_shape(ImageFormat.PNG, str)
        assert not matches_shape("png", ImageFormat)

    def test_unions_and_tuples(self):
        constant = BinaryConstant(b"\x00")
        assert matches_shape(constant, int | BinaryConstant)
        assert matches_shape(constant, (int, (str, BinaryConstant)))


class TestShapeExpressions:
    def test_flattening(self):
        assert shape_classes((int, str | bytes)) == (int, str, bytes)

    def test_subscripted_generics_unsupported(self):
        with pytest.raises(TypeError):
            matches_shape([1], list[int])

    def test_describe(self):
        assert describe_shape(int | BinaryConstant) == "int | BinaryConstant"

    def test_any_unsupported(self):
        with pytest.raises(TypeError, match="Unsupported shape Any"):
            matches_shape(21, Any)
