"""Property-based tests for the ImagingParameters builder and snapshot."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from imaging_params.errors import InvalidArgumentError, NotPresentError, WrongShapeError
from imaging_params.parameters import ImagingParameters
from imaging_params.types import Parameter

from .strategies import mismatched_shapes, parameter_maps, parameters, shaped_values


@given(parameter=parameters, shaped=shaped_values())
def test_round_trip(parameter: Parameter, shaped):
    shape, value = shaped
    params = ImagingParameters.build().set(parameter, value).get()
    assert params.value(parameter, shape) is value
    assert params.present(parameter)


@given(parameter=parameters)
def test_absent_by_default(parameter: Parameter):
    assert not ImagingParameters.build().get().present(parameter)


@given(parameter=parameters, shaped=shaped_values(), other=parameters)
def test_absent_raises_not_present_for_any_shape(parameter, shaped, other):
    shape, value = shaped
    params = ImagingParameters.build().set(other, value).get()
    if params.present(parameter):
        return
    with pytest.raises(NotPresentError):
        params.value(parameter, shape)


@given(parameter=parameters, first=shaped_values(), second=shaped_values())
def test_last_write_wins(parameter, first, second):
    _, first_value = first
    second_shape, second_value = second
    params = (
        ImagingParameters.build().set(parameter, first_value).set(parameter, second_value).get()
    )
    assert params.value(parameter, second_shape) is second_value


@given(entries=parameter_maps, parameter=parameters, value=st.integers())
def test_snapshot_unaffected_by_later_sets(entries, parameter, value):
    builder = ImagingParameters.build().update(entries)
    snapshot = builder.get()
    was_present = snapshot.present(parameter)
    builder.set(parameter, value)
    assert snapshot.present(parameter) == was_present
    assert builder.get().present(parameter)
    assert dict(snapshot.items()) == entries


@given(entries=parameter_maps)
def test_repeated_gets_are_independent(entries):
    builder = ImagingParameters.build().update(entries)
    first = builder.get()
    second = builder.get()
    builder.unset(Parameter.EXIF).set(Parameter.FILENAME, "changed")
    assert first == second
    assert dict(first.items()) == entries


@given(entries=parameter_maps, parameter=parameters)
def test_absent_value_rejected_without_side_effects(entries, parameter):
    builder = ImagingParameters.build().update(entries)
    before = builder.get()
    with pytest.raises(InvalidArgumentError):
        builder.set(parameter, None)
    assert builder.get() == before


@given(parameter=parameters, mismatch=mismatched_shapes())
def test_shape_mismatch(parameter, mismatch):
    value, other_shape = mismatch
    params = ImagingParameters.build().set(parameter, value).get()
    with pytest.raises(WrongShapeError):
        params.value(parameter, other_shape)
