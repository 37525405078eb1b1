"""Pytest configuration and fixtures for the imaging parameter tests."""

import os

import pytest

from imaging_params.parameters import ImagingParametersBuilder
from imaging_params.values import BinaryConstant


class StubImageFactory:
    """Minimal buffered image factory that records the requested dimensions."""

    def get_color_buffered_image(self, width, height, has_alpha):
        return ("color", width, height, has_alpha)

    def get_grayscale_buffered_image(self, width, height, has_alpha):
        return ("gray", width, height, has_alpha)


@pytest.fixture
def builder() -> ImagingParametersBuilder:
    return ImagingParametersBuilder()


@pytest.fixture
def image_factory() -> StubImageFactory:
    return StubImageFactory()


@pytest.fixture
def empty_constant() -> BinaryConstant:
    return BinaryConstant(b"")


@pytest.fixture(autouse=True)
def _clear_imaging_env(monkeypatch):
    """Keep IMAGING_PARAMS_* variables from the host out of config tests."""
    for name in list(os.environ):
        if name.startswith("IMAGING_PARAMS_"):
            monkeypatch.delenv(name)
