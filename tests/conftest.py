"""Shared reference points and converters for the USNG tests."""

import pytest

from common.types import GeographicPoint
from usng.converter import ConverterConfig, UsngConverter


@pytest.fixture
def minneapolis() -> GeographicPoint:
    """Reference point in UTM zone 15, band T."""
    return GeographicPoint(lat=44.0, lon=-93.0)


@pytest.fixture
def washington() -> GeographicPoint:
    """Reference point in UTM zone 18, band S."""
    return GeographicPoint(lat=38.894, lon=-77.043)


@pytest.fixture
def converter() -> UsngConverter:
    return UsngConverter()


@pytest.fixture
def strict_converter() -> UsngConverter:
    return UsngConverter(ConverterConfig(strict=True))
