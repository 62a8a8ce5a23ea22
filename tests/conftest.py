"""Shared fixtures for salt_color tests."""
import pytest

from salt_color.models import ColorOptions, Bounds


@pytest.fixture
def fixed_options():
    """Every channel collapsed to a single value: hue 0, saturation 50, lightness 50."""
    return {
        'hue': {'min': 0, 'max': 0},
        'saturation': {'min': 50, 'max': 50},
        'lightness': {'min': 50, 'max': 50},
    }


@pytest.fixture
def gray_defaults():
    return ColorOptions(hue=Bounds(10, 10), saturation=Bounds(0, 0), lightness=Bounds(50, 50))


@pytest.fixture
def salts():
    return [f'user-{i}' for i in range(100)]
