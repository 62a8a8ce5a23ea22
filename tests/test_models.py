import pytest

from salt_color.models import Bounds, Channel, ColorOptions, DEFAULT_OPTIONS, InvalidRangeError


def test_channel_ceilings_and_discriminators():
    assert [c.ceiling for c in Channel] == [360, 100, 100]
    assert [c.discriminator for c in Channel] == ['__hue', '__sat', '__lit']


def test_defaults():
    assert DEFAULT_OPTIONS.hue == Bounds(0, 360)
    assert DEFAULT_OPTIONS.saturation == Bounds(25, 60)
    assert DEFAULT_OPTIONS.lightness == Bounds(70, 90)


@pytest.mark.parametrize('value', [Bounds(1, 2), {'min': 1, 'max': 2}, (1, 2), [1, 2]])
def test_bounds_coerce(value):
    assert Bounds.coerce(value) == Bounds(1, 2)


def test_bounds_coerce_partial():
    assert Bounds.coerce({'max': 5}) == Bounds(None, 5)
    assert Bounds.coerce(None) == Bounds()


@pytest.mark.parametrize('value', ['red', 5, (1, 2, 3)])
def test_bounds_coerce_rejects(value):
    with pytest.raises(TypeError):
        Bounds.coerce(value)


def test_color_options_coerce():
    options = ColorOptions.coerce({'hue': (10, 20), 'lightness': {'min': 40}})
    assert options.hue == Bounds(10, 20)
    assert options.saturation == Bounds()
    assert options.lightness == Bounds(40, None)
    assert ColorOptions.coerce(None) == ColorOptions()
    assert ColorOptions.coerce(options) is options


def test_color_options_accepts_plain_values():
    assert ColorOptions(hue=(0, 10)).bounds(Channel.Hue) == Bounds(0, 10)


def test_color_options_rejects_unknown():
    with pytest.raises(TypeError):
        ColorOptions.coerce({'alpha': (0, 1)})
    with pytest.raises(TypeError):
        ColorOptions.coerce('pastel')


def test_invalid_range_error():
    err = InvalidRangeError(120, 0, 100, Channel.Saturation)
    assert isinstance(err, ValueError)
    assert (err.value, err.min, err.max, err.channel) == (120, 0, 100, Channel.Saturation)
    assert str(err) == 'saturation value 120 out of range [0, 100]'
    assert str(InvalidRangeError(5, 0, 1)) == 'Value 5 out of range [0, 1]'
