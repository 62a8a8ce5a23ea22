import math
from collections.abc import Callable, Iterable

import pandas as pd

from salt_color.models import Absent, Channel, ChannelRange, ColorOptions, HSLTriple, InvalidRangeError, DEFAULT_OPTIONS
from salt_color.utils import canonical_seed_string, string_hash, make_stream, hsl_to_hex
from salt_color import log

logger = log.logger


def validate_range(value: float, lo: float, hi: float, channel: Channel | None = None) -> float:
    if not (lo <= value <= hi):
        logger.debug(f'Rejected {value} for {channel} outside [{lo}, {hi}]')
        raise InvalidRangeError(value, lo, hi, channel)
    return value


def resolve_range(channel: Channel, options: ColorOptions, defaults: ColorOptions = DEFAULT_OPTIONS) -> ChannelRange:
    """Merge caller bounds over the defaults for one channel and validate them.

    Args:
        channel (Channel): Channel to resolve
        options (ColorOptions): Caller overrides, ``None`` fields fall back to defaults
        defaults (ColorOptions, optional): Fallback bounds. Defaults to DEFAULT_OPTIONS.

    Raises:
        InvalidRangeError: Min or max is outside the channel ceiling, or min exceeds max

    Returns:
        ChannelRange: Validated range
    """
    bounds = options.bounds(channel)
    fallback = defaults.bounds(channel)
    lo = bounds.min if bounds.min is not None else fallback.min
    hi = bounds.max if bounds.max is not None else fallback.max

    lo = validate_range(lo, 0, channel.ceiling, channel)
    hi = validate_range(hi, lo, channel.ceiling, channel)
    return ChannelRange(channel, lo, hi)


def resolve_ranges(options=None, defaults: ColorOptions = DEFAULT_OPTIONS) -> dict[Channel, ChannelRange]:
    options = ColorOptions.coerce(options)
    return {channel: resolve_range(channel, options, defaults) for channel in Channel}


def channel_stream(seed_string: str, channel: Channel) -> Callable[[], float]:
    return make_stream(string_hash(seed_string + channel.discriminator)())


def sample_channel(stream: Callable[[], float], channel_range: ChannelRange) -> float:
    # Upper bound is exclusive, min == max always gives min
    return math.floor(stream() * (channel_range.max - channel_range.min)) + channel_range.min


def get_hsl(salt=Absent.MISSING, options=None, defaults: ColorOptions = DEFAULT_OPTIONS) -> HSLTriple:
    ranges = resolve_ranges(options, defaults)
    seed_string = canonical_seed_string(salt)
    values = {channel: sample_channel(channel_stream(seed_string, channel), ranges[channel]) for channel in Channel}
    return HSLTriple(values[Channel.Hue], values[Channel.Saturation], values[Channel.Lightness])


def get_color(salt=Absent.MISSING, options=None, defaults: ColorOptions = DEFAULT_OPTIONS) -> str:
    """Generate a reproducible pastel-friendly hex color from any salt.

    Args:
        salt (Any, optional): Value seeding the color. Leaving it out differs from passing ``None``.
        options (ColorOptions | dict | None, optional): Hue, saturation and lightness range overrides
        defaults (ColorOptions, optional): Ranges used where options are silent. Defaults to DEFAULT_OPTIONS.

    Raises:
        InvalidRangeError: A resolved range is invalid

    Returns:
        str: Hex color in the format '#rrggbb'
    """
    hsl = get_hsl(salt, options, defaults)
    color = hsl_to_hex(hsl.hue, hsl.saturation, hsl.lightness)
    logger.debug(f'Color {color} from {hsl}')
    return color


def get_colors(salts: Iterable, options=None, defaults: ColorOptions = DEFAULT_OPTIONS) -> pd.Series:
    """Colors for a batch of salts, e.g. one per chart series.

    Args:
        salts (Iterable): Salts to color
        options (ColorOptions | dict | None, optional): Range overrides shared by every salt
        defaults (ColorOptions, optional): Fallback ranges. Defaults to DEFAULT_OPTIONS.

    Returns:
        pd.Series: Hex colors indexed by canonical seed string
    """
    options = ColorOptions.coerce(options)
    salts = list(salts)
    keys = [canonical_seed_string(salt) for salt in salts]
    colors = [get_color(salt, options, defaults) for salt in salts]
    logger.debug(f'Generated {len(colors)} colors')
    return pd.Series(colors, index=pd.Index(keys, dtype=object), name='color', dtype=object)
