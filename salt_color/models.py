from enum import Enum
from dataclasses import dataclass, field
from collections.abc import Mapping


class Absent(Enum):
    """Marker for a salt that was not supplied at all, as opposed to an explicit ``None``."""

    MISSING = 'undefined'


class Channel(Enum):
    Hue = 'hue'
    Saturation = 'saturation'
    Lightness = 'lightness'

    @property
    def ceiling(self) -> int:
        return 360 if self == Channel.Hue else 100

    @property
    def discriminator(self) -> str:
        # Appended to the seed string so each channel hashes independently
        return _DISCRIMINATORS[self]


_DISCRIMINATORS = {Channel.Hue: '__hue', Channel.Saturation: '__sat', Channel.Lightness: '__lit'}


class InvalidRangeError(ValueError):
    def __init__(self, value: float, lo: float, hi: float, channel: Channel | None = None) -> None:
        self.value = value
        self.min = lo
        self.max = hi
        self.channel = channel
        subject = f'{channel.value} value' if channel else 'Value'
        super().__init__(f'{subject} {value} out of range [{lo}, {hi}]')


@dataclass(frozen=True)
class Bounds:
    min: float | None = None
    max: float | None = None

    @classmethod
    def coerce(cls, value) -> 'Bounds':
        """Build bounds from a ``Bounds``, a ``{'min': .., 'max': ..}`` mapping or a ``(min, max)`` pair.

        Args:
            value: Bounds-like value. ``None`` means no override.

        Returns:
            Bounds: Bounds with missing fields left as ``None``
        """
        if value is None:
            return cls()
        if isinstance(value, Bounds):
            return value
        if isinstance(value, Mapping):
            return cls(value.get('min'), value.get('max'))
        if isinstance(value, (tuple, list)) and len(value) == 2:
            return cls(value[0], value[1])
        raise TypeError(f'Cannot read channel bounds from {value!r}')


@dataclass(frozen=True)
class ColorOptions:
    hue: Bounds = field(default_factory=Bounds)
    saturation: Bounds = field(default_factory=Bounds)
    lightness: Bounds = field(default_factory=Bounds)

    def __post_init__(self):
        # Allow plain tuples or dicts per channel
        for channel in Channel:
            object.__setattr__(self, channel.value, Bounds.coerce(getattr(self, channel.value)))

    def bounds(self, channel: Channel) -> Bounds:
        return getattr(self, channel.value)

    @classmethod
    def coerce(cls, value) -> 'ColorOptions':
        if value is None:
            return cls()
        if isinstance(value, ColorOptions):
            return value
        if isinstance(value, Mapping):
            unknown = set(value) - {c.value for c in Channel}
            if unknown:
                raise TypeError(f'Unknown color option(s) {sorted(map(str, unknown))}')
            return cls(**{c.value: Bounds.coerce(value.get(c.value)) for c in Channel})
        raise TypeError(f'Cannot read color options from {value!r}')


DEFAULT_OPTIONS = ColorOptions(
    hue=Bounds(0, 360),
    saturation=Bounds(25, 60),
    lightness=Bounds(70, 90),
)


@dataclass(frozen=True)
class ChannelRange:
    channel: Channel
    min: float
    max: float


@dataclass(frozen=True)
class HSLTriple:
    hue: float
    saturation: float
    lightness: float
