import json
import math
import dataclasses
from collections.abc import Callable, Mapping, Set

import numpy as np

from salt_color.models import Absent
from salt_color import log

logger = log.logger

_MASK32 = 0xFFFFFFFF
_CIRCULAR = '[Circular]'
_DEEP = '[Deep]'
# Nesting past this depth is cut off, well under the interpreter recursion limit
_MAX_DEPTH = 200


def u32(n: int) -> int:
    return n & _MASK32


def _dumps(value) -> str:
    return json.dumps(value, sort_keys=True, separators=(',', ':'), ensure_ascii=False)


def _to_jsonable(value, seen: frozenset = frozenset(), depth: int = 0):
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, Absent):
        return None
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, (bytes, bytearray)):
        return value.decode('utf-8', 'backslashreplace')

    # Containers from here on
    if id(value) in seen:
        return _CIRCULAR
    if depth >= _MAX_DEPTH:
        return _DEEP
    seen = seen | {id(value)}
    depth += 1

    if isinstance(value, np.ndarray):
        return _to_jsonable(value.tolist(), seen, depth - 1)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: _to_jsonable(getattr(value, f.name), seen, depth) for f in dataclasses.fields(value)}
    if isinstance(value, Mapping):
        return {
            k if isinstance(k, str) else canonical_seed_string(k): _to_jsonable(v, seen, depth)
            for k, v in value.items()
        }
    if isinstance(value, Set):
        return sorted((_to_jsonable(v, seen, depth) for v in value), key=_dumps)
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(v, seen, depth) for v in value]
    try:
        return str(value)
    except Exception:
        logger.debug(f'str() failed for {type(value).__qualname__}, using the type name')
        return type(value).__qualname__


def canonical_seed_string(salt) -> str:
    """Normalize any salt into the string that seeds the hashers.

    Text is returned as is. ``Absent.MISSING`` becomes ``'undefined'`` so it never collides
    with ``None`` (``'null'``). Everything else is serialized as compact JSON with sorted keys,
    so structurally equal values give the same string.

    Args:
        salt: Any value

    Returns:
        str: Canonical seed string
    """
    if isinstance(salt, str):
        return salt
    if salt is Absent.MISSING:
        return Absent.MISSING.value
    return _dumps(_to_jsonable(salt))


def _utf16_units(s: str) -> np.ndarray:
    return np.frombuffer(s.encode('utf-16-le', 'surrogatepass'), dtype='<u2')


def string_hash(seed: str) -> Callable[[], int]:
    """Return a generator of well-mixed 32-bit integers for the given string.

    The string is folded in UTF-16 code units with a multiply and 13-bit rotate,
    every call then advances the state with two xorshift-multiply rounds.
    """
    units = _utf16_units(seed)
    h = 1779033703 ^ len(units)
    for code in units.tolist():
        h = u32((h ^ code) * 3432918353)
        h = u32(h << 13) | (h >> 19)

    def next_hash() -> int:
        nonlocal h
        h = u32((h ^ (h >> 16)) * 2246822507)
        h = u32((h ^ (h >> 13)) * 3266489909)
        h ^= h >> 16
        return h

    return next_hash


def make_stream(seed: int) -> Callable[[], float]:
    """Return a generator of floats in [0, 1) driven by a 32-bit counter.

    Pure 32-bit integer mixing, so the n-th draw for a seed is identical on every platform.
    """
    state = u32(seed)

    def next_float() -> float:
        nonlocal state
        state = u32(state + 0x6D2B79F5)
        t = u32((state ^ (state >> 15)) * (state | 1))
        t ^= u32(t + u32((t ^ (t >> 7)) * (t | 61)))
        return (t ^ (t >> 14)) / 4294967296

    return next_float


def _to_hex_byte(x: float) -> str:
    # Round half up
    return '{:02x}'.format(math.floor(x * 255 + 0.5))


def hsl_to_hex(h: float, s: float, l: float) -> str:
    """Convert hue (degrees), saturation (%) and lightness (%) to '#rrggbb'.

    Args:
        h (float): Hue in degrees, taken mod 360
        s (float): Saturation 0-100
        l (float): Lightness 0-100

    Returns:
        str: Lowercase hex color
    """
    s /= 100
    l /= 100
    a = s * min(l, 1 - l)

    def f(n: int) -> float:
        k = (n + h / 30) % 12
        return l - a * max(-1, min(k - 3, 9 - k, 1))

    # red, green, blue
    return '#' + ''.join(_to_hex_byte(f(n)) for n in (0, 8, 4))
