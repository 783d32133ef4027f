from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from .constants import ALPHABET, INVALID_GROUP, MAX_BYTE, MAX_GROUP
from .errors import InvalidSymbolError, ValueRangeError

SymbolsLike = Union[bytes, bytearray, memoryview, str]

# Reverse table over all 256 byte values; bytes outside the alphabet map to INVALID_GROUP.
_REVERSE = [INVALID_GROUP] * (MAX_BYTE + 1)
for _g, _s in enumerate(ALPHABET):
    _REVERSE[_s] = _g
del _g, _s

def symbol_of(g: int) -> int:
    """Return the alphabet symbol (as an ASCII byte value) for a 6-bit group."""
    if not 0 <= g <= MAX_GROUP:
        raise ValueRangeError(f"Group value out of range 0..63: {g}", value=g)
    return ALPHABET[g]

def group_of(b: int) -> int:
    """Reverse table lookup, total over 0..255.

    Bytes outside the alphabet return INVALID_GROUP (0), which is also the
    value of 'A'. Use is_valid_symbol() to validate, never this.
    """
    if not 0 <= b <= MAX_BYTE:
        raise InvalidSymbolError(f"Not a byte value: {b}", value=b)
    return _REVERSE[b]

def is_valid_symbol(b: int) -> bool:
    return (
        0x41 <= b <= 0x5A  # A-Z
        or 0x61 <= b <= 0x7A  # a-z
        or 0x30 <= b <= 0x39  # 0-9
        or b == 0x2B  # +
        or b == 0x2F  # /
    )

@dataclass(frozen=True)
class SymbolLookup:
    symbol: int
    group: Optional[int] = None

    @property
    def valid(self) -> bool:
        return self.group is not None

def lookup(b: int) -> SymbolLookup:
    """Validated reverse lookup: the group value, or an invalid marker."""
    if 0 <= b <= MAX_BYTE and is_valid_symbol(b):
        return SymbolLookup(b, _REVERSE[b])
    return SymbolLookup(b)

def as_symbols(data: SymbolsLike) -> bytes:
    if isinstance(data, str):
        try:
            return data.encode("ascii")
        except UnicodeEncodeError as e:
            raise InvalidSymbolError(
                f"Non-ASCII character at position {e.start}", position=e.start
            ) from e
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"Expected bytes-like object or ASCII str, not '{type(data).__name__}'")

def groups_from_symbols(symbols: SymbolsLike, validate: bool = True) -> List[int]:
    """Map symbols to 6-bit groups.

    validate=False skips the alphabet check and maps through the raw table;
    only use it for input that has already been validated.
    """
    data = as_symbols(symbols)
    if not validate:
        return [_REVERSE[b] for b in data]

    groups = []
    for i, b in enumerate(data):
        res = lookup(b)
        if not res.valid:
            raise InvalidSymbolError(f"Invalid base64 symbol {chr(b)!r} at position {i}", position=i, value=b)
        groups.append(res.group)
    return groups

def symbols_from_groups(groups: Iterable[int]) -> bytes:
    return bytes(symbol_of(g) for g in groups)
