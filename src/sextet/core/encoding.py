from __future__ import annotations

from .alphabet import SymbolsLike, groups_from_symbols, symbols_from_groups
from .padding import BytesLike, b64decode, b64encode
from .transcoder import bytes_to_groups, groups_to_bytes

__all__ = ["encode", "decode", "b64encode", "b64decode", "b64e", "b64d"]

def encode(data: BytesLike) -> bytes:
    """Encode bytes to unpadded base64 symbols, ceil(8n / 6) of them."""
    return symbols_from_groups(bytes_to_groups(bytes(data)))

def decode(symbols: SymbolsLike, length: int) -> bytes:
    """Inverse of encode() for whole blocks: 4 * length must equal 3 * len(symbols)."""
    return groups_to_bytes(groups_from_symbols(symbols), length)

def b64e(b: BytesLike) -> str:
    """Encode bytes to padded base64 text."""
    return b64encode(b).decode("ascii")

def b64d(s: SymbolsLike) -> bytes:
    """Decode padded base64 text, validating every symbol."""
    return b64decode(s)
