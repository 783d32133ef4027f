from __future__ import annotations
from typing import Optional, Tuple, Union

from .alphabet import SymbolsLike, as_symbols, groups_from_symbols, symbols_from_groups
from .constants import BLOCK_BYTES, BLOCK_SYMBOLS, MAX_PAD_COUNT, PAD, PAD_BYTE
from .errors import LengthMismatchError, PadCountError
from .transcoder import bytes_to_groups, groups_to_bytes

BytesLike = Union[bytes, bytearray, memoryview]

def pad_count_for(n: int) -> int:
    """Number of '=' symbols that follow the encoding of n bytes."""
    return (BLOCK_BYTES - n % BLOCK_BYTES) % BLOCK_BYTES

def check_pad_count(p: int) -> int:
    if isinstance(p, bool) or not isinstance(p, int) or not 0 <= p <= MAX_PAD_COUNT:
        raise PadCountError(f"Pad count must be 0, 1 or 2, got {p!r}")
    return p

def encoded_length(n: int) -> int:
    return BLOCK_SYMBOLS * ((n + BLOCK_BYTES - 1) // BLOCK_BYTES)

def decoded_length(total_symbols: int, pad_count: int) -> int:
    """Decoded byte count for padded text of `total_symbols` symbols.

    Every 4-symbol block carries 3 bytes and each pad symbol removes one of
    them from the last block.
    """
    check_pad_count(pad_count)
    if total_symbols % BLOCK_SYMBOLS:
        raise LengthMismatchError(
            f"Encoded length must be a multiple of 4, got {total_symbols}",
            length=total_symbols,
        )
    if total_symbols == 0 and pad_count:
        raise PadCountError("Empty input cannot carry padding")
    return BLOCK_BYTES * (total_symbols // BLOCK_SYMBOLS) - pad_count

def split_padding(symbols: SymbolsLike) -> Tuple[bytes, int]:
    """Split encoded text into (payload, pad_count) by scanning trailing '='."""
    data = as_symbols(symbols)
    payload = data.rstrip(PAD.encode("ascii"))
    pad_count = len(data) - len(payload)
    if pad_count > MAX_PAD_COUNT:
        raise PadCountError(f"Too much padding: {pad_count} trailing '=' (at most {MAX_PAD_COUNT})")
    pos = payload.find(PAD_BYTE)
    if pos != -1:
        raise PadCountError(f"Padding character at position {pos} before end of input")
    return payload, pad_count

def b64encode(xs: BytesLike) -> bytes:
    data = bytes(xs)
    pad_count = pad_count_for(len(data))
    payload = symbols_from_groups(bytes_to_groups(data))
    if (len(payload) + pad_count) % BLOCK_SYMBOLS:
        raise LengthMismatchError(
            f"Padding invariant broken: {len(payload)} symbols + {pad_count} pad",
            length=len(payload) + pad_count,
        )
    return payload + PAD.encode("ascii") * pad_count

def b64decode(symbols: SymbolsLike, pad_count: Optional[int] = None, validate: bool = True) -> bytes:
    """Decode RFC 4648 base64.

    With pad_count=None the pad count is read from the trailing '='. An
    explicit pad_count is accepted either for padded text, where it must match
    the trailing '=', or for text whose padding was already stripped.

    Leftover low-order bits of the last payload symbol are ignored, so
    different inputs can decode to the same bytes ("Zh==" and "Zg==" both
    give b"f").
    """
    payload, found = split_padding(symbols)
    if pad_count is None:
        pad_count = found
    else:
        check_pad_count(pad_count)
        if found and found != pad_count:
            raise PadCountError(f"Pad count {pad_count} does not match {found} trailing '='")

    total = len(payload) + pad_count
    length = decoded_length(total, pad_count)

    groups = groups_from_symbols(payload, validate=validate)
    # Pad positions carry no payload bits; filling them with zero groups
    # completes the last block so the core transcoder sees whole blocks only.
    groups.extend([0] * pad_count)
    return groups_to_bytes(groups, length + pad_count)[:length]
