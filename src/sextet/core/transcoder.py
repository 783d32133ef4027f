from __future__ import annotations
from typing import Iterable, List, Sequence

from .constants import BLOCK_BYTES, BLOCK_SYMBOLS, BYTE_BITS, GROUP_BITS
from .errors import LengthMismatchError, ValueRangeError

###############################################################################
# Bit regrouping.
#
# The input is read as one big-endian bit stream: each value contributes its
# bits most-significant first, values are concatenated in order. The stream is
# sliced into dst_bits-wide values; a trailing partial slice is filled with
# zero bits on the right.
#
#   bytes  |   0x66 'f'    |   0x6F 'o'    |
#   bits   0 1 1 0 0 1 1 0 0 1 1 0 1 1 1 1 0 0
#   groups |    25     |    38     |    60     |   -> "Zm8" (+ "=" pad)
#
# Only the bits that have not been emitted yet are kept in the accumulator,
# so it never grows beyond src_bits + dst_bits.

def regroup(values: Iterable[int], src_bits: int, dst_bits: int) -> List[int]:
    src_max = (1 << src_bits) - 1
    dst_mask = (1 << dst_bits) - 1

    out: List[int] = []
    acc = 0
    nbits = 0
    for i, v in enumerate(values):
        if not 0 <= v <= src_max:
            raise ValueRangeError(f"Value {v} at position {i} does not fit in {src_bits} bits", position=i, value=v)
        acc = (acc << src_bits) | v
        nbits += src_bits
        while nbits >= dst_bits:
            nbits -= dst_bits
            out.append((acc >> nbits) & dst_mask)
        acc &= (1 << nbits) - 1

    if nbits:
        out.append((acc << (dst_bits - nbits)) & dst_mask)
    return out

def group_count(n: int) -> int:
    """Number of 6-bit groups needed for n bytes, ceil(8n / 6)."""
    return (BYTE_BITS * n + GROUP_BITS - 1) // GROUP_BITS

def bytes_to_groups(xs: Sequence[int]) -> List[int]:
    groups = regroup(xs, BYTE_BITS, GROUP_BITS)
    if len(groups) != group_count(len(xs)):
        raise LengthMismatchError(
            f"Encoded {len(xs)} bytes into {len(groups)} groups, expected {group_count(len(xs))}",
            length=len(groups),
            expected=group_count(len(xs)),
        )
    return groups

def groups_to_bytes(xs: Sequence[int], length: int) -> bytes:
    """Reassemble `length` bytes from 6-bit groups.

    Only whole blocks are accepted: 4 * length must equal 3 * len(xs), so the
    groups carry exactly 8 * length bits and nothing is truncated.
    """
    if length < 0 or BLOCK_SYMBOLS * length != BLOCK_BYTES * len(xs):
        raise LengthMismatchError(
            f"Cannot decode {len(xs)} groups into {length} bytes (need 4*bytes == 3*groups)",
            length=len(xs),
            expected=length,
        )
    return bytes(regroup(xs, GROUP_BITS, BYTE_BITS))
