from __future__ import annotations

# RFC 4648 section 4, standard alphabet
ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
PAD = "="
PAD_BYTE = ord(PAD)

BYTE_BITS = 8
GROUP_BITS = 6
BLOCK_BYTES = 3
BLOCK_SYMBOLS = 4

MAX_GROUP = (1 << GROUP_BITS) - 1
MAX_BYTE = (1 << BYTE_BITS) - 1
MAX_PAD_COUNT = 2

# group_of() result for bytes outside the alphabet, '=' included
INVALID_GROUP = 0
