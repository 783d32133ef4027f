from __future__ import annotations
import sys

from .core.alphabet import group_of, is_valid_symbol, symbol_of
from .core.constants import MAX_BYTE, MAX_GROUP
from .core.encoding import b64d, b64decode, b64encode
from .core.errors import InvalidSymbolError
from .core.padding import decoded_length

# Well-sized and well-padded, so only symbol validation can reject it
INVALID_SYMBOL_TEXT = "Zm9v!g=="

# RFC 4648 section 10
RFC4648_VECTORS = [
    (b"", b""),
    (b"f", b"Zg=="),
    (b"fo", b"Zm8="),
    (b"foo", b"Zm9v"),
    (b"foob", b"Zm9vYg=="),
    (b"fooba", b"Zm9vYmE="),
    (b"foobar", b"Zm9vYmFy"),
]

def codec_self_check(logger):
    checks = []

    checks.append(("Python >= 3.9", sys.version_info >= (3, 9), "Python 3.9+ required"))

    for raw, text in RFC4648_VECTORS:
        label = raw.decode("ascii") or "<empty>"
        try:
            ok = b64encode(raw) == text
            checks.append((f"RFC 4648 encode {label}", ok, f"expected {text!r}"))
        except ValueError as e:
            checks.append((f"RFC 4648 encode {label}", False, str(e)))

        pad_count = len(text) - len(text.rstrip(b"="))
        try:
            ok = b64decode(text, pad_count) == raw and decoded_length(len(text), pad_count) == len(raw)
            checks.append((f"RFC 4648 decode {label}", ok, f"expected {raw!r}"))
        except ValueError as e:
            checks.append((f"RFC 4648 decode {label}", False, str(e)))

    checks.append((
        "Alphabet left inverse",
        all(group_of(symbol_of(g)) == g for g in range(MAX_GROUP + 1)),
        "group_of(symbol_of(g)) != g",
    ))
    checks.append((
        "Alphabet right inverse",
        all(symbol_of(group_of(b)) == b for b in range(MAX_BYTE + 1) if is_valid_symbol(b)),
        "symbol_of(group_of(b)) != b",
    ))

    sample = bytes(range(MAX_BYTE + 1))
    checks.append((
        "Padding length invariant",
        all(len(b64encode(sample[:n])) % 4 == 0 for n in range(len(sample) + 1)),
        "Encoded length not a multiple of 4",
    ))
    checks.append((
        "Round trip",
        all(b64decode(b64encode(sample[n:])) == sample[n:] for n in range(len(sample) + 1)),
        "Decoded bytes differ from input",
    ))

    try:
        ok = b64d("Zm9vYmFy") == b"foobar"
        checks.append(("Base64 strict decode (valid)", ok, "Valid base64 decoded wrongly"))
    except ValueError:
        checks.append(("Base64 strict decode (valid)", False, "Valid base64 rejected"))

    try:
        b64d(INVALID_SYMBOL_TEXT)
        checks.append(("Base64 strict decode (invalid symbol)", False, "Invalid symbol accepted"))
    except InvalidSymbolError:
        checks.append(("Base64 strict decode (invalid symbol)", True, ""))
    except ValueError as e:
        checks.append(("Base64 strict decode (invalid symbol)", False, f"Rejected for another reason: {e}"))

    all_ok = True
    for name, ok, reason in checks:
        all_ok = all_ok and ok
        if ok:
            logger.info("codec_check", check=name, status="OK")
        else:
            logger.error("codec_check", check=name, status="FAILED", reason=reason)

    if not all_ok:
        raise RuntimeError("Codec self-check failed")

    logger.info("codec_self_check_passed")
    return True
