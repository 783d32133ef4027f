import pytest

from sextet.core.errors import InvalidSymbolError, LengthMismatchError, PadCountError
from sextet.core.padding import (
    b64decode, b64encode, check_pad_count, decoded_length, encoded_length,
    pad_count_for, split_padding,
)

# RFC 4648 section 10
VECTORS = (
    (b"", b"", 0),
    (b"f", b"Zg==", 2),
    (b"fo", b"Zm8=", 1),
    (b"foo", b"Zm9v", 0),
    (b"foob", b"Zm9vYg==", 2),
    (b"fooba", b"Zm9vYmE=", 1),
    (b"foobar", b"Zm9vYmFy", 0),
)


@pytest.mark.parametrize("raw,text,pad", VECTORS)
def test_rfc4648_encode(raw, text, pad):
    assert b64encode(raw) == text
    assert pad_count_for(len(raw)) == pad


@pytest.mark.parametrize("raw,text,pad", VECTORS)
def test_rfc4648_decode_with_explicit_pad_count(raw, text, pad):
    assert b64decode(text, pad) == raw


@pytest.mark.parametrize("raw,text,pad", VECTORS)
def test_rfc4648_decode_derives_pad_count(raw, text, pad):
    assert split_padding(text) == (text.rstrip(b"="), pad)
    assert b64decode(text) == raw


@pytest.mark.parametrize("raw,text,pad", VECTORS)
def test_rfc4648_decode_stripped_padding(raw, text, pad):
    assert b64decode(text.rstrip(b"="), pad) == raw


@pytest.mark.parametrize("raw,text,pad", VECTORS)
def test_decoded_length_formula(raw, text, pad):
    assert decoded_length(len(text), pad) == len(raw)
    assert encoded_length(len(raw)) == len(text)


def test_round_trip_all_lengths():
    data = bytes((i * 37 + 11) % 256 for i in range(200))
    for n in range(65):
        assert b64decode(b64encode(data[:n])) == data[:n]
    assert b64decode(b64encode(bytes(range(256)))) == bytes(range(256))


def test_padding_length_invariant():
    for n in range(100):
        encoded = b64encode(b"\xa5" * n)
        assert len(encoded) % 4 == 0
        assert len(encoded) == encoded_length(n)


def test_decode_is_not_injective():
    assert b64decode("Zh==") == b"f"
    assert b64decode("Zg==") == b"f"
    assert b64encode(b64decode("Zh==")) == b"Zg=="
    assert b64decode("Zm9=") == b"fo"


def test_accepts_str_and_bytearray():
    assert b64decode("Zm9vYmE=") == b"fooba"
    assert b64encode(bytearray(b"fooba")) == b"Zm9vYmE="


@pytest.mark.parametrize("text", ("Zg", "Zm9vY", "Zm9vYg=", "==", "Zm9vYmFyZ"))
def test_length_mismatch(text):
    with pytest.raises(LengthMismatchError):
        b64decode(text)


@pytest.mark.parametrize("text", ("Z===", "Zg=a", "Z=g="))
def test_bad_padding(text):
    with pytest.raises(PadCountError):
        b64decode(text)


def test_explicit_pad_count_must_match_trailing_pad():
    with pytest.raises(PadCountError):
        b64decode("Zg==", 1)


def test_explicit_pad_count_wrong_for_length():
    with pytest.raises(LengthMismatchError):
        b64decode("Zm9v", 1)


@pytest.mark.parametrize("pad", (-1, 3, True, 1.0))
def test_pad_count_out_of_range(pad):
    with pytest.raises(PadCountError):
        check_pad_count(pad)
    with pytest.raises(PadCountError):
        b64decode("Zm9v", pad)


def test_invalid_symbol_rejected():
    with pytest.raises(InvalidSymbolError) as exc:
        b64decode("Zm9v*g==")
    assert exc.value.position == 4


def test_unvalidated_decode_maps_invalid_to_zero():
    assert b64decode("Zm9-", validate=False) == b64decode("Zm9A")


def test_decoded_length_rejects_partial_block():
    with pytest.raises(LengthMismatchError):
        decoded_length(6, 2)
    with pytest.raises(PadCountError):
        decoded_length(0, 1)
