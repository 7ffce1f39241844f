import pickle

import pytest

from hypothesis import given

from py_pngchunk import NonAlphabeticError, TypeTag, WrongLengthError

from tests.core.strategies import ascii_tag_text_st, raw_tag_bytes_st


def test_from_bytes():
    tag = TypeTag.from_bytes(bytes([82, 117, 83, 116]))
    assert tag.to_bytes() == bytes([82, 117, 83, 116])


def test_from_bytes_accepts_sequences_of_ints():
    assert TypeTag.from_bytes([82, 117, 83, 116]) == TypeTag.from_ascii("RuSt")


def test_from_ascii_matches_from_bytes():
    assert TypeTag.from_ascii("RuSt") == TypeTag.from_bytes(b"RuSt")


@pytest.mark.parametrize("text", ("", "R", "Rus", "RuStX", "Rusé"))
def test_from_ascii_wrong_length(text):
    with pytest.raises(WrongLengthError):
        TypeTag.from_ascii(text)


@pytest.mark.parametrize("text", ("Ru1t", "Ru t", "RuS_", "1234", "Rué"))
def test_from_ascii_non_alphabetic(text):
    with pytest.raises(NonAlphabeticError):
        TypeTag.from_ascii(text)


@pytest.mark.parametrize("value", (b"", b"Rus", b"RuStX"))
def test_from_bytes_wrong_length(value):
    with pytest.raises(WrongLengthError):
        TypeTag.from_bytes(value)


def test_from_bytes_is_unchecked():
    tag = TypeTag.from_bytes(b"\x00\x01\x7f\xff")
    assert tag.to_ascii_string() == "\x00\x01\x7f\xff"
    assert str(tag) == "\x00\x01\x7f\xff"


@pytest.mark.parametrize(
    "text,critical,public,reserved_bit_valid,safe_to_copy",
    (
        ("RuSt", True, False, True, True),
        ("ruSt", False, False, True, True),
        ("RUSt", True, True, True, True),
        ("Rust", True, False, False, True),
        ("RuST", True, False, True, False),
        ("IHDR", True, True, True, False),
        ("tEXt", False, True, True, True),
    ),
)
def test_property_bits(text, critical, public, reserved_bit_valid, safe_to_copy):
    tag = TypeTag.from_ascii(text)
    assert tag.is_critical() is critical
    assert tag.is_ancillary() is not critical
    assert tag.is_public() is public
    assert tag.is_private() is not public
    assert tag.is_reserved_bit_valid() is reserved_bit_valid
    assert tag.is_valid() is reserved_bit_valid
    assert tag.is_safe_to_copy() is safe_to_copy


def test_valid_and_invalid_tags():
    assert TypeTag.from_ascii("RuSt").is_valid()
    assert not TypeTag.from_ascii("Rust").is_valid()


def test_string_forms():
    tag = TypeTag.from_ascii("RuSt")
    assert tag.to_ascii_string() == "RuSt"
    assert str(tag) == "RuSt"
    assert f"{tag}" == "RuSt"
    assert repr(tag) == "TypeTag('RuSt')"


def test_equality_and_hashing():
    first = TypeTag.from_bytes([82, 117, 83, 116])
    second = TypeTag.from_ascii("RuSt")
    assert first == second
    assert first != TypeTag.from_ascii("Rust")
    assert first != b"RuSt"
    assert len({first, second}) == 1


def test_type_tag_is_immutable():
    tag = TypeTag.from_ascii("RuSt")
    with pytest.raises(AttributeError):
        tag._raw = b"Rust"
    assert tag.to_bytes() == b"RuSt"


def test_pickle():
    tag = TypeTag.from_ascii("RuSt")
    assert pickle.loads(pickle.dumps(tag)) == tag


@given(value=raw_tag_bytes_st)
def test_bytes_round_trip(value):
    assert TypeTag.from_bytes(value).to_bytes() == value


@given(text=ascii_tag_text_st)
def test_ascii_round_trip(text):
    tag = TypeTag.from_ascii(text)
    assert tag.to_ascii_string() == text
    assert tag == TypeTag.from_bytes(text.encode("ascii"))
