# Based on http://www.libpng.org/pub/png/spec/1.2/PNG-Structures.html
from typing import Union

from .constants import PROPERTY_BIT, TYPE_TAG_SIZE
from .exceptions import NonAlphabeticError, WrongLengthError


BytesLike = Union[bytes, bytearray, memoryview]

# Four bytes, one property per byte, each read from bit 5 (0x20). For letters
# this bit is the case bit: uppercase means clear, lowercase means set.
#
#   - byte 0: clear is critical, set is ancillary. A decoder that meets an
#     unknown ancillary chunk may skip it.
#   - byte 1: clear is public (registered), set is private.
#   - byte 2: reserved, must be clear in the current version of the format.
#   - byte 3: set is safe to copy, clear is unsafe to copy. Editors that do
#     not understand a chunk may only carry it over when it is safe to copy.
ANCILLARY_BYTE = 0
PRIVATE_BYTE = 1
RESERVED_BYTE = 2
SAFE_TO_COPY_BYTE = 3


def property_bit_set(raw: bytes, index: int) -> bool:
    return bool(raw[index] & PROPERTY_BIT)


class TypeTag:
    """
    A four byte chunk type, compared by value.

    Tags built with from_ascii are guaranteed to be letters. Tags built with
    from_bytes are not checked, so that any record seen on the wire can be
    represented.
    """

    __slots__ = ("_raw",)

    def __init__(self, raw: bytes) -> None:
        if len(raw) != TYPE_TAG_SIZE:
            raise WrongLengthError(
                f"type tag must be {TYPE_TAG_SIZE} bytes, got {len(raw)}"
            )
        object.__setattr__(self, "_raw", bytes(raw))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self._raw,))

    @classmethod
    def from_bytes(cls, data: BytesLike) -> "TypeTag":
        return cls(bytes(data))

    @classmethod
    def from_ascii(cls, text: str) -> "TypeTag":
        raw = text.encode("utf-8")
        if len(raw) != TYPE_TAG_SIZE:
            raise WrongLengthError(
                f"type tag must be {TYPE_TAG_SIZE} bytes, got {len(raw)}: {text!r}"
            )
        if not raw.isalpha():
            raise NonAlphabeticError(f"type tag must only contain A-Z and a-z: {text!r}")
        return cls(raw)

    def to_bytes(self) -> bytes:
        return self._raw

    def to_ascii_string(self) -> str:
        """
        Render each byte as the character with the same code point. Tags from
        from_bytes are not re-validated, so the result may hold control
        characters.
        """
        return self._raw.decode("latin-1")

    def is_critical(self) -> bool:
        return not property_bit_set(self._raw, ANCILLARY_BYTE)

    def is_ancillary(self) -> bool:
        return not self.is_critical()

    def is_public(self) -> bool:
        return not property_bit_set(self._raw, PRIVATE_BYTE)

    def is_private(self) -> bool:
        return not self.is_public()

    def is_reserved_bit_valid(self) -> bool:
        return not property_bit_set(self._raw, RESERVED_BYTE)

    def is_safe_to_copy(self) -> bool:
        return property_bit_set(self._raw, SAFE_TO_COPY_BYTE)

    def is_valid(self) -> bool:
        return self.is_reserved_bit_valid()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypeTag):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self) -> int:
        return hash(self._raw)

    def __str__(self) -> str:
        return self.to_ascii_string()

    def __repr__(self) -> str:
        return f"TypeTag({self.to_ascii_string()!r})"
