import struct

from .checksum import chunk_checksum
from .constants import (
    CHECKSUM_FIELD_SIZE,
    HEADER_SIZE,
    LENGTH_FIELD_SIZE,
    MAX_PAYLOAD_LENGTH,
    MIN_CHUNK_SIZE,
)
from .exceptions import (
    ChecksumMismatchError,
    InvalidEncodingError,
    TooLargeError,
    TruncatedError,
)
from .type_tag import BytesLike, TypeTag


# Each chunk is laid out as follows, all integers big-endian:
#
#   +--------+----------+-----------------+----------+
#   | length | type tag | payload         | checksum |
#   | 4      | 4        | length bytes    | 4        |
#   +--------+----------+-----------------+----------+
#
# The checksum is the CRC-32 of the type tag and the payload. The length field
# counts the payload only, so a chunk occupies 12 + length bytes.
UINT32 = struct.Struct(">I")


class Chunk:
    """
    An immutable, checksummed record holding a type tag and a payload.

    length and checksum are derived from the tag and payload when the chunk is
    built and cannot be set independently.
    """

    __slots__ = ("_type_tag", "_payload", "_checksum")

    def __init__(self, type_tag: TypeTag, payload: BytesLike) -> None:
        if not isinstance(type_tag, TypeTag):
            raise TypeError(f"type_tag must be a TypeTag, got {type(type_tag).__name__}")
        payload = bytes(payload)
        if len(payload) > MAX_PAYLOAD_LENGTH:
            raise TooLargeError(
                f"payload of {len(payload)} bytes exceeds the {MAX_PAYLOAD_LENGTH} byte limit"
            )
        object.__setattr__(self, "_type_tag", type_tag)
        object.__setattr__(self, "_payload", payload)
        object.__setattr__(
            self, "_checksum", chunk_checksum(type_tag.to_bytes(), payload)
        )

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self._type_tag, self._payload))

    @property
    def length(self) -> int:
        return len(self._payload)

    @property
    def type_tag(self) -> TypeTag:
        return self._type_tag

    @property
    def payload(self) -> bytes:
        return self._payload

    @property
    def checksum(self) -> int:
        return self._checksum

    @property
    def encoded_length(self) -> int:
        """
        Number of bytes produced by to_bytes and consumed by from_bytes.
        """
        return MIN_CHUNK_SIZE + self.length

    def payload_as_text(self) -> str:
        try:
            return self._payload.decode("utf-8")
        except UnicodeDecodeError as err:
            raise InvalidEncodingError(f"payload is not valid UTF-8: {err}") from err

    def to_bytes(self) -> bytes:
        return b"".join(
            (
                UINT32.pack(self.length),
                self._type_tag.to_bytes(),
                self._payload,
                UINT32.pack(self._checksum),
            )
        )

    @classmethod
    def from_bytes(cls, buf: BytesLike) -> "Chunk":
        """
        from_bytes parses the chunk at the start of buf.

        Bytes past the end of the record are ignored. The type tag is taken as
        is: a tag that fails TypeTag.is_valid is still accepted, it is up to
        the caller to check it.
        """
        buf = memoryview(buf).cast("B")
        buf_len = len(buf)
        if buf_len < MIN_CHUNK_SIZE:
            raise TruncatedError(
                f"need at least {MIN_CHUNK_SIZE} bytes, got {buf_len}"
            )

        (length,) = UINT32.unpack_from(buf, 0)
        type_tag = TypeTag.from_bytes(buf[LENGTH_FIELD_SIZE:HEADER_SIZE])

        payload_end = HEADER_SIZE + length
        record_end = payload_end + CHECKSUM_FIELD_SIZE
        if buf_len < record_end:
            raise TruncatedError(
                f"declared length {length} needs {record_end} bytes, got {buf_len}"
            )

        chunk = cls(type_tag, buf[HEADER_SIZE:payload_end])
        (checksum,) = UINT32.unpack_from(buf, payload_end)

        if chunk.length != length or chunk.checksum != checksum:
            raise ChecksumMismatchError(
                f"expected checksum {chunk.checksum:#010x}, found {checksum:#010x}"
            )
        return chunk

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chunk):
            return NotImplemented
        return self._type_tag == other._type_tag and self._payload == other._payload

    def __hash__(self) -> int:
        return hash((self._type_tag, self._payload))

    def __str__(self) -> str:
        return f"{self.length}{self._type_tag}{self.payload_as_text()}{self._checksum}"

    def __repr__(self) -> str:
        return (
            f"Chunk(type_tag={self._type_tag!r}, payload={self._payload!r}, "
            f"checksum={self._checksum:#010x})"
        )
