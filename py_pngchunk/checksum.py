import zlib

from .constants import TYPE_TAG_SIZE


def uint32(n: int) -> int:
    return n & ((1 << 32) - 1)


def crc32(data: bytes, value: int = 0) -> int:
    """
    crc32 returns the CRC-32 of data as an unsigned 32-bit integer.

    The parameters are the ISO-HDLC ones shared by zlib and PNG: reflected
    polynomial 0xEDB88320, initial value and final xor 0xFFFFFFFF. Passing
    the result of a previous call as value continues the checksum over
    concatenated input.
    """
    return uint32(zlib.crc32(data, value))


def chunk_checksum(type_tag: bytes, payload: bytes) -> int:
    """
    chunk_checksum covers the type tag followed by the payload; the length
    field is not included.
    """
    if len(type_tag) != TYPE_TAG_SIZE:
        raise ValueError(f"type tag must be {TYPE_TAG_SIZE} bytes, got {len(type_tag)}")
    return crc32(payload, crc32(type_tag))
