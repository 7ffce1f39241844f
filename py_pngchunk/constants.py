# Record layout, in order: length, type tag, payload, checksum.
LENGTH_FIELD_SIZE = 4
TYPE_TAG_SIZE = 4
CHECKSUM_FIELD_SIZE = 4

# Bytes preceding the payload.
HEADER_SIZE = LENGTH_FIELD_SIZE + TYPE_TAG_SIZE

# A record with an empty payload.
MIN_CHUNK_SIZE = HEADER_SIZE + CHECKSUM_FIELD_SIZE

# The length field is an unsigned 32-bit big-endian integer.
# http://www.libpng.org/pub/png/spec/1.2/PNG-Structures.html caps it at
# 2**31 - 1 for PNG files; this codec accepts the full width of the field.
MAX_PAYLOAD_LENGTH = 0xFFFFFFFF

# Each type tag byte carries one property flag in bit 5.
PROPERTY_BIT = 0x20
