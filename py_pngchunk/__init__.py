from .checksum import chunk_checksum, crc32  # noqa: F401
from .chunk import Chunk  # noqa: F401
from .exceptions import (  # noqa: F401
    BasePngChunkError,
    ChecksumMismatchError,
    DecodeError,
    InvalidEncodingError,
    InvalidTagError,
    NonAlphabeticError,
    TextError,
    TooLargeError,
    TruncatedError,
    WrongLengthError,
)
from .type_tag import TypeTag  # noqa: F401
