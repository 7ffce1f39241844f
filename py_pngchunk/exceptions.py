class BasePngChunkError(Exception):
    """
    Base error class for pngchunk module.
    """


class InvalidTagError(BasePngChunkError):
    """
    Type tag rejected at construction.
    """


class WrongLengthError(InvalidTagError):
    """
    Type tag is not exactly four bytes long.
    """


class NonAlphabeticError(InvalidTagError):
    """
    Type tag contains a byte outside A-Z and a-z.
    """


class DecodeError(BasePngChunkError):
    """
    Buffer is not a well formed chunk.
    """


class TruncatedError(DecodeError):
    """
    Buffer is shorter than the declared record.
    """


class ChecksumMismatchError(DecodeError):
    """
    Embedded checksum disagrees with the type tag and payload.
    """


class TextError(BasePngChunkError):
    """
    Payload cannot be read as text.
    """


class InvalidEncodingError(TextError):
    """
    Payload is not valid UTF-8.
    """


class TooLargeError(BasePngChunkError):
    """
    Payload does not fit the 32-bit length field.
    """
