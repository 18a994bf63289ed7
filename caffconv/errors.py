"""
Decode errors raised while validating CAFF and CIFF streams.
"""

from enum import Enum


class ErrorKind(Enum):
    """Kind of validation failure. The first failure aborts the whole decode."""
    IO_ERROR = "io_error"  # Underlying stream could not be read
    TRUNCATED = "truncated"  # Declared length exceeds the remaining bytes
    INVALID_BLOCK = "invalid_block"  # Unknown block id or out-of-bound length
    MISSING_HEADER = "missing_header"
    DUPLICATE_HEADER = "duplicate_header"
    NO_ANIMATIONS = "no_animations"
    BAD_MAGIC = "bad_magic"
    BAD_HEADER_SIZE = "bad_header_size"
    CONTENT_SIZE_MISMATCH = "content_size_mismatch"
    EMPTY_CONTENT = "empty_content"
    HEADER_TOO_SMALL = "header_too_small"
    UNTERMINATED_CAPTION = "unterminated_caption"
    TAGS_CONTAIN_NEWLINE = "tags_contain_newline"
    LENGTH_MISMATCH = "length_mismatch"
    DATE_OUT_OF_RANGE = "date_out_of_range"
    ENCODE_FAILED = "encode_failed"


class DecodeError(ValueError):
    """
    Raised when a CAFF or CIFF stream fails validation.

    The `kind` attribute tells failures apart; the message is the
    human-readable diagnostic shown by the command line.
    """

    def __init__(self, kind: ErrorKind, message: str = None):
        super().__init__(message or kind.value)
        self.kind = kind
