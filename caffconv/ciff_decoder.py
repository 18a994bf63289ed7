from io import IOBase
from typing import List, Union

from .ciff_image import CiffImage
from .config import Config
from .errors import DecodeError, ErrorKind
from .reader import BoundedReader

CIFF_MAGIC = b'CIFF'
CIFF_FIXED_HEADER_SIZE = 36  # magic(4) + header_size(8) + content_size(8) + width(8) + height(8)
MIN_VARIABLE_HEADER_SIZE = 2  # caption '\n' + tag '\0'
U64_MAX = 0xFFFFFFFFFFFFFFFF


def split_tags(region: bytes) -> List[bytes]:
    """
    Split a tag region on null bytes.

    Each tag keeps its terminating null byte. Bytes after the last null do
    not form a tag and are dropped.

        >>> split_tags(b'tag1\\x00tag2\\x00')
        [b'tag1\\x00', b'tag2\\x00']
        >>> split_tags(b'\\x00')
        [b'\\x00']
    """
    tags = []
    start = 0
    for i, byte in enumerate(region):
        if byte == 0:
            tags.append(bytes(region[start : i + 1]))
            start = i + 1
    return tags


class CiffDecoder(object):
    """Decoder for a single CIFF image starting at the current stream position."""

    def __init__(self, fp: Union[IOBase, BoundedReader]):
        if isinstance(fp, BoundedReader):
            self._reader = fp
        else:
            self._reader = BoundedReader(fp)

    def decode(self) -> CiffImage:
        reader = self._reader

        # Fixed header
        reader.require(CIFF_FIXED_HEADER_SIZE, 'CIFF header')
        magic = reader.read_exact(4, 'CIFF magic')
        header_size = reader.read_u64('CIFF header size')
        content_size = reader.read_u64('CIFF content size')
        width = reader.read_u64('CIFF width')
        height = reader.read_u64('CIFF height')

        if magic != CIFF_MAGIC:
            raise DecodeError(ErrorKind.BAD_MAGIC, f'Magic is not CIFF: {magic!r}')
        if header_size <= CIFF_FIXED_HEADER_SIZE:
            raise DecodeError(ErrorKind.BAD_HEADER_SIZE, f'Header size is incorrect: {header_size}')

        expected_size = width * height * Config.CHANNELS
        if expected_size > U64_MAX:
            raise DecodeError(
                ErrorKind.CONTENT_SIZE_MISMATCH,
                f'Content size overflows: {width} * {height} * {Config.CHANNELS}',
            )
        if content_size != expected_size:
            raise DecodeError(
                ErrorKind.CONTENT_SIZE_MISMATCH,
                f'Content size is incorrect: {content_size} != {width} * {height} * {Config.CHANNELS}',
            )
        if content_size == 0:
            raise DecodeError(ErrorKind.EMPTY_CONTENT, 'No pixels to make JPEG!')

        remaining = header_size - CIFF_FIXED_HEADER_SIZE
        if remaining < MIN_VARIABLE_HEADER_SIZE:
            raise DecodeError(
                ErrorKind.HEADER_TOO_SMALL,
                f'Header has no room for caption and tags: {remaining} bytes',
            )
        reader.require(remaining, 'CIFF caption and tags')

        caption = self._read_caption(remaining)
        remaining -= len(caption)

        tag_region = reader.read_exact(remaining, 'CIFF tags')
        if b'\n' in tag_region:
            raise DecodeError(ErrorKind.TAGS_CONTAIN_NEWLINE, "Tags contain '\\n' character!")
        tags = split_tags(tag_region)

        pixels = reader.read_exact(content_size, 'CIFF pixels')

        return CiffImage(
            header_size=header_size,
            content_size=content_size,
            width=width,
            height=height,
            caption=caption,
            tags=tags,
            pixels=pixels,
        )

    def _read_caption(self, limit: int) -> bytes:
        """Read one byte at a time up to and including the first newline."""
        caption = bytearray()
        while len(caption) < limit:
            ch = self._reader.read_exact(1, 'CIFF caption')
            caption += ch
            if ch == b'\n':
                return bytes(caption)
        raise DecodeError(ErrorKind.UNTERMINATED_CAPTION, "No closing '\\n' in caption!")

    @staticmethod
    def decode_file(file_path: str) -> CiffImage:
        with open(file_path, 'rb') as fp:
            return CiffDecoder.decode_stream(fp)

    @staticmethod
    def decode_stream(fp: IOBase) -> CiffImage:
        return CiffDecoder(fp).decode()
