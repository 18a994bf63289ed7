"""
CAFF block structures and their validating readers.
"""

from enum import Enum

from .ciff_decoder import CiffDecoder
from .ciff_image import CiffImage
from .errors import DecodeError, ErrorKind
from .reader import BoundedReader

CAFF_MAGIC = b'CAFF'
BLOCK_HEADER_SIZE = 9  # id(1) + length(8)
CAFF_HEADER_SIZE = 20  # magic(4) + header_size(8) + num_anim(8)
CREDITS_FIXED_SIZE = 14  # date(6) + creator_len(8)
ANIMATION_MIN_SIZE = 42


class BlockType(Enum):
    HEADER = 0x01
    CREDITS = 0x02
    ANIMATION = 0x03


# (minimum length, exact)
_LENGTH_BOUNDS = {
    BlockType.HEADER: (CAFF_HEADER_SIZE, True),
    BlockType.CREDITS: (CREDITS_FIXED_SIZE, False),
    BlockType.ANIMATION: (ANIMATION_MIN_SIZE, False),
}


class BlockHeader(object):
    """Block id and declared body length; only valid pairs can be constructed."""

    def __init__(self, block_type: BlockType, length: int):
        minimum, exact = _LENGTH_BOUNDS[block_type]
        if (exact and length != minimum) or length < minimum:
            raise DecodeError(
                ErrorKind.INVALID_BLOCK,
                f'Length of {block_type.name} block is not correct: {length}',
            )
        self.block_type = block_type
        self.length = length

    def __repr__(self):
        return f'BlockHeader({self.block_type.name}, {self.length})'

    @classmethod
    def read(cls, reader: BoundedReader) -> 'BlockHeader':
        reader.require(BLOCK_HEADER_SIZE, 'CAFF block header')
        block_id = reader.read_u8('CAFF block id')
        length = reader.read_u64('CAFF block length')
        try:
            block_type = BlockType(block_id)
        except ValueError:
            raise DecodeError(
                ErrorKind.INVALID_BLOCK,
                f'Id of CAFF block is not correct: 0x{block_id:02X}',
            ) from None
        return cls(block_type, length)


class CaffHeaderBlock(object):
    """The mandatory first block. Validated, then only its counts are kept."""

    def __init__(self, header_size: int, animation_count: int):
        self.header_size = header_size
        self.animation_count = animation_count

    @classmethod
    def read(cls, reader: BoundedReader) -> 'CaffHeaderBlock':
        reader.require(CAFF_HEADER_SIZE, 'CAFF header block')
        magic = reader.read_exact(4, 'CAFF magic')
        header_size = reader.read_u64('CAFF header size')
        animation_count = reader.read_u64('CAFF animation count')

        if magic != CAFF_MAGIC:
            raise DecodeError(ErrorKind.BAD_MAGIC, f'Magic is not CAFF: {magic!r}')
        if header_size != CAFF_HEADER_SIZE:
            raise DecodeError(ErrorKind.BAD_HEADER_SIZE, f'Header size is not correct: {header_size}')
        if animation_count < 1:
            raise DecodeError(ErrorKind.NO_ANIMATIONS, 'No CIFF image to convert!')
        return cls(header_size, animation_count)


class CreditsBlock(object):
    """Creation date and creator of the animation."""

    def __init__(self, year: int, month: int, day: int, hour: int, minute: int, creator: bytes):
        self.year = year
        self.month = month
        self.day = day
        self.hour = hour
        self.minute = minute
        self.creator = creator

    @classmethod
    def read(cls, reader: BoundedReader, declared_length: int) -> 'CreditsBlock':
        """
        Read and validate a credits block body.

        Hour accepts 0..24 and minute 0..60 inclusive.

        Args:
            reader: Reader positioned at the start of the block body
            declared_length: Body length from the block header

        Raises:
            DecodeError: TRUNCATED, DATE_OUT_OF_RANGE or LENGTH_MISMATCH
        """
        reader.require(declared_length, 'CAFF credits block')
        year = reader.read_u16('credits year')
        month = reader.read_u8('credits month')
        day = reader.read_u8('credits day')
        hour = reader.read_u8('credits hour')
        minute = reader.read_u8('credits minute')
        creator_length = reader.read_u64('creator length')

        if year > 9999:
            raise DecodeError(ErrorKind.DATE_OUT_OF_RANGE, f'Year is not correct: {year}')
        if not 1 <= month <= 12:
            raise DecodeError(ErrorKind.DATE_OUT_OF_RANGE, f'Month is not correct: {month}')
        if not 1 <= day <= 31:
            raise DecodeError(ErrorKind.DATE_OUT_OF_RANGE, f'Day is not correct: {day}')
        if hour > 24:
            raise DecodeError(ErrorKind.DATE_OUT_OF_RANGE, f'Hour is not correct: {hour}')
        if minute > 60:
            raise DecodeError(ErrorKind.DATE_OUT_OF_RANGE, f'Minute is not correct: {minute}')

        expected = declared_length - CREDITS_FIXED_SIZE
        if creator_length != expected:
            raise DecodeError(
                ErrorKind.LENGTH_MISMATCH,
                f'Creator length mismatch: {creator_length}, should be {expected}',
            )

        creator = b''
        if creator_length > 0:
            creator = reader.read_exact(creator_length, 'creator')
        return cls(year, month, day, hour, minute, creator)


class AnimationBlock(object):
    """Playback duration plus the embedded CIFF image."""

    def __init__(self, duration: int, image: CiffImage):
        self.duration = duration
        self.image = image

    @classmethod
    def read(cls, reader: BoundedReader, declared_length: int) -> 'AnimationBlock':
        reader.require(declared_length, 'CAFF animation block')
        duration = reader.read_u64('animation duration')
        image = CiffDecoder(reader).decode()
        return cls(duration, image)
