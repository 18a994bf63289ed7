from enum import Enum
from io import IOBase
from typing import List, Optional

from .blocks import AnimationBlock, BlockHeader, BlockType, CaffHeaderBlock, CreditsBlock
from .ciff_image import CiffImage
from .errors import DecodeError, ErrorKind
from .reader import BoundedReader


class DecoderState(Enum):
    """Position of the container decoder in the block sequence."""
    START = "start"
    EXPECTING_HEADER = "expecting_header"
    SCANNING = "scanning"  # Header seen; credits allowed until an animation block
    DONE = "done"


class CaffDecoder(object):
    """
    Decoder for a CAFF container.

    Expects one header block, then any number of credits blocks, and stops
    at the first animation block. Blocks after it are never read.
    """

    def __init__(self, fp: IOBase):
        self._reader = BoundedReader(fp)
        self._state = DecoderState.START
        self._header: Optional[CaffHeaderBlock] = None
        self._credits: List[CreditsBlock] = []
        self._animation: Optional[AnimationBlock] = None

    @property
    def state(self) -> DecoderState:
        return self._state

    @property
    def header(self) -> Optional[CaffHeaderBlock]:
        return self._header

    @property
    def credits(self) -> List[CreditsBlock]:
        """Credits blocks in file order (available after decode())."""
        return list(self._credits)

    @property
    def duration(self) -> Optional[int]:
        """Duration of the first animation block (available after decode())."""
        if self._animation is None:
            return None
        return self._animation.duration

    def decode(self) -> CiffImage:
        """
        Run the block state machine until the first animation block.

        Returns:
            The CIFF image of the first animation block

        Raises:
            DecodeError: on the first structural violation
        """
        if self._state != DecoderState.START:
            raise ValueError('Container already decoded.')

        self._state = DecoderState.EXPECTING_HEADER
        while self._state != DecoderState.DONE:
            block = BlockHeader.read(self._reader)
            if self._state == DecoderState.EXPECTING_HEADER:
                self._on_first_block(block)
            else:
                self._on_block(block)

        return self._animation.image

    def _on_first_block(self, block: BlockHeader) -> None:
        if block.block_type != BlockType.HEADER:
            raise DecodeError(
                ErrorKind.MISSING_HEADER,
                f'The first block was not a header block: {block.block_type.name}',
            )
        self._header = CaffHeaderBlock.read(self._reader)
        self._state = DecoderState.SCANNING

    def _on_block(self, block: BlockHeader) -> None:
        if block.block_type == BlockType.HEADER:
            raise DecodeError(ErrorKind.DUPLICATE_HEADER, 'Multiple header blocks in the file!')
        elif block.block_type == BlockType.CREDITS:
            self._credits.append(CreditsBlock.read(self._reader, block.length))
        elif block.block_type == BlockType.ANIMATION:
            self._animation = AnimationBlock.read(self._reader, block.length)
            self._state = DecoderState.DONE

    @staticmethod
    def decode_file(file_path: str) -> CiffImage:
        with open(file_path, 'rb') as fp:
            return CaffDecoder.decode_stream(fp)

    @staticmethod
    def decode_stream(fp: IOBase) -> CiffImage:
        return CaffDecoder(fp).decode()
