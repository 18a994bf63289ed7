"""caffconv package entrypoints."""

from .caff_decoder import CaffDecoder, DecoderState
from .ciff_decoder import CiffDecoder, split_tags
from .ciff_image import CiffImage
from .converter import convert_file
from .errors import DecodeError, ErrorKind

__all__ = [
    'CaffDecoder',
    'DecoderState',
    'CiffDecoder',
    'CiffImage',
    'DecodeError',
    'ErrorKind',
    'convert_file',
    'split_tags',
]
