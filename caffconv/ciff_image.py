from typing import List

import numpy as np
from PIL import Image

from .config import Config
from .errors import DecodeError, ErrorKind


class CiffImage(object):
    """
    A validated CIFF image: header fields, caption, tags and RGB pixels.

    Instances are produced by CiffDecoder once every header invariant has
    been checked, so `len(pixels) == width * height * 3` always holds.
    """

    @property
    def header_size(self) -> int:
        """Declared header size in bytes (fixed fields + caption + tags)."""
        return self._header_size

    @property
    def content_size(self) -> int:
        """Size of the pixel buffer in bytes."""
        return self._content_size

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def caption(self) -> bytes:
        """Caption bytes, including the terminating newline."""
        return self._caption

    @property
    def tags(self) -> List[bytes]:
        """Tags in file order, each including its terminating null byte."""
        return list(self._tags)

    @property
    def pixels(self) -> bytes:
        """Row-major RGB pixel buffer."""
        return self._pixels

    def __init__(
        self,
        header_size: int,
        content_size: int,
        width: int,
        height: int,
        caption: bytes,
        tags: List[bytes],
        pixels: bytes,
    ):
        """
        Initialize CiffImage.

        Args:
            header_size: Declared CIFF header size
            content_size: Declared pixel buffer size (width * height * 3)
            width: Image width in pixels
            height: Image height in pixels
            caption: Newline-terminated caption bytes
            tags: Null-terminated tag byte strings
            pixels: RGB pixel buffer of exactly content_size bytes
        """
        if len(pixels) != content_size:
            raise ValueError(f'Pixel buffer is {len(pixels)} bytes, expected {content_size}')
        self._header_size = header_size
        self._content_size = content_size
        self._width = width
        self._height = height
        self._caption = caption
        self._tags = list(tags)
        self._pixels = pixels

    def to_array(self) -> np.ndarray:
        """Pixels as a numpy array of shape (height, width, 3)."""
        frame = np.frombuffer(self._pixels, dtype=np.uint8)
        return frame.reshape((self._height, self._width, Config.CHANNELS))

    def get_image(self) -> Image.Image:
        """Get Pillow Image of the pixel buffer."""
        return Image.fromarray(self.to_array())

    def save_to_jpeg(self, output_path: str, quality: int = None) -> str:
        """
        Encode the pixel buffer as a JPEG file.

        Args:
            output_path: Path of the JPEG file to write
            quality: JPEG quality (default: Config.JPEG_QUALITY)

        Returns:
            The path that was written

        Raises:
            DecodeError: ENCODE_FAILED if the encoder rejects the image or
                the file cannot be written
        """
        if quality is None:
            quality = Config.JPEG_QUALITY

        try:
            img = self.get_image()
            img.save(output_path, format='JPEG', quality=quality)
        except (OSError, ValueError) as e:
            raise DecodeError(ErrorKind.ENCODE_FAILED, f'Failed to make JPEG file: {e}') from e
        return output_path
