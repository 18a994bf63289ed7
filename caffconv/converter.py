"""
Decode a CAFF or CIFF file and write its first frame as a JPEG.
"""

import os

from .caff_decoder import CaffDecoder
from .ciff_decoder import CiffDecoder
from .config import Config
from .report import print_ciff, print_credits


def output_name(file_path: str) -> str:
    """Base name of the input file with its extension replaced by .jpg."""
    base_name = os.path.splitext(os.path.basename(file_path))[0]
    return base_name + Config.JPEG_EXTENSION


def convert_file(
    file_path: str,
    mode: str = Config.CAFF_MODE,
    output_dir: str = None,
    report: bool = True,
) -> str:
    """
    Decode a .caff or .ciff file and save its image as JPEG.

    Args:
        file_path: Path to the input file
        mode: Config.CAFF_MODE or Config.CIFF_MODE
        output_dir: Directory for the JPEG (default: Config.OUTPUT_DIR)
        report: Print credits and CIFF details to stdout

    Returns:
        Path of the written JPEG file

    Raises:
        DecodeError: If the file fails validation or encoding fails
        ValueError: If mode is unknown
    """
    if output_dir is None:
        output_dir = Config.OUTPUT_DIR

    with open(file_path, 'rb') as fp:
        if mode == Config.CAFF_MODE:
            decoder = CaffDecoder(fp)
            image = decoder.decode()
            credits = decoder.credits
        elif mode == Config.CIFF_MODE:
            image = CiffDecoder(fp).decode()
            credits = []
        else:
            raise ValueError(f'Unknown mode: {mode}')

    out_path = os.path.join(output_dir, output_name(file_path))
    image.save_to_jpeg(out_path)

    if report:
        for block in credits:
            print_credits(block)
        print_ciff(image)
    return out_path
