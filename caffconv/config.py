"""
Configuration constants for the CAFF/CIFF converter.
"""


class Config:
    """Configuration constants for the CAFF/CIFF converter."""

    # JPEG output
    JPEG_QUALITY = 50
    JPEG_EXTENSION = '.jpg'
    CHANNELS = 3  # RGB

    # Output directory (JPEGs land in the current working directory)
    OUTPUT_DIR = '.'

    # Command line modes
    CAFF_MODE = '-caff'
    CIFF_MODE = '-ciff'
    MODE_EXTENSIONS = {
        CAFF_MODE: '.caff',
        CIFF_MODE: '.ciff',
    }

    # Argument limits
    MODE_LENGTH = 5
    MIN_PATH_LENGTH = 6
    MAX_PATH_LENGTH = 260
