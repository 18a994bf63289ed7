"""
CAFF/CIFF to JPEG converter.

Usage:
    caffconv -caff <file.caff>
    caffconv -ciff <file.ciff>

Writes <file>.jpg into the current working directory.
"""

import os
import sys
from typing import List, Optional

from .config import Config
from .converter import convert_file
from .errors import DecodeError


def _error(message: str) -> int:
    print(f"[ERROR] {message}", file=sys.stderr)
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    if len(argv) != 2:
        return _error("Invalid number of arguments!")

    mode, file_path = argv
    if (
        len(mode) != Config.MODE_LENGTH
        or not Config.MIN_PATH_LENGTH <= len(file_path) <= Config.MAX_PATH_LENGTH
    ):
        return _error("Invalid parameters!")

    if not os.path.isfile(file_path):
        return _error("Incorrect file path!")

    extension = Config.MODE_EXTENSIONS.get(mode)
    if extension is None or not os.path.basename(file_path).endswith(extension):
        return _error("Invalid parameters!")

    try:
        out_path = convert_file(file_path, mode=mode)
    except DecodeError as e:
        return _error(f"Failed to parse {extension[1:].upper()} file: {e}")
    except OSError as e:
        return _error(f"Failed to open file: {e}")

    print(f"[OK] Saved -> {os.path.basename(out_path)}")
    return 0
