"""
Console report of decoded CAFF/CIFF structures.

Decoders never print; these helpers render their results afterwards.
"""

import sys
from typing import Any, List

from .blocks import CreditsBlock
from .ciff_image import CiffImage


def safe_console_text(value: Any) -> str:
    """
    Convert arbitrary text or raw bytes into a form that can be safely printed to the current console.

    Args:
        value: Value to render as text. Bytes are decoded as UTF-8 with replacement.

    Returns:
        String compatible with the console encoding, with unencodable characters replaced.
    """
    if value is None:
        text = ""
    elif isinstance(value, (bytes, bytearray)):
        text = bytes(value).decode("utf-8", errors="replace")
    else:
        text = str(value)

    encoding = getattr(sys.stdout, "encoding", None) or "utf-8"
    try:
        return text.encode(encoding, errors="replace").decode(encoding, errors="replace")
    except LookupError:
        return text.encode("utf-8", errors="replace").decode("utf-8", errors="replace")


def format_creation_date(credits: CreditsBlock) -> str:
    return f"{credits.year}.{credits.month}.{credits.day}. {credits.hour}:{credits.minute}"


def format_tags(tags: List[bytes]) -> str:
    """Tags separated by spaces, without their null terminators."""
    return " ".join(safe_console_text(tag.rstrip(b"\x00")) for tag in tags)


def print_credits(credits: CreditsBlock) -> None:
    if credits.creator:
        print(f"CAFF Creator: {safe_console_text(credits.creator)}")
    print(f"Creation date: {format_creation_date(credits)}")


def print_ciff(image: CiffImage) -> None:
    print(f"CIFF size: {image.width} x {image.height}")
    caption = image.caption.rstrip(b"\n")
    print(f"Caption: {safe_console_text(caption)}")
    print(f"Tags: {format_tags(image.tags)}")
