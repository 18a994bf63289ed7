"""In-memory builders for CAFF and CIFF test files."""

import struct

HEADER_ID = 0x01
CREDITS_ID = 0x02
ANIMATION_ID = 0x03


def rgb_pixels(width, height):
    return bytes((i * 7) % 256 for i in range(width * height * 3))


def ciff_bytes(
    width=2,
    height=2,
    caption=b"Hi\n",
    tags=b"x\x00",
    pixels=None,
    magic=b"CIFF",
    header_size=None,
    content_size=None,
):
    if pixels is None:
        pixels = rgb_pixels(width, height)
    if header_size is None:
        header_size = 36 + len(caption) + len(tags)
    if content_size is None:
        content_size = len(pixels)
    fixed = magic + struct.pack("<QQQQ", header_size, content_size, width, height)
    return fixed + caption + tags + pixels


def block(block_id, body, length=None):
    if length is None:
        length = len(body)
    return struct.pack("<BQ", block_id, length) + body


def header_block(magic=b"CAFF", header_size=20, num_anim=1):
    return block(HEADER_ID, magic + struct.pack("<QQ", header_size, num_anim))


def credits_block(
    year=2020,
    month=7,
    day=4,
    hour=12,
    minute=30,
    creator=b"Alice",
    creator_length=None,
    length=None,
):
    if creator_length is None:
        creator_length = len(creator)
    body = struct.pack("<HBBBBQ", year, month, day, hour, minute, creator_length) + creator
    return block(CREDITS_ID, body, length)


def animation_block(ciff=None, duration=100, length=None):
    if ciff is None:
        ciff = ciff_bytes()
    return block(ANIMATION_ID, struct.pack("<Q", duration) + ciff, length)


def caff_bytes(*blocks):
    if not blocks:
        blocks = (header_block(), credits_block(), animation_block())
    return b"".join(blocks)
