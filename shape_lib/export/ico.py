"""Multi-resolution ICO encoder.

Packs 32-bit BGRA bitmaps into a single Windows icon file. Each image is a
BMP DIB (no file header) in the legacy ICO layout:

    ICONDIR        reserved=0, type=1, count                      (6 bytes)
    ICONDIRENTRY   width, height (0 = 256), colors=0, reserved=0,
                   planes=1, bit count=32, data size, data offset  (16 bytes each)
    image data     BITMAPINFOHEADER (40 bytes, height doubled)
                   pixel rows bottom-up, B, G, R, A per pixel
                   1-bpp AND mask, rows padded to 4 bytes, all zero

All multi-byte fields are little-endian. The AND mask is always emitted as
opaque (zero) rows: readers take transparency from the alpha channel.

Example usage:
    Encoding and inspecting an icon::

        from shape_lib.export.ico import create_ico_file, read_ico_directory

        data = create_ico_file([rgba16, rgba32, rgba48])
        for entry in read_ico_directory(data):
            print(entry.width, entry.size, entry.offset)
"""

from __future__ import annotations

import logging
import math
import struct
from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from ..errors import ExportError

logger = logging.getLogger(__name__)

ICONDIR_FORMAT = '<HHH'
ICONDIRENTRY_FORMAT = '<BBBBHHII'
BITMAPINFOHEADER_FORMAT = '<IiiHHIIiiII'

ICONDIR_SIZE = struct.calcsize(ICONDIR_FORMAT)
ICONDIRENTRY_SIZE = struct.calcsize(ICONDIRENTRY_FORMAT)
BITMAPINFOHEADER_SIZE = struct.calcsize(BITMAPINFOHEADER_FORMAT)

ICON_TYPE = 1
BITS_PER_PIXEL = 32
MAX_ICON_SIZE = 256


@dataclass(frozen=True)
class IcoEntry:
    """A parsed ICONDIRENTRY."""
    width: int
    height: int
    planes: int
    bit_count: int
    size: int
    offset: int


def mask_row_size(width: int) -> int:
    """Bytes per AND-mask row: 1 bit per pixel, padded to 4 bytes."""
    return math.ceil(math.ceil(width / 8) / 4) * 4


def _check_rgba(pixels: np.ndarray) -> np.ndarray:
    arr = np.asarray(pixels)
    if arr.ndim != 3 or arr.shape[2] != 4:
        raise ExportError(f"Expected an (H, W, 4) RGBA array, got shape {arr.shape}")
    height, width = arr.shape[:2]
    if not (1 <= width <= MAX_ICON_SIZE and 1 <= height <= MAX_ICON_SIZE):
        raise ExportError(f"Icon images must be 1-{MAX_ICON_SIZE} px, got {width}x{height}")
    return arr.astype(np.uint8, copy=False)


def create_bmp_data(pixels: np.ndarray) -> bytes:
    """Encode an RGBA array as ICO-flavored BMP data.

    Args:
        pixels: (height, width, 4) uint8 array in R, G, B, A order, top row
            first.

    Returns:
        BITMAPINFOHEADER + bottom-up BGRA rows + zeroed AND mask.

    Raises:
        ExportError: If the array is not RGBA or exceeds 256 px.
    """
    arr = _check_rgba(pixels)
    height, width = arr.shape[:2]
    image_size = width * height * 4
    mask_size = mask_row_size(width) * height

    header = struct.pack(
        BITMAPINFOHEADER_FORMAT,
        BITMAPINFOHEADER_SIZE,  # header size
        width,
        height * 2,             # XOR bitmap + AND mask
        1,                      # planes
        BITS_PER_PIXEL,
        0,                      # BI_RGB
        image_size + mask_size,
        0, 0, 0, 0,
    )
    bgra = arr[::-1, :, [2, 1, 0, 3]]
    return header + np.ascontiguousarray(bgra).tobytes() + bytes(mask_size)


def create_ico_file(images: Sequence[np.ndarray]) -> bytes:
    """Pack RGBA arrays into one ICO file, in the given order.

    Raises:
        ExportError: If ``images`` is empty or an image is invalid.
    """
    if not images:
        raise ExportError("An icon needs at least one image")

    buffers = [create_bmp_data(img) for img in images]
    offset = ICONDIR_SIZE + ICONDIRENTRY_SIZE * len(buffers)

    parts = [struct.pack(ICONDIR_FORMAT, 0, ICON_TYPE, len(buffers))]
    for img, buf in zip(images, buffers):
        height, width = np.asarray(img).shape[:2]
        parts.append(struct.pack(
            ICONDIRENTRY_FORMAT,
            0 if width == MAX_ICON_SIZE else width,
            0 if height == MAX_ICON_SIZE else height,
            0,               # palette colors
            0,               # reserved
            1,               # color planes
            BITS_PER_PIXEL,
            len(buf),
            offset,
        ))
        offset += len(buf)
    parts.extend(buffers)

    data = b''.join(parts)
    logger.debug("ICO encoded: %d images, %d bytes", len(buffers), len(data))
    return data


def read_ico_directory(data: bytes) -> List[IcoEntry]:
    """Parse the header and directory of an ICO file.

    Raises:
        ExportError: If the data is not an ICO file.
    """
    if len(data) < ICONDIR_SIZE:
        raise ExportError("Truncated ICO header")
    reserved, kind, count = struct.unpack_from(ICONDIR_FORMAT, data, 0)
    if reserved != 0 or kind != ICON_TYPE:
        raise ExportError(f"Not an icon file (reserved={reserved}, type={kind})")
    if len(data) < ICONDIR_SIZE + count * ICONDIRENTRY_SIZE:
        raise ExportError("Truncated ICO directory")

    entries = []
    for i in range(count):
        w, h, _, _, planes, bits, size, offset = struct.unpack_from(
            ICONDIRENTRY_FORMAT, data, ICONDIR_SIZE + i * ICONDIRENTRY_SIZE)
        entries.append(IcoEntry(w or MAX_ICON_SIZE, h or MAX_ICON_SIZE, planes, bits, size, offset))
    return entries


def read_bmp_header(data: bytes, entry: IcoEntry) -> tuple:
    """Unpack the BITMAPINFOHEADER of one directory entry."""
    return struct.unpack_from(BITMAPINFOHEADER_FORMAT, data, entry.offset)
