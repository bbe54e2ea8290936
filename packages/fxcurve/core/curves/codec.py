"""Binary format for animation curve tables.

An effect's animation curves are stored as a table::

    offset 0      u32 little-endian curve count
    offset 4      curve 0, 160 bytes (byte j = frame j)
    offset 164    curve 1, 160 bytes
    ...

Helpers here convert between that layout and ``Curve`` lists. Writing into
emulated process memory is left to the caller; :func:`write_curve` only
patches a caller-owned buffer.
"""

from __future__ import annotations

import logging
import struct
from collections.abc import Sequence

from fxcurve.core.curves.models import CURVE_LENGTH, AnimCurve, Curve

logger = logging.getLogger(__name__)

COUNT_FORMAT = "<I"
HEADER_SIZE = struct.calcsize(COUNT_FORMAT)

# Sanity bound on the header count; real effects carry a handful of curves.
MAX_CURVE_COUNT = 256


def curve_offset(table_offset: int, index: int) -> int:
    """Byte offset of curve ``index`` (0-based) within a table at ``table_offset``."""
    return table_offset + HEADER_SIZE + index * CURVE_LENGTH


def curve_to_bytes(curve: Sequence[int | None]) -> bytes:
    """Encode a curve as 160 bytes.

    Missing or ``None`` samples encode as 0.

    Raises:
        ValueError: If a sample is outside [0, 255].
    """
    out = bytearray(CURVE_LENGTH)
    for i in range(min(len(curve), CURVE_LENGTH)):
        value = curve[i]
        out[i] = 0 if value is None else value
    return bytes(out)


def curve_from_bytes(data: bytes) -> Curve:
    """Decode a curve from exactly 160 bytes.

    Raises:
        ValueError: If ``data`` is not 160 bytes long.
    """
    if len(data) != CURVE_LENGTH:
        raise ValueError(f"curve data must be {CURVE_LENGTH} bytes, got {len(data)}")
    return AnimCurve.from_bytes(data).as_list()


def _read_u8(data: bytes, offset: int) -> int:
    return data[offset] if 0 <= offset < len(data) else 0


def parse_curve_table(data: bytes, table_offset: int = 0) -> list[Curve]:
    """Parse every curve from a curve table.

    Bytes past the end of ``data`` read as 0, so a truncated table still
    yields full-length curves.

    Args:
        data: Buffer holding the table (e.g. an effect file).
        table_offset: Offset of the table header within ``data``.

    Returns:
        Curves in table order.

    Raises:
        ValueError: If the header is missing or its count is implausible.
    """
    header = data[table_offset : table_offset + HEADER_SIZE]
    if len(header) < HEADER_SIZE:
        raise ValueError(f"no curve table header at offset {table_offset:#x}")

    (count,) = struct.unpack(COUNT_FORMAT, header)
    if count > MAX_CURVE_COUNT:
        raise ValueError(f"curve table count {count} exceeds {MAX_CURVE_COUNT}")

    table_end = curve_offset(table_offset, count)
    if table_end > len(data):
        logger.warning(
            "Curve table at %#x is truncated (%d of %d bytes); missing bytes read as 0",
            table_offset,
            max(0, len(data) - table_offset),
            table_end - table_offset,
        )

    curves: list[Curve] = []
    for index in range(count):
        base = curve_offset(table_offset, index)
        curves.append([_read_u8(data, base + i) for i in range(CURVE_LENGTH)])

    logger.debug("Parsed %d curves from table at %#x", count, table_offset)
    return curves


def serialize_curve_table(curves: Sequence[Sequence[int | None]]) -> bytes:
    """Encode curves as a complete table (header + curve bytes)."""
    out = bytearray(struct.pack(COUNT_FORMAT, len(curves)))
    for curve in curves:
        out.extend(curve_to_bytes(curve))
    return bytes(out)


def write_curve(
    buffer: bytearray, table_offset: int, index: int, curve: Sequence[int | None]
) -> None:
    """Overwrite one curve inside a buffer holding a curve table.

    Args:
        buffer: Mutable buffer holding the table.
        table_offset: Offset of the table header within ``buffer``.
        index: 0-based curve index.
        curve: Replacement curve; missing samples write 0.

    Raises:
        IndexError: If the curve does not fit inside ``buffer``.
    """
    base = curve_offset(table_offset, index)
    if index < 0 or base + CURVE_LENGTH > len(buffer):
        raise IndexError(f"curve {index} at {base:#x} does not fit in buffer")
    buffer[base : base + CURVE_LENGTH] = curve_to_bytes(curve)
