"""Block records: the unit stored inside every piece file."""

from __future__ import annotations

import struct
import zlib
from dataclasses import dataclass
from typing import BinaryIO

CHUNK_SIZE = 1024

# block_size, original_size (both 64-bit unsigned), compression flag (one byte)
_HEADER = struct.Struct("<QQ?")
HEADER_SIZE = _HEADER.size


class BlockError(Exception):
    """Raised when a block cannot be compressed, decompressed or read."""


@dataclass(frozen=True)
class Block:
    """One record of a piece file: a header followed by ``block_size`` bytes."""

    block_size: int
    original_size: int
    compression: bool
    data: bytes = b""

    @classmethod
    def terminator(cls) -> "Block":
        """Return the empty block that marks the end of a piece file."""
        return cls(0, 0, False, b"")

    @classmethod
    def raw(cls, data: bytes) -> "Block":
        """Return an uncompressed block holding ``data``."""
        return cls(len(data), len(data), False, bytes(data))


def compress_data(data: bytes) -> Block:
    """Compress ``data`` with zlib into a compressed block."""
    if not data:
        raise BlockError("cannot compress empty data")
    try:
        packed = zlib.compress(bytes(data))
    except zlib.error as exc:
        raise BlockError(f"compression failed: {exc}") from exc
    return Block(len(packed), len(data), True, packed)


def decompress_data(block: Block) -> Block:
    """Return the uncompressed form of a compressed block."""
    if block.original_size == 0:
        return block
    try:
        plain = zlib.decompress(block.data[: block.block_size])
    except zlib.error as exc:
        raise BlockError(f"decompression failed: {exc}") from exc
    if len(plain) != block.original_size:
        raise BlockError(
            f"decompressed {len(plain)} bytes, expected {block.original_size}"
        )
    return Block(block.original_size, block.original_size, False, plain)


def write_block(block: Block, stream: BinaryIO) -> None:
    """Write ``block`` (header, then payload if any) to ``stream``."""
    stream.write(_HEADER.pack(block.block_size, block.original_size, block.compression))
    if block.data and block.block_size:
        stream.write(block.data[: block.block_size])


def read_block(stream: BinaryIO) -> Block:
    """Read one block from ``stream``."""
    header = stream.read(HEADER_SIZE)
    if len(header) != HEADER_SIZE:
        raise BlockError("Error reading file: truncated block header")
    block_size, original_size, compression = _HEADER.unpack(header)
    if block_size == 0:
        return Block(0, original_size, compression, b"")
    data = stream.read(block_size)
    if len(data) != block_size:
        raise BlockError("Error reading file")
    return Block(block_size, original_size, compression, data)