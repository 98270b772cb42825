import io
import zlib

import pytest

from fsplitter.blocks import (
    CHUNK_SIZE,
    HEADER_SIZE,
    Block,
    BlockError,
    compress_data,
    decompress_data,
    read_block,
    write_block,
)


def test_header_layout_of_raw_block():
    stream = io.BytesIO()
    write_block(Block(3, 3, False, b"abc"), stream)
    expected = b"\x03" + b"\x00" * 7 + b"\x03" + b"\x00" * 7 + b"\x00" + b"abc"
    assert stream.getvalue() == expected


def test_terminator_is_all_zero_header():
    stream = io.BytesIO()
    write_block(Block.terminator(), stream)
    assert stream.getvalue() == b"\x00" * HEADER_SIZE


def test_compression_flag_byte():
    stream = io.BytesIO()
    block = compress_data(b"hello hello hello")
    write_block(block, stream)
    raw = stream.getvalue()
    assert raw[16] == 1
    assert raw[HEADER_SIZE:] == block.data


@pytest.mark.parametrize("payload", [b"x", b"abc" * 100, bytes(range(256)) * 4])
def test_write_read_round_trip(payload):
    stream = io.BytesIO()
    block = Block.raw(payload)
    write_block(block, stream)
    stream.seek(0)
    assert read_block(stream) == block


def test_read_several_blocks_in_order():
    stream = io.BytesIO()
    first, second = Block.raw(b"one"), compress_data(b"two" * 50)
    for block in (first, second, Block.terminator()):
        write_block(block, stream)
    stream.seek(0)
    assert read_block(stream) == first
    assert read_block(stream) == second
    assert read_block(stream).block_size == 0


@pytest.mark.parametrize("payload", [b"a", b"abcdef" * 300, bytes(CHUNK_SIZE)])
def test_compress_decompress_round_trip(payload):
    block = compress_data(payload)
    assert block.compression is True
    assert block.original_size == len(payload)
    assert block.block_size == len(block.data)
    assert zlib.decompress(block.data) == payload
    restored = decompress_data(block)
    assert restored == Block.raw(payload)


def test_compress_empty_raises():
    with pytest.raises(BlockError):
        compress_data(b"")


def test_decompress_zero_original_size_returns_same_block():
    block = Block(0, 0, True, b"")
    assert decompress_data(block) is block


def test_decompress_corrupt_data_raises():
    with pytest.raises(BlockError):
        decompress_data(Block(4, 10, True, b"junk"))


def test_decompress_size_mismatch_raises():
    packed = zlib.compress(b"abc")
    with pytest.raises(BlockError):
        decompress_data(Block(len(packed), 5, True, packed))


def test_read_truncated_header_raises():
    with pytest.raises(BlockError):
        read_block(io.BytesIO(b"\x01\x02"))


def test_read_truncated_payload_raises():
    stream = io.BytesIO()
    write_block(Block.raw(b"abcdef"), stream)
    truncated = io.BytesIO(stream.getvalue()[:-2])
    with pytest.raises(BlockError):
        read_block(truncated)