"""Splitting a file into block pieces and joining them back."""

from __future__ import annotations

import itertools
import os
from dataclasses import dataclass
from typing import BinaryIO, Iterator

from fsplitter.blocks import (
    CHUNK_SIZE,
    Block,
    BlockError,
    compress_data,
    decompress_data,
    read_block,
    write_block,
)

DEFAULT_BLOCK_SIZE = 4096


class FsplitterError(Exception):
    """Raised when splitting or joining cannot go on."""


@dataclass
class SplitOptions:
    """Settings for splitting one file."""

    filename: str | None = None
    output: str = "."
    compress: bool = False
    block_size: int = DEFAULT_BLOCK_SIZE


@dataclass
class JoinOptions:
    """Settings for joining the pieces in a directory."""

    dirname: str = "."
    output: str | None = None
    compress: bool = False


def block_path(directory: str, index: int) -> str:
    """Return the path of piece number ``index`` inside ``directory``."""
    return os.path.join(directory, f"block_{index}.fsp")


def check_directory(dirname: str) -> None:
    """Make sure ``dirname`` exists and is writable, creating it if needed."""
    if os.path.isdir(dirname):
        if not os.access(dirname, os.W_OK):
            raise FsplitterError(f"Can't write on the directory: {dirname}")
        return
    try:
        os.mkdir(dirname, 0o777)
    except OSError as exc:
        raise FsplitterError(f"Error creating the directory: {dirname}") from exc


def _open_for_writing(path: str) -> BinaryIO:
    try:
        return open(path, "wb")
    except OSError as exc:
        raise FsplitterError(f"Error opening: {path}") from exc


def _make_block(chunk: bytes, compress: bool) -> Block:
    if compress and chunk:
        return compress_data(chunk)
    return Block.raw(chunk)


def split_file(options: SplitOptions) -> list[str]:
    """Split ``options.filename`` into pieces; return the piece paths in order."""
    source = options.filename
    if source is None or not os.path.exists(source):
        raise FsplitterError(f"Missing file: {source}")
    if not os.access(source, os.R_OK):
        raise FsplitterError(f"Permissions error on the file: {source}")

    check_directory(options.output)

    pieces: list[str] = []
    dest: BinaryIO | None = None
    written: int | None = None
    try:
        with open(source, "rb") as src:
            while True:
                chunk = src.read(CHUNK_SIZE)
                if written is None or written >= options.block_size:
                    if dest is not None:
                        write_block(Block.terminator(), dest)
                        dest.close()
                    path = block_path(options.output, len(pieces))
                    dest = _open_for_writing(path)
                    pieces.append(path)
                    written = 0
                block = _make_block(chunk, options.compress)
                written += block.block_size
                write_block(block, dest)
                if len(chunk) < CHUNK_SIZE:
                    break
    finally:
        if dest is not None:
            dest.close()
    return pieces


def _piece_payloads(stream: BinaryIO, path: str) -> Iterator[bytes]:
    """Yield the plain bytes held by one piece file."""
    while True:
        try:
            block = read_block(stream)
        except BlockError as exc:
            raise FsplitterError(f"Error reading file {path}") from exc
        if block.block_size == 0:
            return
        if block.compression:
            try:
                block = decompress_data(block)
            except BlockError as exc:
                raise FsplitterError(f"Error decompressing {path}") from exc
        yield block.data
        if block.original_size < CHUNK_SIZE:
            return


def join_files(options: JoinOptions) -> int:
    """Join the pieces of ``options.dirname`` into ``options.output``.

    Returns the number of bytes written.
    """
    dirname = options.dirname
    if not os.access(dirname, os.R_OK):
        raise FsplitterError(f"Permissions error on the directory: {dirname}")
    if options.output is None:
        raise FsplitterError("Missing output file")

    total = 0
    with _open_for_writing(options.output) as dest:
        for index in itertools.count():
            path = block_path(dirname, index)
            if not os.path.exists(path):
                break
            try:
                src = open(path, "rb")
            except OSError as exc:
                raise FsplitterError(f"Error opening: {dirname}") from exc
            with src:
                for payload in _piece_payloads(src, path):
                    dest.write(payload)
                    total += len(payload)
    return total